from typing import Dict, List

from app.schemas.page import PageCreate, PageUpdate, PageOut
from app.storage.page.page_interface import IPageRepository

from app.core.ids import parse_id
from app.core.payload import parse_payload
from app.core.logx import logger
from app.core.exceptions import PageNotFound


def list_pages(page_repo: IPageRepository, to_dict: bool = True) -> List[Dict] | List[PageOut]:
    """获取全部页面（不分页）"""
    pages = page_repo.list_pages()
    return [p.model_dump() for p in pages] if to_dict else pages


def get_page(page_repo: IPageRepository, raw_id: str, to_dict: bool = True) -> Dict | PageOut:
    """
    获取单个页面：
    - raw_id 不是正整数 -> InvalidID
    - 查不到 -> PageNotFound
    """
    page_id = parse_id(raw_id, "page")
    page = page_repo.get_by_id(page_id)
    if not page:
        raise PageNotFound(page_id)
    return page.model_dump() if to_dict else page


def create_page(page_repo: IPageRepository, data: PageCreate, to_dict: bool = True) -> Dict | PageOut:
    page = page_repo.create(data)
    logger.info(f"Created page id={page.id}")
    return page.model_dump() if to_dict else page


def update_page(page_repo: IPageRepository, raw_id: str, raw_payload: bytes, to_dict: bool = True) -> Dict | PageOut:
    """
    更新页面（整体覆盖 title / content）：
    1. 校验 ID，确认页面存在
    2. 再解析请求体（非法请求体 -> InvalidArgument）
    - 与帖子不同，这里空字符串也会覆盖原值
    """
    page_id = parse_id(raw_id, "page")
    if not page_repo.get_by_id(page_id):
        raise PageNotFound(page_id)

    data = parse_payload(PageUpdate, raw_payload)
    page = page_repo.update(page_id, data)
    if not page:
        logger.warning(f"Update page failed, id={page_id} not found")
        raise PageNotFound(page_id)
    logger.info(f"Updated page id={page_id}")
    return page.model_dump() if to_dict else page


def delete_page(page_repo: IPageRepository, raw_id: str) -> bool:
    page_id = parse_id(raw_id, "page")
    ok = page_repo.delete(page_id)
    if not ok:
        logger.warning(f"Delete page failed, id={page_id} not found")
        raise PageNotFound(page_id)
    logger.info(f"Deleted page id={page_id}")
    return ok
