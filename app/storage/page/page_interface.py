# app/storage/page/page_interface.py

from typing import Optional, List, Protocol

from app.schemas.page import PageCreate, PageUpdate, PageOut


class IPageRepository(Protocol):
    """
    页面仓库接口协议（数据层抽象接口）
    业务层依赖本接口，而不是具体实现，方便后续替换为不同数据源
    """

    def list_pages(self) -> List[PageOut]:
        """返回全部页面（按 id 升序），不分页"""
        ...

    def get_by_id(self, page_id: int) -> Optional[PageOut]:
        """根据主键获取页面，未找到返回 None"""
        ...

    def create(self, data: PageCreate) -> PageOut:
        """创建页面，返回带 id 和时间戳的完整记录"""
        ...

    def update(self, page_id: int, data: PageUpdate) -> Optional[PageOut]:
        """
        整体覆盖 title / content
        - 未找到返回 None
        """
        ...

    def delete(self, page_id: int) -> bool:
        """硬删除页面，返回是否删除成功"""
        ...
