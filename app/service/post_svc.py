from typing import Dict, List

from app.schemas.post import PostCreate, PostUpdate, PostFilter, PostOut
from app.storage.post.post_interface import IPostRepository
from app.storage.media.media_interface import IMediaRepository

from app.core.ids import parse_id
from app.core.payload import parse_payload
from app.core.logx import logger
from app.core.exceptions import PostNotFound, MediaNotFound, MissingRequiredFields


#---------------------------------------- 查 -----------------------------------------

def list_posts(post_repo: IPostRepository, filters: PostFilter, to_dict: bool = True) -> List[Dict] | List[PostOut]:
    """
    获取帖子列表（含关联媒体）：
    - title: 不区分大小写的子串匹配
    - author: 精确匹配
    """
    posts = post_repo.list_posts(filters)
    return [p.model_dump() for p in posts] if to_dict else posts


def get_post(post_repo: IPostRepository, raw_id: str, to_dict: bool = True) -> Dict | PostOut:
    post_id = parse_id(raw_id, "post")
    post = post_repo.get_by_id(post_id)
    if not post:
        raise PostNotFound(post_id)
    return post.model_dump() if to_dict else post


#------------------------------------- 增，改，删 --------------------------------------

def create_post(post_repo: IPostRepository, data: PostCreate, to_dict: bool = True) -> Dict | PostOut:
    """
    创建帖子：
    1. 校验 title / content 非空
    2. 写入 posts 表（此时不关联媒体）
    """
    if not data.title or not data.content:
        raise MissingRequiredFields("Title and content are required")

    post = post_repo.create(data)
    logger.info(f"Created post id={post.id} author={post.author!r}")
    return post.model_dump() if to_dict else post


def update_post(post_repo: IPostRepository, raw_id: str, raw_payload: bytes, to_dict: bool = True) -> Dict | PostOut:
    """
    更新帖子（merge-patch）：
    1. 校验 ID，确认帖子存在
    2. 再解析请求体
    - title / content / author 只有非空时才覆盖
    """
    post_id = parse_id(raw_id, "post")
    if not post_repo.get_by_id(post_id):
        raise PostNotFound(post_id)

    data = parse_payload(PostUpdate, raw_payload)
    post = post_repo.update(post_id, data)
    if not post:
        logger.warning(f"Update post failed, id={post_id} not found")
        raise PostNotFound(post_id)
    logger.info(f"Updated post id={post_id} with data={data.patch_fields()}")
    return post.model_dump() if to_dict else post


def delete_post(post_repo: IPostRepository, raw_id: str) -> bool:
    """
    删除帖子：
    - post_media 中的关联行在同一事务里一起删除
    """
    post_id = parse_id(raw_id, "post")
    ok = post_repo.delete(post_id)
    if not ok:
        logger.warning(f"Delete post failed, id={post_id} not found")
        raise PostNotFound(post_id)
    logger.info(f"Deleted post id={post_id}")
    return ok


#------------------------------------- 媒体关联 --------------------------------------

def _resolve_link(post_repo: IPostRepository, media_repo: IMediaRepository, raw_post_id: str, raw_media_id: str):
    post_id = parse_id(raw_post_id, "post")
    media_id = parse_id(raw_media_id, "media")
    if not post_repo.get_by_id(post_id):
        raise PostNotFound(post_id)
    if not media_repo.get_by_id(media_id):
        raise MediaNotFound(media_id)
    return post_id, media_id


def attach_media(
    post_repo: IPostRepository,
    media_repo: IMediaRepository,
    raw_post_id: str,
    raw_media_id: str,
    to_dict: bool = True,) -> Dict | PostOut:
    """
    给帖子关联一个已有媒体（重复关联不报错）
    """
    post_id, media_id = _resolve_link(post_repo, media_repo, raw_post_id, raw_media_id)
    post_repo.attach_media(post_id, media_id)
    logger.info(f"Attached media id={media_id} to post id={post_id}")

    post = post_repo.get_by_id(post_id)
    return post.model_dump() if to_dict else post


def detach_media(
    post_repo: IPostRepository,
    media_repo: IMediaRepository,
    raw_post_id: str,
    raw_media_id: str,
    to_dict: bool = True,) -> Dict | PostOut:
    """
    解除帖子与媒体的关联（本来没关联也视为成功）
    """
    post_id, media_id = _resolve_link(post_repo, media_repo, raw_post_id, raw_media_id)
    if post_repo.detach_media(post_id, media_id):
        logger.info(f"Detached media id={media_id} from post id={post_id}")

    post = post_repo.get_by_id(post_id)
    return post.model_dump() if to_dict else post
