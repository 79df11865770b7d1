from typing import Dict, List

from app.schemas.media import MediaCreate, MediaOut
from app.storage.media.media_interface import IMediaRepository

from app.core.ids import parse_id
from app.core.logx import logger
from app.core.exceptions import MediaNotFound, MissingRequiredFields


def list_media(media_repo: IMediaRepository, to_dict: bool = True) -> List[Dict] | List[MediaOut]:
    items = media_repo.list_media()
    return [m.model_dump() for m in items] if to_dict else items


def get_media(media_repo: IMediaRepository, raw_id: str, to_dict: bool = True) -> Dict | MediaOut:
    media_id = parse_id(raw_id, "media")
    media = media_repo.get_by_id(media_id)
    if not media:
        raise MediaNotFound(media_id)
    return media.model_dump() if to_dict else media


def create_media(media_repo: IMediaRepository, data: MediaCreate, to_dict: bool = True) -> Dict | MediaOut:
    """
    创建媒体：
    - url 和 type 都不能为空
    """
    if not data.url or not data.type:
        raise MissingRequiredFields("URL and type are required")

    media = media_repo.create(data)
    logger.info(f"Created media id={media.id} type={media.type}")
    return media.model_dump() if to_dict else media


def delete_media(media_repo: IMediaRepository, raw_id: str) -> bool:
    """
    删除媒体：
    - 仍被帖子引用的媒体也允许删除，关联关系会被一并解除
    """
    media_id = parse_id(raw_id, "media")
    ok = media_repo.delete(media_id)
    if not ok:
        logger.warning(f"Delete media failed, id={media_id} not found")
        raise MediaNotFound(media_id)
    logger.info(f"Deleted media id={media_id}")
    return ok
