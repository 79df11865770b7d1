from typing import List

from fastapi import APIRouter, Depends

from app.schemas.media import MediaCreate, MediaOut
from app.schemas.common import HTTPError, MessageResponse
from app.core.biz_response import BizResponse
from app.service import media_svc

from app.storage.database import get_media_repo
from app.storage.media.media_interface import IMediaRepository

from app.core.exceptions import InvalidArgument, NotFound
from app.core.db import db_error_message
from app.core.logx import logger

media_router = APIRouter(prefix="/media", tags=["media"])

_errors = {400: {"model": HTTPError}, 404: {"model": HTTPError}, 500: {"model": HTTPError}}


@media_router.get("", response_model=List[MediaOut], responses={500: {"model": HTTPError}})
def list_media(media_repo: IMediaRepository = Depends(get_media_repo)):
    try:
        items = media_svc.list_media(media_repo=media_repo, to_dict=True)
        return BizResponse(data=items)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


@media_router.get("/{media_id}", response_model=MediaOut, responses=_errors)
def get_media(media_id: str, media_repo: IMediaRepository = Depends(get_media_repo)):
    try:
        media = media_svc.get_media(media_repo=media_repo, raw_id=media_id, to_dict=True)
        return BizResponse(data=media)
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except NotFound as e:
        return BizResponse(msg=e.message, status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


@media_router.post("", response_model=MediaOut, status_code=201, responses=_errors)
def create_media(payload: MediaCreate, media_repo: IMediaRepository = Depends(get_media_repo)):
    """
    创建媒体：url / type 必填
    """
    try:
        media = media_svc.create_media(media_repo=media_repo, data=payload, to_dict=True)
        return BizResponse(data=media, status_code=201)
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


@media_router.delete("/{media_id}", response_model=MessageResponse, responses=_errors)
def delete_media(media_id: str, media_repo: IMediaRepository = Depends(get_media_repo)):
    """
    删除媒体：同时解除所有帖子对它的引用
    """
    try:
        media_svc.delete_media(media_repo=media_repo, raw_id=media_id)
        return BizResponse(msg="Media deleted successfully")
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except NotFound as e:
        return BizResponse(msg=e.message, status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)
