from typing import List, Optional

from fastapi import APIRouter, Depends

from app.schemas.post import PostCreate, PostUpdate, PostFilter, PostOut
from app.schemas.common import HTTPError, MessageResponse
from app.core.biz_response import BizResponse
from app.service import post_svc

from app.storage.database import get_post_repo, get_media_repo
from app.storage.post.post_interface import IPostRepository
from app.storage.media.media_interface import IMediaRepository

from app.core.exceptions import InvalidArgument, NotFound
from app.core.db import db_error_message
from app.core.payload import raw_body
from app.core.logx import logger

posts_router = APIRouter(prefix="/posts", tags=["posts"])

_errors = {400: {"model": HTTPError}, 404: {"model": HTTPError}, 500: {"model": HTTPError}}


# --------------------------------- 查询帖子 ---------------------------------
@posts_router.get("", response_model=List[PostOut], responses={500: {"model": HTTPError}})
def list_posts(
    title: Optional[str] = None,
    author: Optional[str] = None,
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    获取帖子列表（含关联媒体）：
    - ?title=  标题不区分大小写的子串匹配
    - ?author= 作者精确匹配
    """
    try:
        posts = post_svc.list_posts(
            post_repo=post_repo,
            filters=PostFilter(title=title, author=author),
            to_dict=True,
        )
        return BizResponse(data=posts)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


@posts_router.get("/{post_id}", response_model=PostOut, responses=_errors)
def get_post(post_id: str, post_repo: IPostRepository = Depends(get_post_repo)):
    try:
        post = post_svc.get_post(post_repo=post_repo, raw_id=post_id, to_dict=True)
        return BizResponse(data=post)
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except NotFound as e:
        return BizResponse(msg=e.message, status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


# --------------------------------- 创建，更新，删除 ---------------------------------
@posts_router.post("", response_model=PostOut, status_code=201, responses=_errors)
def create_post(payload: PostCreate, post_repo: IPostRepository = Depends(get_post_repo)):
    """
    创建帖子：
    - title / content 必填，author 可选
    - 创建时不关联媒体
    """
    try:
        post = post_svc.create_post(post_repo=post_repo, data=payload, to_dict=True)
        return BizResponse(data=post, status_code=201)
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


@posts_router.put(
    "/{post_id}",
    response_model=PostOut,
    responses=_errors,
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": PostUpdate.model_json_schema()}}}},
)
def update_post(post_id: str, payload: bytes = Depends(raw_body), post_repo: IPostRepository = Depends(get_post_repo)):
    """
    更新帖子（merge-patch）：只覆盖非空字段
    """
    try:
        post = post_svc.update_post(post_repo=post_repo, raw_id=post_id, raw_payload=payload, to_dict=True)
        return BizResponse(data=post)
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except NotFound as e:
        return BizResponse(msg=e.message, status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


@posts_router.delete("/{post_id}", response_model=MessageResponse, responses=_errors)
def delete_post(post_id: str, post_repo: IPostRepository = Depends(get_post_repo)):
    try:
        post_svc.delete_post(post_repo=post_repo, raw_id=post_id)
        return BizResponse(msg="Post deleted successfully")
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except NotFound as e:
        return BizResponse(msg=e.message, status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


# --------------------------------- 媒体关联 ---------------------------------
@posts_router.post("/{post_id}/media/{media_id}", response_model=PostOut, responses=_errors)
def attach_media(
    post_id: str,
    media_id: str,
    post_repo: IPostRepository = Depends(get_post_repo),
    media_repo: IMediaRepository = Depends(get_media_repo),
):
    """
    给帖子关联已有媒体（重复关联不报错）
    """
    try:
        post = post_svc.attach_media(
            post_repo=post_repo,
            media_repo=media_repo,
            raw_post_id=post_id,
            raw_media_id=media_id,
            to_dict=True,
        )
        return BizResponse(data=post)
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except NotFound as e:
        return BizResponse(msg=e.message, status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


@posts_router.delete("/{post_id}/media/{media_id}", response_model=PostOut, responses=_errors)
def detach_media(
    post_id: str,
    media_id: str,
    post_repo: IPostRepository = Depends(get_post_repo),
    media_repo: IMediaRepository = Depends(get_media_repo),
):
    """
    解除帖子与媒体的关联
    """
    try:
        post = post_svc.detach_media(
            post_repo=post_repo,
            media_repo=media_repo,
            raw_post_id=post_id,
            raw_media_id=media_id,
            to_dict=True,
        )
        return BizResponse(data=post)
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except NotFound as e:
        return BizResponse(msg=e.message, status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)
