from typing import List

from fastapi import APIRouter, Depends

from app.schemas.page import PageCreate, PageUpdate, PageOut
from app.schemas.common import HTTPError, MessageResponse
from app.core.biz_response import BizResponse
from app.service import page_svc

from app.storage.database import get_page_repo
from app.storage.page.page_interface import IPageRepository

from app.core.exceptions import InvalidArgument, NotFound
from app.core.db import db_error_message
from app.core.payload import raw_body
from app.core.logx import logger

pages_router = APIRouter(prefix="/pages", tags=["pages"])

_errors = {400: {"model": HTTPError}, 404: {"model": HTTPError}, 500: {"model": HTTPError}}


@pages_router.get("", response_model=List[PageOut], responses={500: {"model": HTTPError}})
def list_pages(page_repo: IPageRepository = Depends(get_page_repo)):
    """
    获取全部页面（不分页）
    """
    try:
        pages = page_svc.list_pages(page_repo=page_repo, to_dict=True)
        return BizResponse(data=pages)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


@pages_router.get("/{page_id}", response_model=PageOut, responses=_errors)
def get_page(page_id: str, page_repo: IPageRepository = Depends(get_page_repo)):
    try:
        page = page_svc.get_page(page_repo=page_repo, raw_id=page_id, to_dict=True)
        return BizResponse(data=page)
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except NotFound as e:
        return BizResponse(msg=e.message, status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


@pages_router.post("", response_model=PageOut, status_code=201, responses=_errors)
def create_page(payload: PageCreate, page_repo: IPageRepository = Depends(get_page_repo)):
    """
    创建页面：
    - title / content 由 PageCreate 校验（非空，title 最长 255）
    """
    try:
        page = page_svc.create_page(page_repo=page_repo, data=payload, to_dict=True)
        return BizResponse(data=page, status_code=201)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


@pages_router.put(
    "/{page_id}",
    response_model=PageOut,
    responses=_errors,
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": PageUpdate.model_json_schema()}}}},
)
def update_page(page_id: str, payload: bytes = Depends(raw_body), page_repo: IPageRepository = Depends(get_page_repo)):
    """
    更新页面：整体覆盖 title / content（空值也会写入）
    """
    try:
        page = page_svc.update_page(page_repo=page_repo, raw_id=page_id, raw_payload=payload, to_dict=True)
        return BizResponse(data=page)
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except NotFound as e:
        return BizResponse(msg=e.message, status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)


@pages_router.delete("/{page_id}", response_model=MessageResponse, responses=_errors)
def delete_page(page_id: str, page_repo: IPageRepository = Depends(get_page_repo)):
    try:
        page_svc.delete_page(page_repo=page_repo, raw_id=page_id)
        return BizResponse(msg="Page deleted successfully")
    except InvalidArgument as e:
        return BizResponse(msg=e.message, status_code=400)
    except NotFound as e:
        return BizResponse(msg=e.message, status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(msg=db_error_message(e), status_code=500)
