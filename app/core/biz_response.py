from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.payload import format_errors
from app.schemas.common import HTTPError, MessageResponse


class BizResponse(JSONResponse):
    """
    统一响应：
    - status_code >= 400：{"code": <int>, "message": <str>}
    - 只有 msg 没有 data：{"message": <str>}
    - 其余情况直接序列化 data（实体 / 实体列表）
    """

    def __init__(self, data: Any = None, msg: Optional[str] = None, status_code: int = 200):
        if status_code >= 400:
            content = HTTPError(code=status_code, message=msg or "").model_dump()
        elif data is None and msg is not None:
            content = MessageResponse(message=msg).model_dump()
        else:
            content = jsonable_encoder(data)
        super().__init__(content=content, status_code=status_code)


def validation_message(exc: RequestValidationError) -> str:
    return format_errors(exc.errors())
