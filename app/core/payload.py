from typing import Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from app.core.exceptions import InvalidArgument

M = TypeVar("M", bound=BaseModel)


def format_errors(errors) -> str:
    """
    把 pydantic 的错误列表拼成一条可读信息，例如：
    "title: Field required; content: Input should be a valid string"
    """
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid request")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid request body"


async def raw_body(request: Request) -> bytes:
    """
    读取原始请求体，交给业务层在校验完路径 ID 之后再解析
    """
    return await request.body()


def parse_payload(model: Type[M], raw: bytes) -> M:
    """
    把原始 JSON 解析为请求模型：
    - JSON 不合法或字段类型不符 -> InvalidArgument
    """
    try:
        return model.model_validate_json(raw or b"")
    except ValidationError as e:
        raise InvalidArgument(format_errors(e.errors()))
