from pydantic import BaseModel


class HTTPError(BaseModel):
    """错误响应体：{"code": 404, "message": "Page not found"}"""
    code: int
    message: str


class MessageResponse(BaseModel):
    """操作成功的提示响应体：{"message": "Page deleted successfully"}"""
    message: str
