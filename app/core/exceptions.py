# domain_exceptions.py
from typing import Optional


class InvalidArgument(Exception):
    """
    请求参数不合法时抛出（对应 400）：
    - 路径中的 ID 不是正整数
    - 必填字段为空
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidID(InvalidArgument):
    """路径 ID 无法解析为正整数"""
    def __init__(self, entity: str, raw: Optional[str] = None):
        self.entity = entity
        self.raw = raw
        super().__init__(f"Invalid {entity} ID")


class MissingRequiredFields(InvalidArgument):
    """创建资源时缺少必填字段"""
    def __init__(self, message: str):
        super().__init__(message)


class NotFound(Exception):
    """
    按 ID 查询不到记录时抛出（对应 404）
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PageNotFound(NotFound):
    """找不到页面"""
    def __init__(self, page_id: Optional[int] = None, message: str = "Page not found"):
        self.page_id = page_id
        super().__init__(message)


class PostNotFound(NotFound):
    """找不到帖子"""
    def __init__(self, post_id: Optional[int] = None, message: str = "Post not found"):
        self.post_id = post_id
        super().__init__(message)


class MediaNotFound(NotFound):
    """找不到媒体"""
    def __init__(self, media_id: Optional[int] = None, message: str = "Media not found"):
        self.media_id = media_id
        super().__init__(message)
