from typing import Optional, List
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.media import MediaOut


class PostCreate(BaseModel):
    """
    创建帖子：
    - title / content 必填，是否为空在业务层显式校验
    - author 可选
    - 创建时不关联媒体
    """
    title: Optional[str] = ""
    content: Optional[str] = ""
    author: Optional[str] = ""

    model_config = ConfigDict(extra="ignore")


class PostUpdate(BaseModel):
    """
    更新帖子（merge-patch）：
    - 只有非空字段才会覆盖原值
    - 未传或传空字符串的字段保持不变
    """
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    def patch_fields(self) -> dict:
        """返回需要覆盖的非空字段"""
        return {k: v for k, v in self.model_dump().items() if v}


class PostFilter(BaseModel):
    """
    帖子列表筛选条件：
    - title: 标题不区分大小写的子串匹配
    - author: 作者精确匹配
    两者同时存在时取交集
    """
    title: Optional[str] = None
    author: Optional[str] = None


class PostOut(BaseModel):
    id: int
    title: str
    content: str
    author: str = ""
    created_at: datetime
    updated_at: datetime
    media: List[MediaOut] = Field(default_factory=list)   # 关联的媒体

    model_config = ConfigDict(from_attributes=True)

    @field_validator("author", mode="before")
    @classmethod
    def _author_none_to_empty(cls, v):
        return v or ""
