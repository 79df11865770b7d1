from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PageCreate(BaseModel):
    """
    创建页面：
    - title / content 必填且不能为空
    - title 最长 255（与 pages.title 一致）
    """
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)

    model_config = ConfigDict(extra="ignore")


class PageUpdate(BaseModel):
    """
    更新页面（整体覆盖）：
    - title / content 无论是否为空都会覆盖原值
    - 未传的字段按空字符串处理
    """
    title: str = ""
    content: str = ""

    model_config = ConfigDict(extra="ignore")


class PageOut(BaseModel):
    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
