from typing import Optional
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class MediaCreate(BaseModel):
    """
    创建媒体：
    - url / type 必填，是否为空在业务层显式校验
    - type 不做枚举限制（image / video / ...）
    """
    url: Optional[str] = ""
    type: Optional[str] = ""

    model_config = ConfigDict(extra="ignore")


class MediaOut(BaseModel):
    id: int
    url: str
    type: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
