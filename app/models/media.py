from sqlalchemy import Column, Integer, String, TIMESTAMP
from app.models.base import Base
from app.core.time import now_utc

class Media(Base):
    """ 媒体表，存储图片 / 视频等资源的地址和类型，通过 post_media 与帖子多对多关联。

        CREATE TABLE IF NOT EXISTS media (
            id INT UNSIGNED AUTO_INCREMENT PRIMARY KEY,       -- 主键（自增）
            url VARCHAR(512) NOT NULL,                        -- 资源地址
            type VARCHAR(50) NOT NULL,                        -- 资源类型（image / video ...，不做枚举限制）
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,   -- 创建时间
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP    -- 更新时间
        );
    """

    __tablename__ = "media"

    id = Column(Integer, primary_key=True, autoincrement=True)
    url = Column(String(512), nullable=False)
    type = Column(String(50), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)
