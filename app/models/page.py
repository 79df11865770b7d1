from sqlalchemy import Column, Integer, String, Text, TIMESTAMP
from app.models.base import Base
from app.core.time import now_utc

class Page(Base):
    """ 页面表，独立资源，没有任何关联。

        CREATE TABLE IF NOT EXISTS pages (
            id INT UNSIGNED AUTO_INCREMENT PRIMARY KEY,       -- 主键（自增）
            title VARCHAR(255) NOT NULL,                      -- 页面标题
            content TEXT NOT NULL,                            -- 页面内容
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,   -- 创建时间
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP    -- 更新时间
        );
    """

    __tablename__ = "pages"

    id = Column(Integer, primary_key=True, autoincrement=True)                          # 主键
    title = Column(String(255), nullable=False)                                         # 页面标题
    content = Column(Text, nullable=False)                                              # 页面内容
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc, nullable=False)      # 创建时间
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)  # 更新时间
