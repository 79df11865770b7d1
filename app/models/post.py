from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey, Table, Index
from sqlalchemy.orm import relationship
from app.models.base import Base
from app.models.media import Media
from app.core.time import now_utc

# 帖子与媒体的多对多关联表
#
#   CREATE TABLE IF NOT EXISTS post_media (
#       post_id INT UNSIGNED NOT NULL,                    -- FK -> posts.id
#       media_id INT UNSIGNED NOT NULL,                   -- FK -> media.id
#       PRIMARY KEY (post_id, media_id),
#       FOREIGN KEY (post_id) REFERENCES posts(id) ON DELETE CASCADE,
#       FOREIGN KEY (media_id) REFERENCES media(id) ON DELETE CASCADE
#   );
post_media = Table(
    "post_media",
    Base.metadata,
    Column("post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
    Column("media_id", Integer, ForeignKey("media.id", ondelete="CASCADE"), primary_key=True),
    Index("idx_post_media_media_id", "media_id"),
)


class Post(Base):
    """ 帖子表，存储标题、内容、作者，并通过 post_media 关联媒体。

        CREATE TABLE IF NOT EXISTS posts (
            id INT UNSIGNED AUTO_INCREMENT PRIMARY KEY,       -- 主键（自增）
            title VARCHAR(255) NOT NULL,                      -- 帖子标题
            content TEXT NOT NULL,                            -- 帖子内容
            author VARCHAR(100) DEFAULT '',                   -- 作者（可选）
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,   -- 创建时间
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP    -- 更新时间
        );

        -- 按作者精确筛选
        CREATE INDEX idx_posts_author ON posts (author);
    """

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)                     # 帖子标题
    content = Column(Text, nullable=False)                          # 帖子内容
    author = Column(String(100), nullable=True, default="")         # 作者
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    # 单向引用：帖子关联的媒体（selectin 预加载，避免列表查询 N+1）
    # 关联行的增删由仓库层显式维护，这里只读
    media = relationship(Media, secondary=post_media, lazy="selectin", order_by=Media.id, viewonly=True)

    __table_args__ = (
        Index("idx_posts_author", "author"),
    )
