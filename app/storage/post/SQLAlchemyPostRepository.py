# app/storage/post/SQLAlchemyPostRepository.py

from typing import Optional, List

from sqlalchemy import delete, insert, select
from sqlalchemy.orm import Session

from app.models.post import Post, post_media
from app.schemas.post import PostCreate, PostUpdate, PostFilter, PostOut
from app.storage.post.post_interface import IPostRepository
from app.core.db import transaction
from app.core.time import now_utc


class SQLAlchemyPostRepository(IPostRepository):
    """
    使用 SQLAlchemy 实现的帖子仓库
    业务层依赖 IPostRepository 抽象接口

    Post.media 是只读 relationship（selectin 预加载），
    post_media 关联行全部在这里用显式语句维护
    """

    def __init__(self, db: Session):
        self.db = db

    # ---------- 内部基础查询 ----------

    def _get(self, post_id: int) -> Optional[Post]:
        """
        SELECT * FROM posts WHERE id = :id LIMIT 1;
        SELECT media.* FROM media JOIN post_media ON ... WHERE post_media.post_id IN (:id)
        """
        return self.db.query(Post).filter(Post.id == post_id).first()

    # ---------- 查询 ----------

    def list_posts(self, filters: PostFilter) -> List[PostOut]:
        """
        SELECT * FROM posts
        [WHERE lower(title) LIKE lower('%' || :title || '%') ESCAPE '/']
        [AND author = :author]
        ORDER BY id
        """
        q = self.db.query(Post)
        if filters.title:
            # % 和 _ 按普通字符匹配
            q = q.filter(Post.title.icontains(filters.title, autoescape=True))
        if filters.author:
            q = q.filter(Post.author == filters.author)

        posts: List[Post] = q.order_by(Post.id.asc()).all()
        return [PostOut.model_validate(post) for post in posts]

    def get_by_id(self, post_id: int) -> Optional[PostOut]:
        post = self._get(post_id)
        return PostOut.model_validate(post) if post else None

    # ---------- 增删改 ----------

    def create(self, data: PostCreate) -> PostOut:
        """
        INSERT INTO posts (title, content, author, created_at, updated_at) VALUES (...)
        """
        post = Post(title=data.title, content=data.content, author=data.author or "")

        with transaction(self.db):
            self.db.add(post)

        self.db.refresh(post)
        return PostOut.model_validate(post)

    def update(self, post_id: int, data: PostUpdate) -> Optional[PostOut]:
        """
        UPDATE posts SET [title = :title,] [content = :content,] [author = :author,] updated_at = now()
        WHERE id = :id
        """
        post = self._get(post_id)
        if not post:
            return None

        with transaction(self.db):
            for field, value in data.patch_fields().items():
                setattr(post, field, value)
            post.updated_at = now_utc()

        self.db.refresh(post)
        return PostOut.model_validate(post)

    def delete(self, post_id: int) -> bool:
        """
        DELETE FROM post_media WHERE post_id = :id;
        DELETE FROM posts WHERE id = :id
        """
        post = self._get(post_id)
        if not post:
            return False

        with transaction(self.db):
            self.db.execute(delete(post_media).where(post_media.c.post_id == post_id))
            self.db.delete(post)

        return True

    # ---------- 媒体关联 ----------

    def _has_link(self, post_id: int, media_id: int) -> bool:
        row = self.db.execute(
            select(post_media.c.post_id).where(
                post_media.c.post_id == post_id,
                post_media.c.media_id == media_id,
            )
        ).first()
        return row is not None

    def attach_media(self, post_id: int, media_id: int) -> None:
        """
        INSERT INTO post_media (post_id, media_id) VALUES (:post_id, :media_id)
        """
        if self._has_link(post_id, media_id):
            return None

        with transaction(self.db):
            self.db.execute(insert(post_media).values(post_id=post_id, media_id=media_id))
        return None

    def detach_media(self, post_id: int, media_id: int) -> bool:
        """
        DELETE FROM post_media WHERE post_id = :post_id AND media_id = :media_id
        """
        with transaction(self.db):
            result = self.db.execute(
                delete(post_media).where(
                    post_media.c.post_id == post_id,
                    post_media.c.media_id == media_id,
                )
            )
        return result.rowcount > 0
