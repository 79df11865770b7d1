# app/storage/page/SQLAlchemyPageRepository.py

from typing import Optional, List

from sqlalchemy.orm import Session

from app.models.page import Page
from app.schemas.page import PageCreate, PageUpdate, PageOut
from app.storage.page.page_interface import IPageRepository
from app.core.db import transaction
from app.core.time import now_utc


class SQLAlchemyPageRepository(IPageRepository):
    """
    使用 SQLAlchemy 实现的页面仓库
    业务层依赖 IPageRepository 抽象接口
    """

    def __init__(self, db: Session):
        self.db = db

    def _get(self, page_id: int) -> Optional[Page]:
        # SELECT * FROM pages WHERE id = :id LIMIT 1
        return self.db.query(Page).filter(Page.id == page_id).first()

    def list_pages(self) -> List[PageOut]:
        """
        SELECT * FROM pages ORDER BY id
        """
        rows = self.db.query(Page).order_by(Page.id.asc()).all()
        return [PageOut.model_validate(row) for row in rows]

    def get_by_id(self, page_id: int) -> Optional[PageOut]:
        orm_obj = self._get(page_id)
        return PageOut.model_validate(orm_obj) if orm_obj else None

    def create(self, data: PageCreate) -> PageOut:
        """
        INSERT INTO pages (title, content, created_at, updated_at) VALUES (...)
        """
        orm_obj = Page(**data.model_dump())

        with transaction(self.db):
            self.db.add(orm_obj)

        self.db.refresh(orm_obj)
        return PageOut.model_validate(orm_obj)

    def update(self, page_id: int, data: PageUpdate) -> Optional[PageOut]:
        """
        UPDATE pages SET title = :title, content = :content, updated_at = now() WHERE id = :id
        - 空字符串同样会写入
        """
        orm_obj = self._get(page_id)
        if not orm_obj:
            return None

        with transaction(self.db):
            orm_obj.title = data.title
            orm_obj.content = data.content
            # 值没变时 onupdate 不会触发，这里显式刷新更新时间
            orm_obj.updated_at = now_utc()

        self.db.refresh(orm_obj)
        return PageOut.model_validate(orm_obj)

    def delete(self, page_id: int) -> bool:
        """
        DELETE FROM pages WHERE id = :id
        """
        orm_obj = self._get(page_id)
        if not orm_obj:
            return False

        with transaction(self.db):
            self.db.delete(orm_obj)

        return True
