# app/storage/media/SQLAlchemyMediaRepository.py

from typing import Optional, List

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.models.media import Media
from app.models.post import post_media
from app.schemas.media import MediaCreate, MediaOut
from app.storage.media.media_interface import IMediaRepository
from app.core.db import transaction


class SQLAlchemyMediaRepository(IMediaRepository):
    """
    使用 SQLAlchemy 实现的媒体仓库
    """

    def __init__(self, db: Session):
        self.db = db

    def _get(self, media_id: int) -> Optional[Media]:
        # SELECT * FROM media WHERE id = :id LIMIT 1
        return self.db.query(Media).filter(Media.id == media_id).first()

    def list_media(self) -> List[MediaOut]:
        """
        SELECT * FROM media ORDER BY id
        """
        rows = self.db.query(Media).order_by(Media.id.asc()).all()
        return [MediaOut.model_validate(row) for row in rows]

    def get_by_id(self, media_id: int) -> Optional[MediaOut]:
        orm_obj = self._get(media_id)
        return MediaOut.model_validate(orm_obj) if orm_obj else None

    def create(self, data: MediaCreate) -> MediaOut:
        """
        INSERT INTO media (url, type, created_at, updated_at) VALUES (...)
        """
        orm_obj = Media(url=data.url, type=data.type)

        with transaction(self.db):
            self.db.add(orm_obj)

        self.db.refresh(orm_obj)
        return MediaOut.model_validate(orm_obj)

    def delete(self, media_id: int) -> bool:
        """
        DELETE FROM post_media WHERE media_id = :id;
        DELETE FROM media WHERE id = :id
        """
        orm_obj = self._get(media_id)
        if not orm_obj:
            return False

        with transaction(self.db):
            self.db.execute(delete(post_media).where(post_media.c.media_id == media_id))
            self.db.delete(orm_obj)

        return True
