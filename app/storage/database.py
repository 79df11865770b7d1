from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.core.logx import logger
from app.models.base import Base
# 导入模型，保证 Base.metadata 中注册了全部表
from app.models import page, post, media  # noqa: F401
from app.storage.page.SQLAlchemyPageRepository import SQLAlchemyPageRepository
from app.storage.post.SQLAlchemyPostRepository import SQLAlchemyPostRepository
from app.storage.media.SQLAlchemyMediaRepository import SQLAlchemyMediaRepository

# SQLAlchemy 引擎（连接串来自环境变量 DATABASE_URL）
engine = create_engine(settings.database_url, echo=settings.db_echo, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    """
    自动建表（auto-migrate），只在非生产环境启动时调用
    - 生产环境假定表结构已经存在
    """
    bind = bind or engine
    logger.info("Running auto-migrate ...")
    Base.metadata.create_all(bind=bind)
    logger.info("Auto-migrate finished")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# 未来可以根据配置切换不同的实现
def get_page_repo(db: Session = Depends(get_db)) -> SQLAlchemyPageRepository:
    return SQLAlchemyPageRepository(db)
def get_post_repo(db: Session = Depends(get_db)) -> SQLAlchemyPostRepository:
    return SQLAlchemyPostRepository(db)
def get_media_repo(db: Session = Depends(get_db)) -> SQLAlchemyMediaRepository:
    return SQLAlchemyMediaRepository(db)
