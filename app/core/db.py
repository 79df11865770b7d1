from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session


@contextmanager
def transaction(db: Session):
    """
    写操作事务：
    - 正常结束时提交
    - 出现任何异常先回滚，再把异常继续抛给上层
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def db_error_message(e: Exception) -> str:
    """取底层驱动的原始报错信息（没有驱动异常时退回 str(e)）"""
    if isinstance(e, DBAPIError) and e.orig is not None:
        return str(e.orig)
    return str(e)
