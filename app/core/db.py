from contextlib import contextmanager

from sqlalchemy.orm import Session


@contextmanager
def transaction(db: Session):
    """
    工作单元（unit of work）：
    - 代码块正常结束 => commit
    - 代码块抛出异常 => rollback 并继续向上抛出
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
