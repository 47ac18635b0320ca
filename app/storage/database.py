from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from app.models import Base
from app.storage.member.SQLAlchemyMemberRepository import SQLAlchemyMemberRepository
from app.storage.post.SQLAlchemyPostRepository import SQLAlchemyPostRepository
from app.storage.like.SQLAlchemyLikeRepository import SQLAlchemyLikeRepository
from app.storage.upload.LocalUploadStorage import LocalUploadStorage
from app.core.config import settings

from fastapi import Depends

DATABASE_URL = settings.database_url

# sqlite 需要允许跨线程使用同一连接（本地调试用）
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# SQLAlchemy 引擎
engine = create_engine(DATABASE_URL, echo=settings.DB_ECHO, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """按模型建表（已存在的表不会重复创建）"""
    Base.metadata.create_all(bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# 未来可以根据配置切换不同的实现
def get_member_repo(db: Session = Depends(get_db)) -> SQLAlchemyMemberRepository:
    return SQLAlchemyMemberRepository(db)
def get_post_repo(db: Session = Depends(get_db)) -> SQLAlchemyPostRepository:
    return SQLAlchemyPostRepository(db)
def get_like_repo(db: Session = Depends(get_db)) -> SQLAlchemyLikeRepository:
    return SQLAlchemyLikeRepository(db)
def get_upload_storage() -> LocalUploadStorage:
    return LocalUploadStorage(settings.UPLOAD_DIR)
