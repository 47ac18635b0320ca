# app/storage/like/SQLAlchemyLikeRepository.py

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.like import Like
from app.storage.like.like_interface import ILikeRepository


class SQLAlchemyLikeRepository(ILikeRepository):
    """
    使用 SQLAlchemy 实现的点赞仓库
    业务层依赖 ILikeRepository 接口，而不是这个具体实现
    """

    def __init__(self, db: Session):
        self.db = db

    def count_by_post_id(self, post_id: int) -> int:
        count = (
            self.db.query(func.count(Like.id))
            .filter(Like.post_id == post_id)
            .scalar()
        )
        return count or 0
