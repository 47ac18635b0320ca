from typing import Optional, List

from sqlalchemy.orm import Session, joinedload, selectinload

from app.models.post import Post
from app.schemas.post import (
    PostOnlyCreate,
    PostRecord,
    PostUpdate,
)
from app.storage.post.post_interface import IPostRepository
from app.core.db import transaction


class SQLAlchemyPostRepository(IPostRepository):
    """
    使用 SQLAlchemy 实现的帖子仓库
    业务层依赖 IPostRepository 抽象接口
    """

    def __init__(self, db: Session):
        self.db = db

    # ---------- 内部基础查询 ----------

    def _base_query(self):
        """
        预加载作者和评论：
        - PostRecord 需要 username（member）和 comment_count（comments）
        """
        return (
            self.db.query(Post)
            .options(joinedload(Post.member), selectinload(Post.comments))
        )

    def _get(self, post_id: int) -> Optional[Post]:
        return self._base_query().filter(Post.id == post_id).first()

    # ---------- 创建 ----------

    def create_post(self, data: PostOnlyCreate) -> PostRecord:
        post = Post(**data.model_dump())

        with transaction(self.db):
            self.db.add(post)

        # 刷新以获取 id 及关联的作者
        self.db.refresh(post)
        return PostRecord.model_validate(post)

    # ---------- 查询 ----------

    def get_post_by_id(self, post_id: int) -> Optional[PostRecord]:
        post = self._get(post_id)
        if not post:
            return None
        return PostRecord.model_validate(post)

    def list_posts(self) -> List[PostRecord]:
        posts: List[Post] = self._base_query().order_by(Post.id.asc()).all()
        return [PostRecord.model_validate(post) for post in posts]

    # ---------- 更新 ----------

    def update_post(self, post_id: int, data: PostUpdate) -> Optional[PostRecord]:
        post = self._get(post_id)
        if not post:
            return None

        with transaction(self.db):
            for field, value in data.model_dump().items():
                setattr(post, field, value)

        self.db.refresh(post)
        return PostRecord.model_validate(post)

    # ---------- 删除 ----------

    def delete_post(self, post_id: int) -> bool:
        post = self._get(post_id)
        if not post:
            return False

        with transaction(self.db):
            self.db.delete(post)

        return True
