from sqlalchemy import Column, Integer, TIMESTAMP, ForeignKey, UniqueConstraint, Index
from app.models.base import Base
from app.core.time import now_utc8

class Like(Base):
    """ 点赞模型，对应数据库中的 likes 表。
        点赞的增删由点赞子系统负责，帖子服务只按 post_id 计数。

        CREATE TABLE IF NOT EXISTS likes (
            id INT AUTO_INCREMENT PRIMARY KEY,               -- 系统主键（自增）
            post_id INT NOT NULL,                            -- 帖子 ID (FK -> posts.id)
            member_id INT NOT NULL,                          -- 点赞会员 ID (FK -> members.id)
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,  -- 点赞时间

            CONSTRAINT uq_likes_member_post UNIQUE (member_id, post_id)
        );
        CREATE INDEX idx_likes_post_id ON likes (post_id);
    """

    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False)
    member_id = Column(Integer, ForeignKey("members.id"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc8)

    __table_args__ = (
        # 每个会员对同一帖子只能点赞一次
        UniqueConstraint("member_id", "post_id", name="uq_likes_member_post"),
        Index("idx_likes_post_id", "post_id"),
    )
