from sqlalchemy import Column, Integer, TIMESTAMP, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.models.base import Base
from app.core.time import now_utc8

# 评论由评论子系统负责增删改，帖子服务只读取 post.comments 计数

class Comment(Base):
    """ 评论表

        CREATE TABLE IF NOT EXISTS comments (
            id INT AUTO_INCREMENT PRIMARY KEY,               -- 系统主键（自增）
            post_id INT NOT NULL,                            -- 帖子 ID（FK -> posts.id）
            member_id INT NOT NULL,                          -- 评论作者（FK -> members.id）
            content TEXT NOT NULL,                           -- 评论内容
            created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,

            FOREIGN KEY (post_id) REFERENCES posts(id),
            FOREIGN KEY (member_id) REFERENCES members(id)
        );
    """

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False)
    member_id = Column(Integer, ForeignKey("members.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc8)

    # 反向引用：评论所属帖子
    post = relationship("Post", back_populates="comments")

    __table_args__ = (
        Index("idx_comments_post", "post_id"),
    )
