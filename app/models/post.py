from sqlalchemy import Column, Integer, String, TIMESTAMP, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.models.base import Base
from app.core.time import now_utc8

class Post(Base):
    """ 帖子表，存储标题、正文、附件路径以及作者。

        CREATE TABLE IF NOT EXISTS posts (
            id INT AUTO_INCREMENT PRIMARY KEY,            -- 系统主键ID（自增）
            title VARCHAR(255) NOT NULL,                  -- 标题
            content TEXT NOT NULL,                        -- 正文
            file_path VARCHAR(512) NULL,                  -- 附件在磁盘上的绝对路径
            member_id INT NOT NULL,                       -- 作者 ID (FK->members.id)，创建后不可变
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP, -- 创建时间，只写一次

            FOREIGN KEY (member_id) REFERENCES members(id)
        );

        CREATE INDEX idx_posts_member_id ON posts (member_id);
    """

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    file_path = Column(String(512), nullable=True)
    member_id = Column(Integer, ForeignKey("members.id"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc8)

    # 反向引用：该帖子的作者
    member = relationship("Member", back_populates="posts")
    # 双向引用：该帖子的评论（评论子系统负责写入，这里只用来计数）
    comments = relationship("Comment", back_populates="post", cascade="all, delete-orphan")
    # 单向引用：该帖子的点赞，删帖时一并删除
    likes = relationship("Like", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_posts_member_id", "member_id"),
    )

    @property
    def username(self) -> str:
        return self.member.username

    @property
    def comment_count(self) -> int:
        return len(self.comments) if self.comments is not None else 0
