from sqlalchemy import Column, Integer, String, TIMESTAMP, UniqueConstraint
from sqlalchemy.orm import relationship
from app.models.base import Base
from app.core.time import now_utc8

class Member(Base):
    """ 会员模型，对应数据库中的 members 表。
        账号体系由认证子系统维护，帖子服务只读。

        CREATE TABLE IF NOT EXISTS members (
            id INT AUTO_INCREMENT PRIMARY KEY,              -- 系统主键 ID
            username VARCHAR(100) NOT NULL UNIQUE,          -- 登录用户名
            password VARCHAR(255) NOT NULL,                 -- 密码哈希（argon2）
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP  -- 创建时间
        );
    """

    __tablename__ = "members"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False)  # 登录用户名（唯一）
    password = Column(String(255), nullable=False)  # 密码哈希
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc8)  # 创建时间

    # 反向引用：该会员的所有帖子
    posts = relationship("Post", back_populates="member")

    __table_args__ = (
        UniqueConstraint("username", name="uq_members_username"),
    )
