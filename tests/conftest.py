"""
公共测试夹具

- 内存 SQLite（StaticPool，保证 TestClient 的工作线程与测试共用同一连接）
- SQLAlchemy 仓库实现 + 指向 tmp_path 的本地附件存储
- 预置会员 alice / bob（密码为 "<用户名>-pw"）
"""

import io

import pytest
from fastapi import UploadFile
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base, Comment, Like
from app.schemas.member import MemberCreate
from app.core.security import hash_password
from app.storage.member.SQLAlchemyMemberRepository import SQLAlchemyMemberRepository
from app.storage.post.SQLAlchemyPostRepository import SQLAlchemyPostRepository
from app.storage.like.SQLAlchemyLikeRepository import SQLAlchemyLikeRepository
from app.storage.upload.LocalUploadStorage import LocalUploadStorage


# =============================================================================
# 数据库
# =============================================================================

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    SessionTest = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionTest()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# 仓库 / 存储
# =============================================================================

@pytest.fixture
def member_repo(db):
    return SQLAlchemyMemberRepository(db)


@pytest.fixture
def post_repo(db):
    return SQLAlchemyPostRepository(db)


@pytest.fixture
def like_repo(db):
    return SQLAlchemyLikeRepository(db)


@pytest.fixture
def upload_dir(tmp_path):
    # 故意不提前创建，由 ensure_dir 负责
    return tmp_path / "uploads"


@pytest.fixture
def storage(upload_dir):
    return LocalUploadStorage(str(upload_dir))


# =============================================================================
# 数据
# =============================================================================

@pytest.fixture
def members(member_repo):
    """预置 alice / bob 两个会员，返回 {username: MemberOut}"""
    return {
        name: member_repo.create_member(
            MemberCreate(username=name, password=hash_password(f"{name}-pw"))
        )
        for name in ("alice", "bob")
    }


@pytest.fixture
def make_upload():
    """构造上传附件：make_upload("a.txt", b"data")"""
    def _make(filename="photo.png", data=b"\x89PNG fake image bytes"):
        return UploadFile(file=io.BytesIO(data), filename=filename)
    return _make


@pytest.fixture
def add_like(db):
    """直接插入点赞记录（点赞子系统在本仓库之外）"""
    def _add(post_id, member_id):
        db.add(Like(post_id=post_id, member_id=member_id))
        db.commit()
    return _add


@pytest.fixture
def add_comment(db):
    """直接插入评论记录（评论子系统在本仓库之外）"""
    def _add(post_id, member_id, content="nice"):
        db.add(Comment(post_id=post_id, member_id=member_id, content=content))
        db.commit()
    return _add


# =============================================================================
# 日志
# =============================================================================

@pytest.fixture
def log_records(caplog):
    """
    捕获 snsserver logger 的输出
    - 该 logger 不向 root 传播，需要把 caplog 的 handler 直接挂上去
    """
    from app.core.logx import logger

    logger.addHandler(caplog.handler)
    try:
        yield caplog
    finally:
        logger.removeHandler(caplog.handler)
