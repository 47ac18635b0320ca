from typing import Optional
from sqlalchemy.orm import Session
from app.models.member import Member
from app.schemas.member import (
    MemberCreate,
    MemberOut,
    MemberAllOut,
)
from app.storage.member.member_interface import IMemberRepository
from app.core.db import transaction

class SQLAlchemyMemberRepository(IMemberRepository):
    """
    使用 SQLAlchemy 实现的会员仓库
    业务层依赖 IMemberRepository 接口，而不是这个具体实现
    """

    def __init__(self, db: Session):
        self.db = db

    def get_member_by_username(self, username: str) -> Optional[MemberAllOut]:
        member = self.db.query(Member).filter(Member.username == username).first()
        return MemberAllOut.model_validate(member) if member else None

    def create_member(self, data: MemberCreate) -> MemberOut:
        member = Member(**data.model_dump())
        with transaction(self.db):
            self.db.add(member)
        self.db.refresh(member)
        return MemberOut.model_validate(member)
