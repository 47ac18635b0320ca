from typing import Optional, Protocol

from app.schemas.member import (
    MemberCreate,
    MemberOut,
    MemberAllOut,
)

class IMemberRepository(Protocol):
    """
    会员仓库接口协议（数据层抽象接口）
    会员由认证子系统维护，帖子服务只按用户名查询
    """

    def get_member_by_username(self, username: str) -> Optional[MemberAllOut]:
        """根据用户名查询会员，不存在返回 None"""
        ...

    def create_member(self, data: MemberCreate) -> MemberOut:
        """
        创建会员
        注意：此处假定 data.password 已经是哈希后的密码
        """
        ...
