from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

class MemberCreate(BaseModel):
    """
    创建会员（仅供账号子系统 / 初始化数据使用）
    - password 已经是哈希后的密码（由 app.core.security.hash_password 生成）
    """
    username: str
    password: str

    model_config = ConfigDict(from_attributes=True, extra="forbid")

class MemberOut(BaseModel):
    """对外返回的会员基础信息（不含密码）"""
    id: int
    username: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class MemberAllOut(MemberOut):
    """
    内部使用的会员完整信息（包含密码哈希，用于登录校验）
    """
    password: str
