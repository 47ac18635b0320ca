from typing import Optional, List
from datetime import datetime

from pydantic import BaseModel, ConfigDict

# 发帖 / 改帖请求体
class PostRequest(BaseModel):
    """
    作者提交的帖子字段：
    - 附件单独以 multipart 文件上传，不在请求体里
    """
    title: str
    content: str

    model_config = ConfigDict(from_attributes=True, extra="forbid")


class PostOnlyCreate(BaseModel):
    """
    创建帖子（内部调用插入帖子表中）
    - member_id 由业务层根据当前登录用户解析
    - created_at 由业务层写入当前时间
    """
    title: str
    content: str
    file_path: Optional[str] = None
    member_id: int
    created_at: datetime


class PostUpdate(BaseModel):
    """
    作者更新帖子：
    - 标题、正文无条件覆盖
    - file_path 由业务层决定：有新附件时为新路径，否则沿用旧路径
    """
    title: str
    content: str
    file_path: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class PostRecord(BaseModel):
    """
    仓库层返回的帖子记录（数据层 -> 业务层）
    - username / comment_count 来自 ORM 上的关联属性
    """
    id: int
    title: str
    content: str
    file_path: Optional[str] = None
    member_id: int
    username: str
    created_at: Optional[datetime] = None
    comment_count: int = 0

    model_config = ConfigDict(from_attributes=True)


# 查看帖子
class PostOut(BaseModel):
    """
    对外返回的帖子投影：
    - like_count / comment_count 每次读取时实时计算，不落库
    """
    id: int
    title: str
    content: str
    file_path: Optional[str] = None
    username: str
    created_at: Optional[datetime] = None
    like_count: int = 0
    comment_count: int = 0

    model_config = ConfigDict(from_attributes=True)


class BatchPostsOut(BaseModel):
    """
    帖子列表返回：
    - count: 返回的数量
    - items: 帖子列表
    """
    count: int
    items: List[PostOut]
