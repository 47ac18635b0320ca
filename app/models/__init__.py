# 导入全部模型，保证 Base.metadata 中登记了所有表（relationship 字符串引用也依赖这里）
from app.models.base import Base
from app.models.member import Member
from app.models.post import Post
from app.models.comment import Comment
from app.models.like import Like
