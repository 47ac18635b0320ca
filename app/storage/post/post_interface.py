# app/storage/post/post_interface.py

from typing import List, Optional, Protocol

from app.schemas.post import (
    PostOnlyCreate,
    PostRecord,
    PostUpdate,
)


class IPostRepository(Protocol):
    """
    帖子仓库接口协议（数据层抽象接口）
    业务层依赖本接口，而不是具体实现，方便后续替换为不同数据源
    """

    def create_post(self, data: PostOnlyCreate) -> PostRecord:
        """
        创建帖子：
        - 由存储层分配 id
        - 返回新帖子的完整记录
        """
        ...

    def get_post_by_id(self, post_id: int) -> Optional[PostRecord]:
        ...

    def list_posts(self) -> List[PostRecord]:
        """返回全部帖子，顺序由存储层决定（当前按 id 升序）"""
        ...

    def update_post(self, post_id: int, data: PostUpdate) -> Optional[PostRecord]:
        """
        覆盖标题 / 正文 / 附件路径
        - 作者与 created_at 不允许修改
        - 帖子不存在返回 None
        """
        ...

    def delete_post(self, post_id: int) -> bool:
        """
        物理删除帖子（评论、点赞随 cascade 一并删除）
        - 返回是否删除成功
        """
        ...
