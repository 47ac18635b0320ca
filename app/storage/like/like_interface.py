# app/storage/like/like_interface.py

from typing import Protocol


class ILikeRepository(Protocol):
    """
    点赞仓库接口协议（数据层抽象接口）
    帖子服务只需要按帖子统计点赞数
    """

    def count_by_post_id(self, post_id: int) -> int:
        """统计某个帖子的点赞数，帖子不存在 / 无点赞时返回 0"""
        ...
