# domain_exceptions.py
from typing import Optional


class MemberNotFound(Exception):
    """
    在需要会员存在的场景下未找到对应会员时抛出：
    - 例如发帖时当前登录用户名在 members 表中不存在
    """

    def __init__(self, username: Optional[str] = None, message: Optional[str] = None):
        if message:
            self.message = message
        elif username is not None:
            self.message = f"Member '{username}' not found."
        else:
            self.message = "Member not found."

        super().__init__(self.message)


class PostNotFound(Exception):
    """找不到帖子"""
    def __init__(self, post_id: int | None = None, message: str | None = None):
        if message:
            super().__init__(message)
        else:
            super().__init__(f"post {post_id} not found")


class ForbiddenAction(Exception):
    """
    非作者尝试修改 / 删除帖子时抛出：
    - 与 PostNotFound 区分，路由层映射为 403
    """
    def __init__(self, username: str | None = None, post_id: int | None = None, message: str | None = None):
        self.username = username
        self.post_id = post_id
        if message is None:
            if username is not None and post_id is not None:
                message = f"member '{username}' is not the owner of post {post_id}"
            else:
                message = "Only the owner can modify this post."
        super().__init__(message)


class StorageUnavailable(Exception):
    """上传目录不存在且创建失败"""
    def __init__(self, upload_dir: str | None = None, message: str | None = None):
        self.upload_dir = upload_dir
        if message is None:
            message = f"Failed to create upload directory: {upload_dir}"
        super().__init__(message)


class StorageWriteFailed(Exception):
    """
    附件字节写入磁盘失败：
    - 帖子不会被持久化
    """
    def __init__(self, filename: str | None = None, message: str | None = None):
        self.filename = filename
        if message is None:
            message = f"File upload failed: {filename}"
        super().__init__(message)
