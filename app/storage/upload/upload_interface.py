# app/storage/upload/upload_interface.py

from typing import BinaryIO, Optional, Protocol


class IUploadedFile(Protocol):
    """
    上传附件（请求内的临时对象）：
    - fastapi.UploadFile 天然满足该协议
    """
    filename: Optional[str]
    file: BinaryIO


class IUploadStorage(Protocol):
    """
    附件存储接口协议
    业务层只依赖本接口，目前实现为本地磁盘（LocalUploadStorage）
    """

    upload_dir: str

    def ensure_dir(self) -> None:
        """
        确保上传目录存在（不存在则递归创建）
        - 创建失败抛 StorageUnavailable
        """
        ...

    def is_empty(self, upload: IUploadedFile) -> bool:
        """没有文件名或内容为 0 字节视为空附件"""
        ...

    def save(self, upload: IUploadedFile) -> str:
        """
        以 <uuid>_<原文件名> 写入上传目录
        - 返回文件的绝对路径
        - 写入失败抛 StorageWriteFailed
        """
        ...

    def exists(self, path: str) -> bool:
        ...

    def delete(self, path: str) -> None:
        """删除文件，失败时 OSError 向上抛出，由调用方决定是否忽略"""
        ...
