# app/storage/upload/LocalUploadStorage.py

import os
import shutil
import uuid

from app.storage.upload.upload_interface import IUploadStorage, IUploadedFile
from app.core.exceptions import StorageUnavailable, StorageWriteFailed
from app.core.logx import logger


class LocalUploadStorage(IUploadStorage):
    """
    本地磁盘附件存储：
    - 文件名 = uuid4 + "_" + 原文件名，并发上传不会撞名
    - 记录到帖子上的是绝对路径
    """

    def __init__(self, upload_dir: str):
        self.upload_dir = upload_dir

    def ensure_dir(self) -> None:
        if os.path.isdir(self.upload_dir):
            return
        try:
            os.makedirs(self.upload_dir, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create directory: {self.upload_dir} ({e})")
            raise StorageUnavailable(upload_dir=self.upload_dir) from e
        logger.info(f"Created upload directory: {self.upload_dir}")

    def is_empty(self, upload: IUploadedFile) -> bool:
        if not upload.filename:
            return True

        size = getattr(upload, "size", None)
        if size is None:
            # 没有 size 信息时直接量一下流的长度，再把读写位置还原
            stream = upload.file
            pos = stream.tell()
            stream.seek(0, os.SEEK_END)
            size = stream.tell()
            stream.seek(pos)
        return size == 0

    def save(self, upload: IUploadedFile) -> str:
        # 只保留文件名部分，防止 "../" 之类的路径穿越
        original = os.path.basename(upload.filename)
        file_name = f"{uuid.uuid4()}_{original}"
        dest = os.path.abspath(os.path.join(self.upload_dir, file_name))

        logger.info(f"Saving file to: {dest}")
        try:
            upload.file.seek(0)
            with open(dest, "wb") as buffer:
                shutil.copyfileobj(upload.file, buffer)
        except OSError as e:
            logger.error(f"Failed to save file {original}: {e}")
            # 不留下写了一半的文件
            if os.path.isfile(dest):
                try:
                    os.remove(dest)
                except OSError as cleanup_err:
                    logger.warning(f"Failed to remove partial file: {dest} ({cleanup_err})")
            raise StorageWriteFailed(filename=original, message=f"File upload failed: {e}") from e

        return dest

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def delete(self, path: str) -> None:
        os.remove(path)
        logger.info(f"Deleted file: {path}")
