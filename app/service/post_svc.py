from typing import Dict, List, Optional

from app.schemas.post import (
    PostRequest,
    PostOnlyCreate,
    PostUpdate,
    PostRecord,
    PostOut,
)

from app.storage.post.post_interface import IPostRepository
from app.storage.member.member_interface import IMemberRepository
from app.storage.like.like_interface import ILikeRepository
from app.storage.upload.upload_interface import IUploadStorage, IUploadedFile

from app.core.logx import logger
from app.core.time import now_utc8
from app.core.exceptions import PostNotFound, MemberNotFound, ForbiddenAction


#---------------------------------------- 内部工具 -----------------------------------------
def _to_out(like_repo: ILikeRepository, record: PostRecord) -> PostOut:
    """组装对外投影：点赞数、评论数每次实时计算"""
    return PostOut(
        id=record.id,
        title=record.title,
        content=record.content,
        file_path=record.file_path,
        username=record.username,
        created_at=record.created_at,
        like_count=like_repo.count_by_post_id(record.id),
        comment_count=record.comment_count,
    )


def _save_upload(storage: IUploadStorage, file: Optional[IUploadedFile], ensure_dir: bool = True) -> Optional[str]:
    """
    保存附件：
    - file 为 None：不处理
    - 空附件：记 warning 后忽略，不算错误
    - 非空附件：写盘并返回绝对路径；ensure_dir=True 时先确保目录存在
      （发帖流程已提前建好目录，传 False）
    """
    if file is None:
        return None
    if storage.is_empty(file):
        logger.warning("Received empty file from request")
        return None

    if ensure_dir:
        storage.ensure_dir()
    return storage.save(file)


def _discard_file(storage: IUploadStorage, path: Optional[str]) -> None:
    """尽力删除磁盘文件，失败只记日志"""
    if not path or not storage.exists(path):
        return
    try:
        storage.delete(path)
    except OSError as e:
        logger.warning(f"Failed to delete file: {path} ({e})")


def _get_owned_post(post_repo: IPostRepository, username: str, post_id: int) -> PostRecord:
    """取帖子并校验作者，供修改 / 删除共用"""
    record = post_repo.get_post_by_id(post_id)
    if not record:
        raise PostNotFound(post_id=post_id)
    if record.username != username:
        logger.warning(f"Member {username} tried to modify post id={post_id} owned by {record.username}")
        raise ForbiddenAction(username=username, post_id=post_id)
    return record


#---------------------------------------- 增 -----------------------------------------
def create_post(
    member_repo: IMemberRepository,
    post_repo: IPostRepository,
    like_repo: ILikeRepository,
    storage: IUploadStorage,
    username: str,
    data: PostRequest,
    file: Optional[IUploadedFile] = None,
    to_dict: bool = True,) -> Dict | PostOut:
    """
    创建帖子（业务接口）：
    1. 根据当前登录用户名查会员
    2. 确保上传目录存在
    3. 有非空附件则写盘（<uuid>_<原文件名>）
    4. 写 posts 表，created_at 为当前时间
    5. 返回投影（新帖点赞数、评论数均为 0）
    """
    # 1. 查看会员是否存在
    member = member_repo.get_member_by_username(username)
    if not member:
        raise MemberNotFound(username=username)

    # 2. 上传目录
    storage.ensure_dir()

    # 3. 附件（目录已在第 2 步确保）
    file_path = _save_upload(storage, file, ensure_dir=False)

    # 4. 落库；失败时刚写的附件成为孤儿文件，尽力清掉
    post_create = PostOnlyCreate(
        title=data.title,
        content=data.content,
        file_path=file_path,
        member_id=member.id,
        created_at=now_utc8(),
    )
    try:
        record = post_repo.create_post(post_create)
    except Exception:
        _discard_file(storage, file_path)
        raise
    logger.info(f"Created post id={record.id} for member={username}, file={file_path}")

    post_out = _to_out(like_repo, record)
    return post_out.model_dump() if to_dict else post_out


#---------------------------------------- 查 -----------------------------------------
def get_all_posts(post_repo: IPostRepository, like_repo: ILikeRepository, to_dict: bool = True,) -> List[Dict] | List[PostOut]:
    """
    获取全部帖子（含实时点赞数 / 评论数），顺序由仓库决定
    """
    items = [_to_out(like_repo, record) for record in post_repo.list_posts()]
    return [item.model_dump() for item in items] if to_dict else items


def get_post(post_repo: IPostRepository, like_repo: ILikeRepository, post_id: int, to_dict: bool = True,) -> Dict | PostOut:
    """
    获取单个帖子，不存在抛 PostNotFound
    """
    record = post_repo.get_post_by_id(post_id)
    if not record:
        raise PostNotFound(post_id=post_id)

    post_out = _to_out(like_repo, record)
    return post_out.model_dump() if to_dict else post_out


#---------------------------------------- 改 -----------------------------------------
def update_post(
    post_repo: IPostRepository,
    like_repo: ILikeRepository,
    storage: IUploadStorage,
    username: str,
    post_id: int,
    data: PostRequest,
    file: Optional[IUploadedFile] = None,
    to_dict: bool = True,) -> Dict | PostOut:
    """
    作者更新帖子：
    - 只有作者本人可以修改（否则 ForbiddenAction）
    - 标题、正文无条件覆盖
    - 有非空新附件：写新文件并替换路径，更新成功后删除旧文件
    - 无附件 / 空附件：保留原路径
    """
    current = _get_owned_post(post_repo, username, post_id)
    old_path = current.file_path

    new_path = _save_upload(storage, file)
    if new_path:
        logger.info(f"Updating file of post id={post_id} to: {new_path}")

    post_update = PostUpdate(
        title=data.title,
        content=data.content,
        file_path=new_path or old_path,
    )
    try:
        updated = post_repo.update_post(post_id, post_update)
    except Exception:
        _discard_file(storage, new_path)
        raise

    if not updated:
        # 校验之后、写库之前帖子被删掉了
        _discard_file(storage, new_path)
        raise PostNotFound(post_id=post_id)

    # 旧附件已不再被引用
    if new_path and old_path and old_path != new_path:
        _discard_file(storage, old_path)

    logger.info(f"Updated post id={post_id} by member={username}")
    post_out = _to_out(like_repo, updated)
    return post_out.model_dump() if to_dict else post_out


#---------------------------------------- 删 -----------------------------------------
def delete_post(post_repo: IPostRepository, storage: IUploadStorage, username: str, post_id: int,) -> None:
    """
    作者删除帖子：
    - 只有作者本人可以删除（否则 ForbiddenAction）
    - 附件存在则尽力删除，失败只记日志
    - 物理删除帖子记录
    """
    current = _get_owned_post(post_repo, username, post_id)

    _discard_file(storage, current.file_path)

    ok = post_repo.delete_post(post_id)
    if not ok:
        raise PostNotFound(post_id=post_id)
    logger.info(f"Deleted post id={post_id} by member={username}")
