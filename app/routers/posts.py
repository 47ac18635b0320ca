from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.schemas.post import (
    PostRequest,
    PostOut,
    BatchPostsOut,
)
from app.core.biz_response import BizResponse
from app.core.security import get_current_username
from app.service import post_svc

from app.storage.database import (
    get_member_repo,
    get_post_repo,
    get_like_repo,
    get_upload_storage,
)
from app.storage.post.post_interface import IPostRepository
from app.storage.member.member_interface import IMemberRepository
from app.storage.like.like_interface import ILikeRepository
from app.storage.upload.upload_interface import IUploadStorage

from app.core.exceptions import (
    PostNotFound,
    MemberNotFound,
    ForbiddenAction,
    StorageUnavailable,
    StorageWriteFailed,
)
from app.core.logx import logger

posts_router = APIRouter(prefix="/posts", tags=["posts"])


# --------------------------------- 创建帖子 ---------------------------------
@posts_router.post("/", response_model=PostOut)
def create_post(
    title: str = Form(...),
    content: str = Form(...),
    file: Optional[UploadFile] = File(None),
    username: str = Depends(get_current_username),
    member_repo: IMemberRepository = Depends(get_member_repo),
    post_repo: IPostRepository = Depends(get_post_repo),
    like_repo: ILikeRepository = Depends(get_like_repo),
    storage: IUploadStorage = Depends(get_upload_storage),
):
    """
    创建帖子（multipart 表单）：
    - title / content 为表单字段
    - file 为可选附件
    """
    try:
        post = post_svc.create_post(
            member_repo=member_repo,
            post_repo=post_repo,
            like_repo=like_repo,
            storage=storage,
            username=username,
            data=PostRequest(title=title, content=content),
            file=file,
            to_dict=True,
        )
        return BizResponse(data=post)
    except MemberNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except (StorageUnavailable, StorageWriteFailed) as e:
        return BizResponse(data=None, msg=str(e), status_code=500)
    except Exception as e:
        logger.exception(e)
        return BizResponse(data=None, msg=str(e), status_code=500)


# --------------------------------- 查询帖子 ---------------------------------
@posts_router.get("/", response_model=BatchPostsOut)
def list_posts(
    post_repo: IPostRepository = Depends(get_post_repo),
    like_repo: ILikeRepository = Depends(get_like_repo),
):
    """
    获取全部帖子（含实时点赞数 / 评论数）
    """
    try:
        items = post_svc.get_all_posts(
            post_repo=post_repo,
            like_repo=like_repo,
            to_dict=True,
        )
        return BizResponse(data={"count": len(items), "items": items})
    except Exception as e:
        logger.exception(e)
        return BizResponse(data=None, msg=str(e), status_code=500)


@posts_router.get("/{post_id}", response_model=PostOut)
def get_post(
    post_id: int,
    post_repo: IPostRepository = Depends(get_post_repo),
    like_repo: ILikeRepository = Depends(get_like_repo),
):
    """
    通过帖子 ID 获取帖子详情
    """
    try:
        post = post_svc.get_post(
            post_repo=post_repo,
            like_repo=like_repo,
            post_id=post_id,
            to_dict=True,
        )
        return BizResponse(data=post)
    except PostNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(data=None, msg=str(e), status_code=500)


# --------------------------------- 作者：更新，删除 ---------------------------------
@posts_router.put("/{post_id}", response_model=PostOut)
def update_post(
    post_id: int,
    title: str = Form(...),
    content: str = Form(...),
    file: Optional[UploadFile] = File(None),
    username: str = Depends(get_current_username),
    post_repo: IPostRepository = Depends(get_post_repo),
    like_repo: ILikeRepository = Depends(get_like_repo),
    storage: IUploadStorage = Depends(get_upload_storage),
):
    """
    作者更新帖子：
    - 标题、正文覆盖
    - 上传新附件则替换原附件
    """
    try:
        post = post_svc.update_post(
            post_repo=post_repo,
            like_repo=like_repo,
            storage=storage,
            username=username,
            post_id=post_id,
            data=PostRequest(title=title, content=content),
            file=file,
            to_dict=True,
        )
        return BizResponse(data=post)
    except PostNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except ForbiddenAction as e:
        return BizResponse(data=None, msg=str(e), status_code=403)
    except (StorageUnavailable, StorageWriteFailed) as e:
        return BizResponse(data=None, msg=str(e), status_code=500)
    except Exception as e:
        logger.exception(e)
        return BizResponse(data=None, msg=str(e), status_code=500)


@posts_router.delete("/{post_id}")
def delete_post(
    post_id: int,
    username: str = Depends(get_current_username),
    post_repo: IPostRepository = Depends(get_post_repo),
    storage: IUploadStorage = Depends(get_upload_storage),
):
    """
    作者删除帖子：
    - 物理删除记录，附件一并删除
    """
    try:
        post_svc.delete_post(
            post_repo=post_repo,
            storage=storage,
            username=username,
            post_id=post_id,
        )
        return BizResponse(data=True)
    except PostNotFound as e:
        return BizResponse(data=False, msg=str(e), status_code=404)
    except ForbiddenAction as e:
        return BizResponse(data=False, msg=str(e), status_code=403)
    except Exception as e:
        logger.exception(e)
        return BizResponse(data=False, msg=str(e), status_code=500)
