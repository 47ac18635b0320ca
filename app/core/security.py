from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError, InvalidHashError
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.storage.database import get_member_repo
from app.storage.member.member_interface import IMemberRepository

# 可以全局复用一个实例
pwd_hasher = PasswordHasher()

basic_auth = HTTPBasic()

def hash_password(plain_password: str) -> str:
    """
    使用 Argon2 对明文密码进行哈希
    """
    return pwd_hasher.hash(plain_password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    校验明文密码是否匹配哈希
    """
    try:
        pwd_hasher.verify(hashed_password, plain_password)
        return True
    except (VerifyMismatchError, InvalidHashError):
        return False

def get_current_username(
    credentials: HTTPBasicCredentials = Depends(basic_auth),
    member_repo: IMemberRepository = Depends(get_member_repo),
) -> str:
    """
    解析当前调用者：
    - HTTP Basic 用户名 + 密码，与 members 表中的 argon2 哈希比对
    - 结果作为显式参数传给业务层，业务层不读取任何全局登录态
    """
    member = member_repo.get_member_by_username(credentials.username)
    if not member or not verify_password(credentials.password, member.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return member.username
