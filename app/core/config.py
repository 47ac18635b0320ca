from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    应用配置：
    - 从环境变量 / .env 读取
    - UPLOAD_DIR 为附件存储目录，由部署环境提供
    """

    # ======== 文件上传 ========
    UPLOAD_DIR: str = "/uploads"

    # ======== 数据库 ========
    DB_HOST: str = "127.0.0.1"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "sns_db"
    DB_ECHO: bool = False
    # 设置后直接使用，忽略上面的 DB_* 拼接
    DATABASE_URL: Optional[str] = None

    # ======== 日志 ========
    LOG_LEVEL: LogLevel = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        # 允许 info / Info 等写法，非法值在启动时直接报出字段名
        return v.upper() if isinstance(v, str) else v

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4"
        )


settings = Settings()
