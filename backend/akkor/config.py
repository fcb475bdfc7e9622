"""
应用配置
从环境变量 / .env 读取配置
"""
from typing import Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用设置"""

    # 应用基础配置
    APP_NAME: str = "Akkor"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 数据库配置
    DATABASE_URL: str = "sqlite:///./akkor.db"

    # JWT 配置
    SECRET_KEY: str = "akkor-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # bcrypt 加密轮数
    BCRYPT_ROUNDS: int = 10

    # 图床配置 (ImgBB 兼容 API)
    IMGBB_URL: str = "https://api.imgbb.com/1/upload"
    IMGBB_KEY: Optional[str] = None
    IMGBB_TIMEOUT: float = 30.0

    # CORS 配置
    FRONTEND_URL: Optional[str] = None

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# 全局设置实例
settings = Settings()
