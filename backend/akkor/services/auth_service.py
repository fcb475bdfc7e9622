"""
认证服务
校验凭证、签发 token、注册新用户
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session
from akkor.models.entities import User, UserRole
from akkor.models.schemas import UserCreate
from akkor.security.auth import create_access_token, verify_password
from akkor.services.user_service import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """认证服务"""

    def __init__(self, db: Session):
        self.db = db
        self.user_service = UserService(db)

    def validate_user(self, email: str, password: str) -> Optional[User]:
        """校验邮箱+密码，失败返回 None"""
        user = self.user_service.get_user_by_email(email)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def authenticate(self, email: str, password: str) -> Optional[dict]:
        """认证登录"""
        user = self.validate_user(email, password)
        if not user:
            logger.info(f"Login failed for {email}")
            return None

        token = create_access_token(user.id, user.email, user.role)
        logger.info(f"User {user.id} logged in")

        return {
            'access_token': token,
            'token_type': 'bearer',
            'message': '登录成功',
            'user': user
        }

    def register(self, data: UserCreate) -> User:
        """注册：自助注册的账号一律为普通用户"""
        return self.user_service.create_user(data, role=UserRole.USER)
