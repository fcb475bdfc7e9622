"""
用户服务
管理 User 对象：创建（密码哈希）、查询、搜索、部分更新、删除
"""
import logging
from typing import List, Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session
from akkor.exceptions import ConflictError, NotFoundError
from akkor.models.entities import User, UserRole
from akkor.models.schemas import UserCreate, UserUpdate
from akkor.security.auth import get_password_hash

logger = logging.getLogger(__name__)


class UserService:
    """用户服务"""

    def __init__(self, db: Session):
        self.db = db

    def get_users(self) -> List[User]:
        """获取用户列表"""
        return self.db.query(User).order_by(User.created_at.desc()).all()

    def search_users(self, query: str) -> List[User]:
        """按邮箱/姓/名模糊搜索（不区分大小写）"""
        pattern = f"%{query.lower()}%"
        return self.db.query(User).filter(
            or_(
                func.lower(User.email).like(pattern),
                func.lower(User.lastname).like(pattern),
                func.lower(User.firstname).like(pattern)
            )
        ).all()

    def get_user(self, user_id: str) -> Optional[User]:
        """获取单个用户"""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        """根据邮箱获取用户"""
        return self.db.query(User).filter(func.lower(User.email) == email.lower()).first()

    def require_user(self, user_id: str) -> User:
        user = self.get_user(user_id)
        if not user:
            raise NotFoundError(f"用户 {user_id} 不存在")
        return user

    def create_user(self, data: UserCreate, role: Optional[UserRole] = None) -> User:
        """创建用户

        role 参数优先于请求体中的 role（注册接口固定为普通用户）。
        """
        if self.get_user_by_email(data.email):
            raise ConflictError(f"邮箱 '{data.email}' 已被使用")

        user = User(
            firstname=data.firstname,
            lastname=data.lastname,
            email=data.email,
            pseudo=data.pseudo,
            password_hash=get_password_hash(data.password),
            role=role or data.role or UserRole.USER
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Created user {user.id} with role {user.role.value}")
        return user

    def update_user(self, user_id: str, data: UserUpdate) -> User:
        """部分更新用户"""
        user = self.require_user(user_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        new_email = update_data.get("email")
        if new_email and new_email.lower() != user.email.lower():
            if self.get_user_by_email(new_email):
                raise ConflictError(f"邮箱 '{new_email}' 已被使用")

        password = update_data.pop("password", None)
        if password:
            user.password_hash = get_password_hash(password)

        for key, value in update_data.items():
            setattr(user, key, value)

        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Updated user {user.id}: {sorted(update_data)}")
        return user

    def delete_user(self, user_id: str) -> None:
        """删除用户，其预订保留但清空用户链接"""
        user = self.require_user(user_id)
        self.db.delete(user)
        self.db.commit()
        logger.info(f"Deleted user {user_id}")
