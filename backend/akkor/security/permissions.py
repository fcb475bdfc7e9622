"""
归属/角色规则
管理员可操作任意资源，其余角色只能操作自己名下的资源
"""
from typing import Optional
from akkor.exceptions import ForbiddenError
from akkor.models.entities import User, UserRole

# 可以查看任意用户资料的角色
USER_VIEWER_ROLES = (UserRole.ADMIN, UserRole.EMPLOYEE)


def is_owner_or_admin(actor: User, owner_id: Optional[str]) -> bool:
    """actor 是管理员，或者是资源的所有者"""
    if actor.role == UserRole.ADMIN:
        return True
    return owner_id is not None and actor.id == owner_id


def ensure_owner_or_admin(actor: User, owner_id: Optional[str], message: str = "无权操作该资源") -> None:
    if not is_owner_or_admin(actor, owner_id):
        raise ForbiddenError(message)


def can_view_any_user(actor: User) -> bool:
    return actor.role in USER_VIEWER_ROLES


def ensure_can_view_user(actor: User, user_id: str) -> None:
    """本人、员工或管理员可以查看用户资料"""
    if actor.id != user_id and not can_view_any_user(actor):
        raise ForbiddenError("无权查看该用户")


def ensure_can_update_user(actor: User, user_id: str, changes: dict) -> None:
    """本人或管理员可以修改用户资料；修改 role 仅限管理员"""
    ensure_owner_or_admin(actor, user_id, "只能修改自己的信息")
    if changes.get("role") is not None and actor.role != UserRole.ADMIN:
        raise ForbiddenError("只有管理员可以修改用户角色")
