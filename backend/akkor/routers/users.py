"""
用户管理路由
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from akkor.database import get_db
from akkor.exceptions import AkkorError, ForbiddenError, NotFoundError, to_http_exception
from akkor.models.entities import User
from akkor.models.schemas import ApiResponse, MessageResponse, UserCreate, UserResponse, UserUpdate
from akkor.services.user_service import UserService
from akkor.security.auth import require_admin, require_any_role, require_user_or_admin
from akkor.security.permissions import can_view_any_user, ensure_can_update_user, ensure_can_view_user

router = APIRouter(prefix="/user", tags=["用户管理"])


@router.post("", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreate, db: Session = Depends(get_db)):
    """创建用户"""
    service = UserService(db)
    try:
        user = service.create_user(data)
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_201_CREATED, "message": "用户创建成功", "data": user}


@router.get("", response_model=ApiResponse[List[UserResponse]])
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """获取用户列表"""
    users = UserService(db).get_users()
    return {
        "status_code": status.HTTP_200_OK,
        "message": "获取用户列表成功" if users else "暂无用户",
        "data": users
    }


@router.get("/search/{query}", response_model=ApiResponse[List[UserResponse]])
def search_users(
    query: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """搜索用户（邮箱/姓/名）"""
    users = UserService(db).search_users(query)
    return {
        "status_code": status.HTTP_200_OK,
        "message": "找到匹配用户" if users else "没有匹配的用户",
        "data": users
    }


@router.get("/email/{email}", response_model=ApiResponse[UserResponse])
def get_user_by_email(
    email: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_any_role)
):
    """根据邮箱获取用户"""
    try:
        if current_user.email.lower() != email.lower() and not can_view_any_user(current_user):
            raise ForbiddenError("无权查看该用户")
        user = UserService(db).get_user_by_email(email)
        if not user:
            raise NotFoundError(f"邮箱为 {email} 的用户不存在")
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_200_OK, "message": "获取用户成功", "data": user}


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
def get_user(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_any_role)
):
    """获取用户详情"""
    try:
        ensure_can_view_user(current_user, user_id)
        user = UserService(db).require_user(user_id)
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_200_OK, "message": "获取用户成功", "data": user}


@router.patch("/{user_id}", response_model=ApiResponse[UserResponse])
def update_user(
    user_id: str,
    data: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_or_admin)
):
    """更新用户信息"""
    try:
        ensure_can_update_user(current_user, user_id, data.model_dump(exclude_unset=True))
        user = UserService(db).update_user(user_id, data)
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_200_OK, "message": "用户更新成功", "data": user}


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """删除用户"""
    try:
        UserService(db).delete_user(user_id)
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_200_OK, "message": f"用户 {user_id} 已删除"}
