"""
预订管理路由
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from akkor.database import get_db
from akkor.exceptions import AkkorError, to_http_exception
from akkor.models.entities import User
from akkor.models.schemas import ApiResponse, BookingCreate, BookingResponse, BookingUpdate, MessageResponse
from akkor.services.booking_service import BookingService
from akkor.security.auth import require_any_role, require_user_or_admin

router = APIRouter(prefix="/booking", tags=["预订管理"])


@router.post("", response_model=ApiResponse[BookingResponse], status_code=status.HTTP_201_CREATED)
def create_booking(
    data: BookingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_or_admin)
):
    """创建预订"""
    try:
        booking = BookingService(db).create_booking(data, current_user)
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_201_CREATED, "message": "预订创建成功", "data": booking}


@router.get("", response_model=ApiResponse[List[BookingResponse]])
def list_bookings(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_any_role)
):
    """获取预订列表（管理员看全部，其余角色看自己的）"""
    bookings = BookingService(db).get_bookings(current_user)
    return {
        "status_code": status.HTTP_200_OK,
        "message": "获取预订列表成功" if bookings else "暂无预订",
        "data": bookings
    }


@router.get("/user/{user_id}", response_model=ApiResponse[List[BookingResponse]])
def list_user_bookings(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_or_admin)
):
    """获取指定用户的预订"""
    try:
        bookings = BookingService(db).get_user_bookings(user_id, current_user)
    except AkkorError as e:
        raise to_http_exception(e)
    return {
        "status_code": status.HTTP_200_OK,
        "message": "获取用户预订成功" if bookings else "该用户暂无预订",
        "data": bookings
    }


@router.get("/{booking_id}", response_model=ApiResponse[BookingResponse])
def get_booking(
    booking_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_any_role)
):
    """获取预订详情"""
    try:
        booking = BookingService(db).get_booking(booking_id, current_user)
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_200_OK, "message": "获取预订成功", "data": booking}


@router.patch("/{booking_id}", response_model=ApiResponse[BookingResponse])
def update_booking(
    booking_id: str,
    data: BookingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_or_admin)
):
    """更新预订"""
    try:
        booking = BookingService(db).update_booking(booking_id, data, current_user)
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_200_OK, "message": "预订更新成功", "data": booking}


@router.delete("/{booking_id}", response_model=MessageResponse)
def delete_booking(
    booking_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_or_admin)
):
    """删除预订"""
    try:
        BookingService(db).delete_booking(booking_id, current_user)
    except AkkorError as e:
        raise to_http_exception(e)
    return {"status_code": status.HTTP_200_OK, "message": f"预订 {booking_id} 已删除"}
