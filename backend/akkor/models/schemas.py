"""
Pydantic 模式定义
用于 API 请求/响应验证
"""
from datetime import datetime
from decimal import Decimal
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from akkor.models.entities import UserRole

T = TypeVar("T")


# ============== 通用响应 ==============

class ApiResponse(BaseModel, Generic[T]):
    """统一响应包装：status_code + message + data"""
    status_code: int
    message: str
    data: Optional[T] = None


class MessageResponse(BaseModel):
    status_code: int
    message: str


# ============== 用户 Schemas ==============

class UserCreate(BaseModel):
    firstname: str = Field(..., min_length=1, max_length=50)
    lastname: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    pseudo: str = Field(..., min_length=2, max_length=50)
    password: str = Field(..., min_length=8, max_length=30)
    role: Optional[UserRole] = None


class UserUpdate(BaseModel):
    firstname: Optional[str] = Field(None, min_length=1, max_length=50)
    lastname: Optional[str] = Field(None, min_length=2, max_length=50)
    email: Optional[EmailStr] = None
    pseudo: Optional[str] = Field(None, min_length=2, max_length=50)
    password: Optional[str] = Field(None, min_length=8, max_length=30)
    role: Optional[UserRole] = None


class UserResponse(BaseModel):
    id: str
    firstname: str
    lastname: str
    email: str
    pseudo: str
    role: UserRole
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


# ============== 认证 Schemas ==============

class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    message: str = "登录成功"
    user: UserResponse


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


# ============== 酒店 Schemas ==============

class HotelCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=100)
    location: str = Field(..., min_length=3, max_length=255)
    street: Optional[str] = Field(None, max_length=255)
    description: str = Field(..., min_length=10)
    price: Decimal = Field(..., gt=0)


class HotelUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=100)
    location: Optional[str] = Field(None, min_length=3, max_length=255)
    street: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, min_length=10)
    price: Optional[Decimal] = Field(None, gt=0)


class HotelResponse(BaseModel):
    id: str
    name: str
    location: str
    street: Optional[str] = None
    description: str
    price: Decimal
    picture_list: List[str] = []
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


# ============== 预订 Schemas ==============

class BookingCreate(BaseModel):
    hotel_id: str = Field(..., min_length=1)
    check_in_date: datetime
    check_out_date: datetime
    user_id: Optional[str] = None  # 仅管理员可代他人预订


class BookingUpdate(BaseModel):
    hotel_id: Optional[str] = Field(None, min_length=1)
    check_in_date: Optional[datetime] = None
    check_out_date: Optional[datetime] = None


class BookingResponse(BaseModel):
    id: str
    check_in_date: datetime
    check_out_date: datetime
    created_at: Optional[datetime] = None
    user_id: Optional[str] = None
    hotel_id: Optional[str] = None
    user: Optional[UserResponse] = None
    hotel: Optional[HotelResponse] = None
    model_config = ConfigDict(from_attributes=True)
