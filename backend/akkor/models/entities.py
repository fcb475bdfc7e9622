"""
实体对象定义
User / Hotel / Booking 三个持久化对象及其链接
"""
import uuid
from datetime import datetime
from enum import Enum
from sqlalchemy import (
    Column, String, DateTime, ForeignKey, Text, Enum as SQLEnum, Numeric, JSON
)
from sqlalchemy.orm import relationship
from akkor.database import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


# ============== 枚举定义 ==============

class UserRole(str, Enum):
    """用户角色"""
    USER = "user"              # 普通用户
    ADMIN = "admin"            # 管理员
    EMPLOYEE = "employee"      # 员工


# ============== 实体定义 ==============

class User(Base):
    """
    用户对象
    password_hash 仅用于认证，不对外输出
    """
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    firstname = Column(String(50), nullable=False)                 # 名
    lastname = Column(String(50), nullable=False)                  # 姓
    email = Column(String(50), unique=True, nullable=False, index=True)
    pseudo = Column(String(50), nullable=False)                    # 昵称
    password_hash = Column(String(255), nullable=False)            # 密码哈希
    role = Column(SQLEnum(UserRole), nullable=False, default=UserRole.USER)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # 链接（仅反向引用，删除用户时预订保留）
    bookings = relationship("Booking", back_populates="user")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class Hotel(Base):
    """酒店对象"""
    __tablename__ = "hotels"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(100), nullable=False, index=True)          # 酒店名称
    location = Column(String(255), nullable=False)                  # 城市/地区
    street = Column(String(255))                                    # 街道地址
    description = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)                  # 每晚价格
    picture_list = Column(JSON, nullable=False, default=list)       # 图片 URL 列表
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    bookings = relationship("Booking", back_populates="hotel")


class Booking(Base):
    """
    预订对象
    user/hotel 为多对一链接，被引用对象删除时置空而非级联删除
    """
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    check_in_date = Column(DateTime, nullable=False)
    check_out_date = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    hotel_id = Column(String(36), ForeignKey("hotels.id", ondelete="SET NULL"), nullable=True, index=True)

    user = relationship("User", back_populates="bookings")
    hotel = relationship("Hotel", back_populates="bookings")
