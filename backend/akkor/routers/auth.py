"""
认证路由
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from akkor.database import get_db
from akkor.exceptions import AkkorError, to_http_exception
from akkor.models.entities import User
from akkor.models.schemas import LoginRequest, LoginResponse, RegisterResponse, UserCreate, UserResponse
from akkor.services.auth_service import AuthService
from akkor.security.auth import get_current_user

router = APIRouter(prefix="/auth", tags=["认证"])


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """用户登录"""
    service = AuthService(db)
    result = service.authenticate(data.email, data.password)
    if not result:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="邮箱或密码错误"
        )
    return result


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(data: UserCreate, db: Session = Depends(get_db)):
    """注册新用户（角色固定为普通用户）"""
    service = AuthService(db)
    try:
        user = service.register(data)
    except AkkorError as e:
        raise to_http_exception(e)
    return {"message": "用户创建成功", "user": user}


@router.get("/me", response_model=UserResponse)
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """获取当前用户信息"""
    return current_user
