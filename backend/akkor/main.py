"""
Akkor 主应用入口
酒店预订 REST 后端：用户、认证、酒店、预订
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from akkor.config import settings
from akkor.database import init_db
from akkor.routers import auth, users, hotels, bookings

logger = logging.getLogger(__name__)


def setup_logging(level: str = settings.LOG_LEVEL) -> None:
    """配置根 logger"""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    setup_logging()
    init_db()
    logger.info(f"{settings.APP_NAME} started")
    yield


# 创建应用
app = FastAPI(
    title="Akkor - 酒店预订系统",
    description="用户、酒店与预订管理 API",
    version="1.0.0",
    lifespan=lifespan
)

# CORS 配置
allowed_origins = ["http://localhost:5173"]
if settings.FRONTEND_URL:
    allowed_origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """未预期的异常统一记录并返回 500"""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "服务器内部错误"},
    )


# 注册路由
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(hotels.router)
app.include_router(bookings.router)


@app.get("/")
def root():
    """根路径"""
    return {
        "name": "Akkor - 酒店预订系统",
        "version": "1.0.0",
    }


@app.get("/health")
def health_check():
    """健康检查"""
    return {"status": "healthy"}
