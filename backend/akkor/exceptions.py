"""
领域异常
服务层抛出，路由层转换为对应的 HTTP 状态码
"""
from fastapi import HTTPException, status


class AkkorError(Exception):
    """领域异常基类"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AkkorError):
    """业务校验失败"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AkkorError):
    """对象不存在"""
    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(AkkorError):
    """角色或归属校验失败"""
    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(AkkorError):
    """唯一字段重复"""
    status_code = status.HTTP_409_CONFLICT


class UpstreamError(AkkorError):
    """外部服务（图床）调用失败"""
    status_code = status.HTTP_502_BAD_GATEWAY


def to_http_exception(error: AkkorError) -> HTTPException:
    """领域异常 -> HTTPException"""
    return HTTPException(status_code=error.status_code, detail=error.message)
