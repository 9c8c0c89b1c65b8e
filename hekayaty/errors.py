"""
业务异常

服务层抛出，由应用异常处理器统一转换为 {"error": "..."} 响应
"""

from typing import Any, Optional


class HekayatyError(Exception):
    """业务异常基类"""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationFailed(HekayatyError):
    """请求参数不合法"""
    status_code = 400
    default_message = "Invalid request"


class Unauthenticated(HekayatyError):
    """缺少或无效的凭证"""
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(HekayatyError):
    """已认证但无权限（非所有者 / 非管理员）"""
    status_code = 403
    default_message = "Unauthorized"


class NotFound(HekayatyError):
    """路由或记录不存在"""
    status_code = 404
    default_message = "Not found"


class MethodNotAllowed(HekayatyError):
    status_code = 405
    default_message = "Method not allowed"


class UpstreamFailure(HekayatyError):
    """外部服务（认证、媒体、邮件）返回错误"""
    status_code = 500
    default_message = "Upstream service error"
