"""
API 依赖注入 - 认证、数据库连接、外部客户端等
"""

from dataclasses import dataclass, field
from typing import Optional, AsyncIterator

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.session import get_session
from hekayaty.db.dao import ProfileDAO
from hekayaty.endpoints import SupabaseAuthClient, CloudinaryClient, ResendClient
from hekayaty.errors import Unauthenticated, Forbidden

# Bearer 认证（缺失时由 get_current_user 返回统一的 401）
security = HTTPBearer(auto_error=False)


@dataclass
class CurrentUser:
    """身份服务解析出的当前用户"""
    id: str
    email: Optional[str] = None
    metadata: dict = field(default_factory=dict)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """
    获取数据库会话（依赖注入用）

    路由以 scope="function" 注入，提交或回滚在响应发送之前完成，
    提交失败时请求返回 500

    Yields:
        AsyncSession: 数据库会话
    """
    async with get_session() as session:
        yield session


def get_auth_client(request: Request) -> SupabaseAuthClient:
    return request.app.state.auth_client


def get_media_client(request: Request) -> CloudinaryClient:
    return request.app.state.media_client


def get_mail_client(request: Request) -> ResendClient:
    return request.app.state.mail_client


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_client: SupabaseAuthClient = Depends(get_auth_client)
) -> CurrentUser:
    """
    用 Bearer 令牌向身份服务换取当前用户

    每个请求都重新校验，不做缓存

    Returns:
        CurrentUser
    """
    if not credentials or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise Unauthenticated()

    user = await auth_client.get_user(credentials.credentials)
    if not user or not user.get("id"):
        raise Unauthenticated()

    return CurrentUser(
        id=user["id"],
        email=user.get("email"),
        metadata=user.get("user_metadata") or {},
    )


async def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_client: SupabaseAuthClient = Depends(get_auth_client)
) -> Optional[CurrentUser]:
    """
    可选的用户认证（未登录或令牌无效时返回 None）
    """
    if not credentials:
        return None

    try:
        return await get_current_user(credentials, auth_client)
    except Unauthenticated:
        return None


async def require_admin(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
) -> CurrentUser:
    """
    要求管理员角色（额外查询一次 profiles.role）
    """
    role = await ProfileDAO.get_role(session, current_user.id)
    if role != "admin":
        logger.warning(f"🚫 Admin access denied for user {current_user.id}")
        raise Forbidden("Admin access required")
    return current_user


def client_ip(request: Request) -> Optional[str]:
    """来源 IP（优先取代理转发头）"""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    return request.client.host if request.client else None
