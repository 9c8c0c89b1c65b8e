"""
注册登录路由
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import (
    CurrentUser, security, get_current_user, get_db_session, get_auth_client
)
from hekayaty.endpoints.supabase_auth import SupabaseAuthClient
from hekayaty.models import RegisterRequest, LoginRequest, CompleteProfileRequest
from hekayaty.services import auth_service

router = APIRouter()


@router.post("/register")
async def register(
    data: RegisterRequest,
    session: AsyncSession = Depends(get_db_session, scope="function"),
    auth_client: SupabaseAuthClient = Depends(get_auth_client)
):
    """
    注册

    - 身份服务创建账号（邮箱直接确认）
    - 写入 profile（role 为 free）
    """
    return await auth_service.register(session, auth_client, data)


@router.post("/login")
async def login(
    data: LoginRequest,
    session: AsyncSession = Depends(get_db_session, scope="function"),
    auth_client: SupabaseAuthClient = Depends(get_auth_client)
):
    return await auth_service.login(session, auth_client, data.email, data.password)


@router.post("/logout")
async def logout(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_client: SupabaseAuthClient = Depends(get_auth_client)
):
    return await auth_service.logout(auth_client, credentials.credentials if credentials else None)


@router.post("/complete-profile")
async def complete_profile(
    data: CompleteProfileRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await auth_service.complete_profile(session, current_user.id, data)


@router.post("/google")
async def google(auth_client: SupabaseAuthClient = Depends(get_auth_client)):
    """Google 登录授权地址（回调到 SITE_URL/auth/callback）"""
    return auth_service.google_url(auth_client)
