"""
注册登录服务

账号与会话由 Supabase Auth 管理，这里只负责同步 profiles 表
"""

from typing import Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.config.settings import settings
from hekayaty.db.dao import ProfileDAO
from hekayaty.endpoints.supabase_auth import SupabaseAuthClient, SupabaseAuthError
from hekayaty.errors import ValidationFailed, Unauthenticated, NotFound
from hekayaty.models import RegisterRequest, CompleteProfileRequest


class AuthService:
    """注册登录服务"""

    @staticmethod
    async def register(
        session: AsyncSession,
        auth_client: SupabaseAuthClient,
        data: RegisterRequest
    ) -> dict:
        """
        注册：身份服务创建账号（邮箱直接确认）后写入 profile

        Returns:
            {"user": 身份服务用户, "profile": 资料}
        """
        try:
            user = await auth_client.create_user(
                data.email,
                data.password,
                user_metadata={"username": data.username, "full_name": data.full_name},
            )
        except SupabaseAuthError as e:
            raise ValidationFailed(e.message) from e

        profile = await ProfileDAO.create(
            session,
            user["id"],
            email=data.email,
            username=data.username,
            full_name=data.full_name,
        )
        logger.success(f"✅ User registered: {user['id']}")
        return {"user": user, "profile": profile.to_dict()}

    @staticmethod
    async def login(
        session: AsyncSession,
        auth_client: SupabaseAuthClient,
        email: str,
        password: str
    ) -> dict:
        """
        邮箱密码登录

        Returns:
            {"user", "session", "profile"}
        """
        try:
            auth_session = await auth_client.sign_in_with_password(email, password)
        except SupabaseAuthError as e:
            raise Unauthenticated(e.message) from e

        user = auth_session.get("user") or {}
        profile = await ProfileDAO.get_by_id(session, user.get("id")) if user.get("id") else None

        return {
            "user": user,
            "session": {
                key: auth_session.get(key)
                for key in ("access_token", "refresh_token", "expires_in", "token_type")
            },
            "profile": profile.to_dict() if profile else None,
        }

    @staticmethod
    async def logout(auth_client: SupabaseAuthClient, access_token: Optional[str]) -> dict:
        """注销（没有令牌时直接返回成功）"""
        if access_token:
            try:
                await auth_client.sign_out(access_token)
            except SupabaseAuthError as e:
                logger.warning(f"⚠️ Sign-out rejected by identity provider: {e.message}")
        return {"success": True}

    @staticmethod
    async def complete_profile(
        session: AsyncSession,
        user_id: str,
        data: CompleteProfileRequest
    ) -> dict:
        """补全用户名和全名"""
        profile = await ProfileDAO.get_by_id(session, user_id)
        if not profile:
            raise NotFound("Profile not found")

        profile = await ProfileDAO.update(
            session, profile, username=data.username, full_name=data.full_name
        )
        return {"profile": profile.to_dict()}

    @staticmethod
    def google_url(auth_client: SupabaseAuthClient) -> dict:
        """Google 登录授权地址"""
        redirect_to = f"{settings.SITE_URL}/auth/callback"
        return {"provider": "google", "url": auth_client.oauth_url("google", redirect_to)}


# 全局服务实例
auth_service = AuthService()
