"""
Supabase Auth（GoTrue）客户端

身份校验与注册/登录都委托给托管的身份服务，本服务不保存密码和会话
"""

from typing import Optional
from urllib.parse import urlencode

import aiohttp
from loguru import logger

from hekayaty.config.settings import settings


class SupabaseAuthError(Exception):
    """身份服务返回非成功状态"""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class SupabaseAuthClient:

    def __init__(self, base_url: str = None, anon_key: str = None, service_role_key: str = None):
        self.base_url = (base_url or settings.SUPABASE_URL).rstrip("/")
        self.anon_key = anon_key or settings.SUPABASE_ANON_KEY
        self.service_role_key = service_role_key or settings.SUPABASE_SERVICE_ROLE_KEY

    @property
    def headers(self):
        return {
            "Content-Type": "application/json",
            "apikey": self.anon_key or self.service_role_key,
        }

    @property
    def admin_headers(self):
        return {
            "Content-Type": "application/json",
            "apikey": self.service_role_key,
            "Authorization": f"Bearer {self.service_role_key}",
        }

    @staticmethod
    async def _read_error(response: aiohttp.ClientResponse) -> str:
        """提取 GoTrue 错误信息（msg / error_description / message）"""
        try:
            data = await response.json(content_type=None)
        except ValueError:
            return await response.text()
        if isinstance(data, dict):
            return data.get("msg") or data.get("error_description") or data.get("message") or str(data)
        return str(data)

    async def get_user(self, access_token: str, timeout: int = 10) -> Optional[dict]:
        """
        用访问令牌换取用户身份

        Args:
            access_token: Bearer 令牌
            timeout: 超时时间（秒）

        Returns:
            用户信息 {"id", "email", "user_metadata", ...}，令牌无效时返回 None
        """
        headers = dict(self.headers)
        headers["Authorization"] = f"Bearer {access_token}"

        async with aiohttp.ClientSession() as session:
            async with session.get(
                f"{self.base_url}/auth/v1/user",
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=timeout)
            ) as response:
                if response.status == 200:
                    return await response.json()
                message = await self._read_error(response)
                logger.warning(f"🔒 Token rejected by identity provider ({response.status}): {message}")
                return None

    async def create_user(
        self,
        email: str,
        password: str,
        user_metadata: dict = None,
        timeout: int = 15
    ) -> dict:
        """
        通过管理接口创建用户（邮箱直接视为已验证）

        Returns:
            新用户信息
        """
        payload = {
            "email": email,
            "password": password,
            "email_confirm": True,
            "user_metadata": user_metadata or {},
        }

        async with aiohttp.ClientSession() as session:
            async with session.post(
                f"{self.base_url}/auth/v1/admin/users",
                json=payload,
                headers=self.admin_headers,
                timeout=aiohttp.ClientTimeout(total=timeout)
            ) as response:
                if response.status in [200, 201]:
                    return await response.json()
                message = await self._read_error(response)
                logger.error(f"❌ Identity provider refused user creation ({response.status}): {message}")
                raise SupabaseAuthError(response.status, message)

    async def sign_in_with_password(self, email: str, password: str, timeout: int = 15) -> dict:
        """
        邮箱密码登录

        Returns:
            会话信息 {"access_token", "refresh_token", "user", ...}
        """
        async with aiohttp.ClientSession() as session:
            async with session.post(
                f"{self.base_url}/auth/v1/token",
                params={"grant_type": "password"},
                json={"email": email, "password": password},
                headers=self.headers,
                timeout=aiohttp.ClientTimeout(total=timeout)
            ) as response:
                if response.status == 200:
                    return await response.json()
                message = await self._read_error(response)
                logger.warning(f"🔒 Sign-in failed for {email} ({response.status}): {message}")
                raise SupabaseAuthError(response.status, message)

    async def sign_out(self, access_token: str, timeout: int = 10) -> None:
        """注销当前会话"""
        headers = dict(self.headers)
        headers["Authorization"] = f"Bearer {access_token}"

        async with aiohttp.ClientSession() as session:
            async with session.post(
                f"{self.base_url}/auth/v1/logout",
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=timeout)
            ) as response:
                if response.status not in [200, 204]:
                    message = await self._read_error(response)
                    raise SupabaseAuthError(response.status, message)

    def oauth_url(self, provider: str, redirect_to: str) -> str:
        """第三方登录授权地址"""
        query = urlencode({"provider": provider, "redirect_to": redirect_to})
        return f"{self.base_url}/auth/v1/authorize?{query}"
