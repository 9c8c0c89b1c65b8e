"""
Resend 邮件发送客户端
"""

import aiohttp
from loguru import logger

from hekayaty.config.settings import settings

API_URL = "https://api.resend.com/emails"


class ResendError(Exception):
    """邮件服务返回错误"""


class ResendClient:

    def __init__(self, api_key: str = None, from_address: str = None):
        self.api_key = api_key or settings.RESEND_API_KEY
        self.from_address = from_address or settings.EMAIL_FROM_ADDRESS

    @property
    def headers(self):
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    async def send_email(self, to: str, subject: str, html: str, timeout: int = 30) -> dict:
        """
        发送邮件

        Args:
            to: 收件人
            subject: 标题
            html: HTML 正文
            timeout: 超时时间（秒）

        Returns:
            {"id": "..."}
        """
        if not self.api_key:
            raise ResendError("RESEND_API_KEY is not configured")

        payload = {
            "from": self.from_address,
            "to": [to],
            "subject": subject,
            "html": html,
        }

        async with aiohttp.ClientSession() as session:
            async with session.post(
                API_URL,
                json=payload,
                headers=self.headers,
                timeout=aiohttp.ClientTimeout(total=timeout)
            ) as response:
                try:
                    data = await response.json(content_type=None)
                except ValueError:
                    data = {"message": await response.text()}

                if response.status in [200, 201]:
                    return data

                message = data.get("message") if isinstance(data, dict) else str(data)
                logger.error(f"❌ Resend API error {response.status}: {message}")
                raise ResendError(message or f"HTTP {response.status}")
