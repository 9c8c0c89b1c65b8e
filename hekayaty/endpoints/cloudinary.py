"""
Cloudinary 媒体托管客户端

- 图片、音频：主账号 + unsigned upload preset
- PDF：专用账号 + 签名上传（raw 资源）
"""

import hashlib
import time
from typing import Optional, Tuple

import aiohttp
from loguru import logger

from hekayaty.config.settings import settings

API_BASE = "https://api.cloudinary.com/v1_1"


class CloudinaryError(Exception):
    """媒体托管返回非成功状态，details 为对方原始响应"""

    def __init__(self, status: int, details):
        super().__init__(f"Cloudinary error {status}")
        self.status = status
        self.details = details


def sign_params(params: dict, api_secret: str) -> str:
    """
    计算签名上传的 signature

    参数按 key 字母序拼成 k=v&k=v，末尾直接拼接 secret，取 SHA-1 十六进制

    Args:
        params: 参与签名的参数（不含 file / api_key / resource_type）
        api_secret: API Secret

    Returns:
        40 位十六进制签名
    """
    payload = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{payload}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryClient:

    def __init__(
        self,
        cloud_name: str = None,
        upload_preset: str = None,
        pdf_cloud_name: str = None,
        pdf_api_key: str = None,
        pdf_api_secret: str = None
    ):
        self.cloud_name = cloud_name or settings.CLOUDINARY_CLOUD_NAME
        self.upload_preset = upload_preset or settings.CLOUDINARY_UPLOAD_PRESET
        self.pdf_cloud_name = pdf_cloud_name or settings.PDF_CLOUDINARY_CLOUD_NAME
        self.pdf_api_key = pdf_api_key or settings.PDF_CLOUDINARY_API_KEY
        self.pdf_api_secret = pdf_api_secret or settings.PDF_CLOUDINARY_API_SECRET

    @property
    def pdf_configured(self) -> bool:
        return bool(self.pdf_cloud_name and self.pdf_api_key and self.pdf_api_secret)

    async def _post_form(self, url: str, form: aiohttp.FormData, timeout: int) -> dict:
        """发送 multipart 表单，非 2xx 时抛出 CloudinaryError"""
        async with aiohttp.ClientSession() as session:
            async with session.post(
                url,
                data=form,
                timeout=aiohttp.ClientTimeout(total=timeout)
            ) as response:
                try:
                    body = await response.json(content_type=None)
                except ValueError:
                    body = {"message": await response.text()}

                if response.status in [200, 201]:
                    return body

                logger.error(f"❌ Cloudinary upload failed ({response.status}): {body}")
                raise CloudinaryError(response.status, body)

    async def upload_unsigned(
        self,
        data: bytes,
        filename: str,
        content_type: str,
        folder: str,
        timeout: int = 120
    ) -> dict:
        """
        unsigned 上传（图片、音频等），资源类型由 Cloudinary 自动判断

        Returns:
            Cloudinary 响应（secure_url / public_id / resource_type / format）
        """
        form = aiohttp.FormData()
        form.add_field("file", data, filename=filename, content_type=content_type)
        form.add_field("upload_preset", self.upload_preset)
        form.add_field("folder", folder)

        return await self._post_form(f"{API_BASE}/{self.cloud_name}/auto/upload", form, timeout)

    async def upload_signed_raw(
        self,
        data: bytes,
        filename: str,
        content_type: str,
        folder: str,
        timestamp: Optional[int] = None,
        timeout: int = 120
    ) -> dict:
        """
        签名上传到 PDF 专用账号（raw 资源）

        只有 folder 和 timestamp 参与签名
        """
        timestamp = timestamp or int(time.time())
        signature = sign_params({"folder": folder, "timestamp": timestamp}, self.pdf_api_secret)

        form = aiohttp.FormData()
        form.add_field("file", data, filename=filename, content_type=content_type)
        form.add_field("resource_type", "raw")
        form.add_field("folder", folder)
        form.add_field("timestamp", str(timestamp))
        form.add_field("api_key", self.pdf_api_key)
        form.add_field("signature", signature)

        return await self._post_form(f"{API_BASE}/{self.pdf_cloud_name}/raw/upload", form, timeout)

    async def fetch(self, url: str, timeout: int = 60) -> Tuple[int, bytes]:
        """下载托管文件（PDF 代理用），返回 (状态码, 内容)"""
        async with aiohttp.ClientSession() as session:
            async with session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=timeout)
            ) as response:
                return response.status, await response.read()
