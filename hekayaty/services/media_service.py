"""
媒体上传服务

统一的上传策略：类型白名单 + 大小上限，校验通过后才会调用媒体托管
"""

from typing import Optional

from fastapi import UploadFile
from loguru import logger

from hekayaty.config.settings import settings
from hekayaty.endpoints.cloudinary import CloudinaryClient, CloudinaryError
from hekayaty.errors import HekayatyError, UpstreamFailure, ValidationFailed

PDF_CONTENT_TYPE = "application/pdf"


class MediaService:
    """媒体上传服务"""

    @staticmethod
    def validate(content_type: Optional[str], size: int) -> None:
        """
        校验文件类型和大小

        Raises:
            ValidationFailed: 类型不在白名单或超过大小上限
        """
        if content_type not in settings.UPLOAD_ALLOWED_TYPES:
            raise ValidationFailed("File type not supported")

        max_size_mb = settings.UPLOAD_MAX_SIZE_MB
        if size > max_size_mb * 1024 * 1024:
            raise ValidationFailed(f"File too large (max {max_size_mb}MB)")

    @staticmethod
    async def upload(
        client: CloudinaryClient,
        data: bytes,
        filename: str,
        content_type: str,
        folder: str = "uploads"
    ) -> dict:
        """
        上传到媒体托管

        PDF 走专用账号签名上传（documents/<folder>），其余走 unsigned preset（hekayaty/<folder>）

        Args:
            client: Cloudinary 客户端
            data: 文件内容
            filename: 文件名
            content_type: MIME 类型
            folder: 目标目录

        Returns:
            {"success", "url", "publicId", "resourceType", "format"}
        """
        MediaService.validate(content_type, len(data))
        folder = folder or "uploads"

        logger.info(f"📤 Uploading {filename} ({content_type}, {len(data)} bytes) to folder '{folder}'")

        try:
            if content_type == PDF_CONTENT_TYPE:
                if not client.pdf_configured:
                    logger.error("❌ PDF Cloudinary credentials not found")
                    raise HekayatyError("PDF upload configuration missing")
                result = await client.upload_signed_raw(
                    data, filename, content_type, folder=f"documents/{folder}"
                )
            else:
                result = await client.upload_unsigned(
                    data, filename, content_type, folder=f"hekayaty/{folder}"
                )
        except CloudinaryError as e:
            raise UpstreamFailure("Upload failed", details=e.details) from e

        logger.success(f"✅ Upload successful: {result.get('secure_url')}")
        return {
            "success": True,
            "url": result.get("secure_url"),
            "publicId": result.get("public_id"),
            "resourceType": result.get("resource_type"),
            "format": result.get("format"),
        }

    @staticmethod
    async def upload_file(
        client: CloudinaryClient,
        file: UploadFile,
        folder: str = "uploads"
    ) -> dict:
        """读取表单文件并上传"""
        # 先用表单给出的大小拦截超大文件，避免整个读入内存
        if file.size is not None:
            MediaService.validate(file.content_type, file.size)

        data = await file.read()
        return await MediaService.upload(
            client,
            data,
            file.filename or "upload",
            file.content_type,
            folder=folder,
        )


# 全局服务实例
media_service = MediaService()
