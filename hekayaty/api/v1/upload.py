"""
文件上传路由
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from hekayaty.api.deps import get_media_client
from hekayaty.endpoints.cloudinary import CloudinaryClient
from hekayaty.errors import ValidationFailed
from hekayaty.services import media_service

router = APIRouter()


@router.post("")
async def upload(
    file: Optional[UploadFile] = File(None),
    folder: str = Form("uploads"),
    media_client: CloudinaryClient = Depends(get_media_client)
):
    """
    上传文件到媒体托管

    - 类型白名单：PDF、JPEG、PNG、WebP、MP3、WAV
    - 大小上限 50MB
    - PDF 走专用账号签名上传，其余走 unsigned preset
    """
    if file is None or not file.filename:
        raise ValidationFailed("No file provided")

    return await media_service.upload_file(media_client, file, folder=folder or "uploads")
