"""
PDF 代理路由

下载托管的 PDF 并以 inline 方式返回，绕过浏览器跨域限制
"""

from typing import Optional
from urllib.parse import urlparse

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response
from loguru import logger

from hekayaty.api.deps import get_media_client
from hekayaty.config.settings import settings
from hekayaty.endpoints.cloudinary import CloudinaryClient
from hekayaty.errors import ValidationFailed

router = APIRouter()


def host_allowed(url: str, allowed_hosts) -> bool:
    """未配置白名单时放行；否则主机名需等于白名单项或是其子域名"""
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        return False
    if not allowed_hosts:
        return True
    host = parsed.hostname.lower()
    return any(host == item or host.endswith("." + item) for item in allowed_hosts)


@router.get("")
async def pdf_proxy(
    url: Optional[str] = Query(None, description="PDF 地址"),
    media_client: CloudinaryClient = Depends(get_media_client)
):
    if not url:
        raise ValidationFailed("PDF URL is required")
    if not host_allowed(url, settings.PDF_PROXY_ALLOWED_HOSTS):
        raise ValidationFailed("PDF host not allowed")

    status_code, content = await media_client.fetch(url)
    if status_code < 200 or status_code >= 300:
        logger.warning(f"⚠️ PDF fetch failed ({status_code}): {url}")
        return JSONResponse(status_code=status_code, content={"error": "Failed to fetch PDF"})

    return Response(
        content=content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": "inline",
            "Cache-Control": f"public, max-age={settings.PDF_PROXY_CACHE_MAX_AGE}",
        },
    )
