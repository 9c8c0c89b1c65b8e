"""
CORS / 预检网关

- OPTIONS 请求直接返回 "ok"
- 所有响应（包括错误响应）附带 CORS 头
- 兜底捕获未处理异常，返回 500 {"error": "..."}
"""

import time
from typing import List, Optional

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from hekayaty.config.settings import settings


def resolve_origin(origin: Optional[str], allowed: List[str]) -> str:
    """请求来源在白名单内时原样返回，否则返回第一个配置的来源"""
    if not allowed:
        return "*"
    if origin and (origin in allowed or "*" in allowed):
        return origin
    return allowed[0]


def cors_headers(origin: Optional[str] = None) -> dict:
    return {
        "Access-Control-Allow-Origin": resolve_origin(origin, settings.CORS_ORIGINS),
        "Access-Control-Allow-Headers": settings.CORS_ALLOW_HEADERS,
        "Access-Control-Allow-Methods": settings.CORS_ALLOW_METHODS,
        "Access-Control-Allow-Credentials": "true",
    }


def function_name(path: str) -> str:
    """路径第一段（即原函数名），用于日志上下文"""
    segment = path.strip("/").split("/", 1)[0]
    return segment or "root"


class CorsGateMiddleware(BaseHTTPMiddleware):
    """CORS 网关中间件"""

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")

        with logger.contextualize(function=function_name(request.url.path)):
            if request.method == "OPTIONS":
                return PlainTextResponse("ok", headers=cors_headers(origin))

            started = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.exception(f"💥 Unhandled error on {request.method} {request.url.path}: {exc}")
                response = JSONResponse(status_code=500, content={"error": str(exc)})

            response.headers.update(cors_headers(origin))

            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
            return response
