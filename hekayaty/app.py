"""
FastAPI 应用入口
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from hekayaty.api import api_router
from hekayaty.api.cors import CorsGateMiddleware
from hekayaty.config.settings import settings
from hekayaty.db import base
from hekayaty.db.base import init_db, close_db
from hekayaty.endpoints import SupabaseAuthClient, CloudinaryClient, ResendClient
from hekayaty.errors import HekayatyError
from hekayaty.utils.logger_config import setup_logging

LOCATION_PREFIXES = ("body", "query", "path", "form", "header")


def first_validation_message(errors) -> str:
    """
    取第一条校验错误作为响应信息

    缺少字段时为 "<field> is required"，其他为 "<field>: <msg>"
    """
    if not errors:
        return "Invalid request"

    error = errors[0]
    loc = [str(part) for part in error.get("loc", ()) if part not in LOCATION_PREFIXES]
    field = ".".join(loc)
    if error.get("type") == "missing" and field:
        return f"{field} is required"
    return f"{field}: {error.get('msg')}" if field else error.get("msg", "Invalid request")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # 启动时执行
    setup_logging()
    logger.info(f"🚀 Starting {settings.APP_NAME}...")

    await init_db()
    logger.success("✅ Database connection pool initialized")

    app.state.auth_client = SupabaseAuthClient()
    app.state.media_client = CloudinaryClient()
    app.state.mail_client = ResendClient()

    logger.success("🎉 Application started successfully!")

    yield

    # 关闭时执行
    logger.info("👋 Shutting down...")
    await close_db()
    logger.success("✅ Application shutdown complete")


# 创建 FastAPI 应用
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS 网关（同时兜底未处理异常）
app.add_middleware(CorsGateMiddleware)

# 注册 API 路由
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "ok"
    }


@app.get("/health")
async def health_check():
    """健康检查（详细）"""
    health_status = {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "services": {}
    }

    if base.async_engine:
        try:
            async with base.async_engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            health_status["services"]["database"] = "healthy"
        except Exception as e:
            logger.error(f"❌ Database health check failed: {e}")
            health_status["services"]["database"] = "unhealthy"
            health_status["status"] = "degraded"
    else:
        health_status["services"]["database"] = "not_initialized"

    return health_status


@app.exception_handler(HekayatyError)
async def hekayaty_error_handler(request: Request, exc: HekayatyError):
    """业务异常 -> {"error": "..."}"""
    if exc.status_code >= 500:
        logger.error(f"❌ {type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        message = "Not found"
    elif exc.status_code == 405:
        message = "Method not allowed"
    else:
        message = str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": first_validation_message(exc.errors())})


@app.exception_handler(ValidationError)
async def model_validation_handler(request: Request, exc: ValidationError):
    """手动 model_validate（multipart 表单）的校验错误"""
    return JSONResponse(status_code=400, content={"error": first_validation_message(exc.errors())})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hekayaty.app:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
