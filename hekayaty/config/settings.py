"""
应用全局配置

从 config.yaml 加载配置，支持环境变量覆盖
"""

import yaml
import dotenv
from pathlib import Path
from typing import Optional, List, Any
import os

dotenv.load_dotenv()


def _as_bool(value: Any) -> bool:
    return str(value).lower() in ("true", "1", "yes")


def _as_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value or [])


class Settings:
    """应用全局配置（从 config.yaml 加载）"""

    def __init__(self, config_path: Optional[str] = None):
        # 加载 config.yaml（文件缺失时全部使用默认值）
        path = Path(
            config_path
            or os.getenv("HEKAYATY_CONFIG")
            or Path(__file__).parent.parent.parent / "config.yaml"
        )
        self._config = {}
        if path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}

    def _get(self, section: str, key: str, default: Any = None) -> Any:
        return (self._config.get(section) or {}).get(key, default)

    # ==================== 应用基础配置 ====================
    @property
    def APP_NAME(self) -> str:
        return os.getenv("APP_NAME", self._get("app", "name", "HEKAYATY API"))

    @property
    def APP_VERSION(self) -> str:
        return os.getenv("APP_VERSION", self._get("app", "version", "1.0.0"))

    @property
    def API_PREFIX(self) -> str:
        return os.getenv("API_PREFIX", self._get("app", "api_prefix", "") or "")

    @property
    def DEBUG(self) -> bool:
        return _as_bool(os.getenv("DEBUG", self._get("app", "debug", False)))

    @property
    def SITE_URL(self) -> str:
        return os.getenv("SITE_URL", self._get("app", "site_url", "")).rstrip("/")

    # ==================== 数据库配置 ====================
    @property
    def DATABASE_URL(self) -> str:
        return os.getenv("DATABASE_URL", self._get("database", "url", ""))

    @property
    def DATABASE_POOL_SIZE(self) -> int:
        return int(os.getenv("DATABASE_POOL_SIZE", self._get("database", "pool_size", 10)))

    @property
    def DATABASE_MAX_OVERFLOW(self) -> int:
        return int(os.getenv("DATABASE_MAX_OVERFLOW", self._get("database", "max_overflow", 20)))

    @property
    def DATABASE_AUTO_CREATE(self) -> bool:
        return _as_bool(os.getenv("DATABASE_AUTO_CREATE", self._get("database", "auto_create", False)))

    # ==================== Supabase 认证配置 ====================
    @property
    def SUPABASE_URL(self) -> str:
        return os.getenv("SUPABASE_URL", self._get("supabase", "url", "")).rstrip("/")

    @property
    def SUPABASE_ANON_KEY(self) -> str:
        return os.getenv("SUPABASE_ANON_KEY", self._get("supabase", "anon_key", ""))

    @property
    def SUPABASE_SERVICE_ROLE_KEY(self) -> str:
        return os.getenv("SUPABASE_SERVICE_ROLE_KEY", self._get("supabase", "service_role_key", ""))

    # ==================== Cloudinary 配置 ====================
    @property
    def CLOUDINARY_CLOUD_NAME(self) -> str:
        return os.getenv("CLOUDINARY_CLOUD_NAME", self._get("cloudinary", "cloud_name", ""))

    @property
    def CLOUDINARY_UPLOAD_PRESET(self) -> str:
        return os.getenv("CLOUDINARY_UPLOAD_PRESET", self._get("cloudinary", "upload_preset", ""))

    @property
    def PDF_CLOUDINARY_CLOUD_NAME(self) -> str:
        return os.getenv("PDF_CLOUDINARY_CLOUD_NAME", self._get("cloudinary", "pdf_cloud_name", ""))

    @property
    def PDF_CLOUDINARY_API_KEY(self) -> str:
        return os.getenv("PDF_CLOUDINARY_API_KEY", self._get("cloudinary", "pdf_api_key", ""))

    @property
    def PDF_CLOUDINARY_API_SECRET(self) -> str:
        return os.getenv("PDF_CLOUDINARY_API_SECRET", self._get("cloudinary", "pdf_api_secret", ""))

    # ==================== 邮件配置 ====================
    @property
    def RESEND_API_KEY(self) -> str:
        return os.getenv("RESEND_API_KEY", self._get("resend", "api_key", ""))

    @property
    def EMAIL_FROM_ADDRESS(self) -> str:
        return os.getenv("EMAIL_FROM_ADDRESS", self._get("resend", "from_address", "Hekayaty <noreply@hekayaty.com>"))

    # ==================== CORS 配置 ====================
    @property
    def CORS_ORIGINS(self) -> List[str]:
        env_origins = os.getenv("CORS_ORIGINS")
        if env_origins:
            return _as_list(env_origins)
        return _as_list(self._get("cors", "origins", ["*"]))

    @property
    def CORS_ALLOW_HEADERS(self) -> str:
        return self._get("cors", "allow_headers", "authorization, x-client-info, apikey, content-type")

    @property
    def CORS_ALLOW_METHODS(self) -> str:
        return self._get("cors", "allow_methods", "POST, GET, OPTIONS, PUT, DELETE")

    # ==================== 日志配置 ====================
    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv("LOG_LEVEL", self._get("logging", "level", "INFO"))

    @property
    def LOG_FILE(self) -> Optional[str]:
        return os.getenv("LOG_FILE", self._get("logging", "file")) or None

    # ==================== 上传配置 ====================
    @property
    def UPLOAD_MAX_SIZE_MB(self) -> int:
        return int(os.getenv("UPLOAD_MAX_SIZE_MB", self._get("upload", "max_size_mb", 50)))

    @property
    def UPLOAD_ALLOWED_TYPES(self) -> List[str]:
        return _as_list(self._get("upload", "allowed_types", [
            "application/pdf", "image/jpeg", "image/png",
            "image/webp", "audio/mpeg", "audio/wav",
        ]))

    # ==================== PDF 代理配置 ====================
    @property
    def PDF_PROXY_CACHE_MAX_AGE(self) -> int:
        return int(os.getenv("PDF_PROXY_CACHE_MAX_AGE", self._get("pdf_proxy", "cache_max_age", 3600)))

    @property
    def PDF_PROXY_ALLOWED_HOSTS(self) -> List[str]:
        env_hosts = os.getenv("PDF_PROXY_ALLOWED_HOSTS")
        if env_hosts is not None:
            return _as_list(env_hosts)
        return _as_list(self._get("pdf_proxy", "allowed_hosts", []))

    # ==================== 业务规则配置 ====================
    @property
    def DEFAULT_PAGE_SIZE(self) -> int:
        return int(os.getenv("DEFAULT_PAGE_SIZE", self._get("business", "default_page_size", 20)))

    @property
    def MAX_PAGE_SIZE(self) -> int:
        return int(os.getenv("MAX_PAGE_SIZE", self._get("business", "max_page_size", 100)))

    @property
    def SPECIAL_LIST_SIZE(self) -> int:
        return int(os.getenv("SPECIAL_LIST_SIZE", self._get("business", "special_list_size", 10)))

    @property
    def VIP_CODE_DAYS(self) -> int:
        return int(os.getenv("VIP_CODE_DAYS", self._get("business", "vip_code_days", 30)))


# 全局配置实例
settings = Settings()
