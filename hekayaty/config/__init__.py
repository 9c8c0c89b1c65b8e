"""
配置模块
"""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
