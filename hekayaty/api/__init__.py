"""
API 路由模块
"""

from .v1 import api_router

__all__ = ["api_router"]
