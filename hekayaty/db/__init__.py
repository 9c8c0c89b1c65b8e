"""
数据库模块

包含 SQLAlchemy ORM 模型、数据库连接管理等
"""

from .base import Base, init_db, close_db

__all__ = [
    "Base",
    "init_db",
    "close_db",
]
