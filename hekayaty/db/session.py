"""
数据库会话管理

提供数据库会话的便捷访问
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db import base


@asynccontextmanager
async def get_session() -> AsyncIterator[AsyncSession]:
    """
    获取数据库会话的上下文管理器（请求依赖与脚本共用）

    使用示例：
    ```python
    async with get_session() as session:
        profile = await session.get(Profile, user_id)
    ```

    Yields:
        AsyncSession: 数据库会话
    """
    if not base.AsyncSessionLocal:
        raise RuntimeError("Database not initialized")

    async with base.AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
