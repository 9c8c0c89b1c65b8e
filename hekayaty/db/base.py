"""
数据库基础配置

包含 Base 类、数据库引擎初始化等
"""

from typing import Optional

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import NullPool

from hekayaty.config.settings import settings


class _SerializableMixin:
    """ORM 对象转字典（列名即 JSON 字段名）"""

    def to_dict(self, *fields: str) -> dict:
        names = fields or [column.name for column in self.__table__.columns]
        return {name: getattr(self, name) for name in names}


# 声明式基类
Base = declarative_base(cls=_SerializableMixin)

# 异步引擎（用于 asyncpg）
async_engine = None
AsyncSessionLocal = None


def get_database_url(url: Optional[str] = None, async_mode: bool = True) -> str:
    """
    获取数据库连接 URL

    Args:
        url: 显式指定的连接串，默认读取 DATABASE_URL
        async_mode: 是否使用异步模式

    Returns:
        数据库连接 URL
    """
    url = url or settings.DATABASE_URL
    if not url:
        raise RuntimeError("DATABASE_URL is not set")

    # 异步模式：postgresql:// -> postgresql+asyncpg://
    if async_mode and url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    elif async_mode and url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)

    return url


async def init_db(url: Optional[str] = None, create_tables: Optional[bool] = None):
    """
    初始化数据库连接

    创建异步引擎和会话工厂

    Args:
        url: 数据库连接串，默认读取 DATABASE_URL
        create_tables: 是否自动建表，默认读取 database.auto_create
    """
    global async_engine, AsyncSessionLocal

    database_url = get_database_url(url)
    engine_kwargs = {"echo": settings.DEBUG}
    if database_url.startswith("sqlite"):
        # SQLite（本地开发、测试）不使用连接池
        engine_kwargs["poolclass"] = NullPool
    else:
        engine_kwargs.update(
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
        )

    # 创建异步引擎
    async_engine = create_async_engine(database_url, **engine_kwargs)

    # 创建异步会话工厂
    AsyncSessionLocal = sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    if create_tables is None:
        create_tables = settings.DATABASE_AUTO_CREATE

    if create_tables:
        # 导入所有模型以确保 Base 知道它们
        import hekayaty.db.models  # noqa: F401

        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)


async def close_db():
    """关闭数据库连接"""
    global async_engine, AsyncSessionLocal

    if async_engine:
        await async_engine.dispose()
        async_engine = None
        AsyncSessionLocal = None

