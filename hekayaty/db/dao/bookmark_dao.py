"""
收藏数据访问对象
"""

from typing import Optional, List
from sqlalchemy import select, and_, delete
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.interaction import Bookmark
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.timeutil import utcnow


class BookmarkDAO:
    """收藏 DAO"""

    @staticmethod
    async def get(session: AsyncSession, user_id: str, story_id: str) -> Optional[Bookmark]:
        """查询收藏记录"""
        result = await session.execute(
            select(Bookmark).where(
                and_(Bookmark.user_id == user_id, Bookmark.story_id == story_id)
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def create(session: AsyncSession, user_id: str, story_id: str) -> Bookmark:
        """新增收藏"""
        bookmark = Bookmark(
            id=generate_ulid(),
            user_id=user_id,
            story_id=story_id,
            created_at=utcnow(),
        )

        session.add(bookmark)
        await session.flush()

        return bookmark

    @staticmethod
    async def delete(session: AsyncSession, user_id: str, story_id: str) -> bool:
        """取消收藏"""
        result = await session.execute(
            delete(Bookmark).where(
                and_(Bookmark.user_id == user_id, Bookmark.story_id == story_id)
            )
        )
        return result.rowcount > 0

    @staticmethod
    async def list_by_user(session: AsyncSession, user_id: str) -> List[Bookmark]:
        """获取用户收藏（按时间倒序）"""
        result = await session.execute(
            select(Bookmark)
            .where(Bookmark.user_id == user_id)
            .order_by(Bookmark.created_at.desc())
        )
        return list(result.scalars().all())
