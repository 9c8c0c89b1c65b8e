"""
评分数据访问对象
"""

from typing import Optional, List
from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.interaction import Rating
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.timeutil import utcnow


class RatingDAO:
    """评分 DAO"""

    @staticmethod
    async def get_by_user_story(
        session: AsyncSession,
        user_id: str,
        story_id: str
    ) -> Optional[Rating]:
        """获取用户对某故事的评分"""
        result = await session.execute(
            select(Rating).where(
                and_(Rating.user_id == user_id, Rating.story_id == story_id)
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def upsert(
        session: AsyncSession,
        user_id: str,
        story_id: str,
        rating: int,
        review: Optional[str] = None
    ) -> Rating:
        """
        按 (user_id, story_id) 写入评分，已存在则覆盖

        Args:
            session: 数据库会话
            user_id: 用户ID
            story_id: 故事ID
            rating: 评分（1-5）
            review: 评论

        Returns:
            Rating: 写入后的评分记录
        """
        now = utcnow()
        existing = await RatingDAO.get_by_user_story(session, user_id, story_id)
        if existing:
            existing.rating = rating
            existing.review = review
            existing.updated_at = now
            await session.flush()
            return existing

        record = Rating(
            id=generate_ulid(),
            user_id=user_id,
            story_id=story_id,
            rating=rating,
            review=review,
            created_at=now,
            updated_at=now,
        )
        session.add(record)
        await session.flush()

        return record

    @staticmethod
    async def list_by_story(session: AsyncSession, story_id: str) -> List[Rating]:
        """获取故事的全部评分（按时间倒序）"""
        result = await session.execute(
            select(Rating)
            .where(Rating.story_id == story_id)
            .order_by(Rating.created_at.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def values_for_story(session: AsyncSession, story_id: str) -> List[int]:
        """只读取评分值（重新计算平均分用）"""
        result = await session.execute(
            select(Rating.rating).where(Rating.story_id == story_id)
        )
        return list(result.scalars().all())
