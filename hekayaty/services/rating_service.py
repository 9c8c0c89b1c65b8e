"""
评分服务

写入评分后重新计算故事的平均分和评分人数
"""

from typing import List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import RatingDAO, StoryDAO
from hekayaty.errors import NotFound
from hekayaty.services.aggregation import average_rating
from hekayaty.services.helpers import attach_profiles


class RatingService:
    """评分服务"""

    @staticmethod
    async def rate_story(
        session: AsyncSession,
        user_id: str,
        story_id: str,
        rating: int,
        review: Optional[str] = None
    ) -> dict:
        """
        评分（按用户+故事覆盖写入）

        写入后读取该故事全部评分重新求均值，并在同一事务内写回故事。
        并发评分时仍可能互相覆盖均值（后写者生效），下一次评分会纠正

        Args:
            session: 数据库会话
            user_id: 用户ID
            story_id: 故事ID
            rating: 评分（1-5）
            review: 评论

        Returns:
            评分记录字典
        """
        story = await StoryDAO.get_by_id(session, story_id)
        if not story:
            raise NotFound("Story not found")

        record = await RatingDAO.upsert(session, user_id, story_id, rating, review)

        values = await RatingDAO.values_for_story(session, story_id)
        mean, count = average_rating(values)
        await StoryDAO.update_rating_stats(session, story, mean, count)

        logger.info(f"⭐ Story {story_id} rated {rating} by {user_id} (avg {mean:.2f} over {count})")
        return record.to_dict()

    @staticmethod
    async def list_ratings(session: AsyncSession, story_id: str) -> List[dict]:
        """故事评分列表（附评分用户资料）"""
        ratings = await RatingDAO.list_by_story(session, story_id)
        return await attach_profiles(session, ratings, owner_field="user_id")


# 全局服务实例
rating_service = RatingService()
