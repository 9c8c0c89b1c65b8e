"""
数据分析服务
"""

from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import ProfileDAO, StoryDAO, ComicDAO
from hekayaty.services.admin_service import run_counts
from hekayaty.services.helpers import attach_profiles
from hekayaty.utils.timeutil import utcnow

RECENT_FIELDS = ("id", "title", "created_at", "is_published")


class AnalyticsService:
    """数据分析服务"""

    @staticmethod
    async def dashboard(session: AsyncSession) -> dict:
        """总览：各类计数 + 最近 10 个故事"""
        total_users, total_stories, total_comics, published_stories, vip_users = await run_counts(
            lambda s: ProfileDAO.count(s),
            lambda s: StoryDAO.count(s),
            lambda s: ComicDAO.count(s),
            lambda s: StoryDAO.count(s, is_published=True),
            lambda s: ProfileDAO.count(s, role="vip"),
        )

        recent = await StoryDAO.list_stories(session, is_published=None, limit=10)
        recent_activity = [
            {**{key: item[key] for key in RECENT_FIELDS}, "profiles": item["profiles"]}
            for item in await attach_profiles(session, recent, fields=("username", "full_name"))
        ]

        return {
            "totalUsers": total_users,
            "totalStories": total_stories,
            "totalComics": total_comics,
            "publishedStories": published_stories,
            "vipUsers": vip_users,
            "recentActivity": recent_activity,
        }

    @staticmethod
    async def metrics(session: AsyncSession, period: int = 30) -> dict:
        """
        指定天数内的增长指标

        Args:
            session: 数据库会话
            period: 统计天数

        Returns:
            新用户数、新故事数、类型分布、评分最高的故事
        """
        date_from = utcnow() - timedelta(days=period)

        new_users = await ProfileDAO.count(session, created_after=date_from)
        new_stories = await StoryDAO.count(session, created_after=date_from)
        genres = await StoryDAO.genre_counts(session)
        top_rated = await StoryDAO.top_rated(session, limit=10)

        top_rated_stories = [
            {
                **{key: item[key] for key in ("id", "title", "average_rating", "rating_count")},
                "profiles": item["profiles"],
            }
            for item in await attach_profiles(session, top_rated, fields=("username",))
        ]

        return {
            "newUsersCount": new_users,
            "newStoriesCount": new_stories,
            "topGenres": [{"genre": genre, "count": count} for genre, count in genres],
            "topRatedStories": top_rated_stories,
            "period": period,
        }


# 全局服务实例
analytics_service = AnalyticsService()
