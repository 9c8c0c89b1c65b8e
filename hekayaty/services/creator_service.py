"""
创作者服务

创作者列表、排行，名人堂活跃作者榜与比赛记录
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import ProfileDAO, StoryDAO, ComicDAO, CompetitionDAO
from hekayaty.models import CompetitionCreate
from hekayaty.services.aggregation import rank_creators, tally_authors
from hekayaty.services.helpers import clamp_limit

CREATOR_FIELDS = ("id", "username", "full_name", "avatar_url", "bio", "role")
DICEBEAR_URL = "https://api.dicebear.com/7.x/initials/svg?seed={seed}"


class CreatorService:
    """创作者服务"""

    @staticmethod
    async def list_creators(
        session: AsyncSession,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[dict]:
        """创作者列表（附故事数和漫画数）"""
        profiles = await ProfileDAO.list_profiles(session, limit=clamp_limit(limit), offset=max(0, offset))
        ids = [profile.id for profile in profiles]

        story_counts = await StoryDAO.count_by_author(session, ids)
        comic_counts = await ComicDAO.count_by_author(session, ids)

        return [
            {
                **profile.to_dict(*CREATOR_FIELDS),
                "story_count": story_counts.get(profile.id, 0),
                "comic_count": comic_counts.get(profile.id, 0),
            }
            for profile in profiles
        ]

    @staticmethod
    async def top_creators(session: AsyncSession, limit: int = 5) -> List[dict]:
        """
        按作品总数（故事 + 漫画）排行

        Args:
            session: 数据库会话
            limit: 返回数量

        Returns:
            创作者列表（附 story_count / comic_count / total_works）
        """
        story_counts = await StoryDAO.count_by_author(session)
        comic_counts = await ComicDAO.count_by_author(session)

        totals = {}
        for counts in (story_counts, comic_counts):
            for author_id, count in counts.items():
                totals[author_id] = totals.get(author_id, 0) + count
        top_ids = sorted(totals, key=totals.get, reverse=True)[:limit]

        profiles = await ProfileDAO.get_by_ids(session, top_ids)
        return rank_creators(
            [profile.to_dict(*CREATOR_FIELDS) for profile in profiles],
            story_counts,
            comic_counts,
            limit=limit,
        )

    @staticmethod
    async def active_writers(session: AsyncSession, limit: int = 3) -> List[dict]:
        """
        名人堂活跃作者榜

        全量扫描已发布故事按作者计数，再逐个查询前 N 名的资料
        """
        ranking = tally_authors(await StoryDAO.published_author_ids(session))[:limit]

        writers = []
        for author_id, count in ranking:
            profile = await ProfileDAO.get_by_id(session, author_id)
            username = profile.username if profile else None
            writers.append({
                "id": profile.id if profile else author_id,
                "name": username or "Unknown",
                "title": (profile.full_name if profile else None) or "Writer",
                "avatar": (profile.avatar_url if profile else None) or DICEBEAR_URL.format(seed=username or "A"),
                "stories": count,
            })
        return writers

    @staticmethod
    async def list_competitions(session: AsyncSession) -> List[dict]:
        return [competition.to_dict() for competition in await CompetitionDAO.list_all(session)]

    @staticmethod
    async def create_competition(session: AsyncSession, data: CompetitionCreate) -> dict:
        competition = await CompetitionDAO.create(
            session,
            data.name,
            winner_name=data.winner_name,
            story_title=data.story_title,
            winner_id=data.winner_id,
        )
        return competition.to_dict()


# 全局服务实例
creator_service = CreatorService()
