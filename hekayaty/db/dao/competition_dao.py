"""
名人堂比赛数据访问对象
"""

from typing import Optional, List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.competition import HallCompetition
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.timeutil import utcnow


class CompetitionDAO:
    """名人堂比赛 DAO"""

    @staticmethod
    async def create(
        session: AsyncSession,
        name: str,
        winner_name: Optional[str] = None,
        story_title: Optional[str] = None,
        winner_id: Optional[str] = None
    ) -> HallCompetition:
        """新增比赛记录"""
        competition = HallCompetition(
            id=generate_ulid(),
            name=name,
            winner_name=winner_name,
            story_title=story_title,
            winner_id=winner_id,
            created_at=utcnow(),
        )

        session.add(competition)
        await session.flush()

        return competition

    @staticmethod
    async def list_all(session: AsyncSession) -> List[HallCompetition]:
        """获取全部比赛记录（按时间倒序）"""
        result = await session.execute(
            select(HallCompetition).order_by(HallCompetition.created_at.desc())
        )
        return list(result.scalars().all())
