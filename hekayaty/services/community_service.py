"""
社区服务（工作坊、帖子）
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import CommunityDAO
from hekayaty.models import WorkshopCreate, PostCreate
from hekayaty.services.helpers import attach_profiles, clamp_limit


class CommunityService:
    """社区服务"""

    @staticmethod
    async def list_workshops(
        session: AsyncSession,
        owner_id: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[dict]:
        workshops = await CommunityDAO.list_workshops(session, owner_id=owner_id, limit=clamp_limit(limit))
        return await attach_profiles(session, workshops, owner_field="owner_id")

    @staticmethod
    async def create_workshop(session: AsyncSession, user_id: str, data: WorkshopCreate) -> dict:
        workshop = await CommunityDAO.create_workshop(
            session, user_id, data.title, description=data.description, category=data.category
        )
        return workshop.to_dict()

    @staticmethod
    async def list_posts(
        session: AsyncSession,
        workshop_id: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[dict]:
        posts = await CommunityDAO.list_posts(session, workshop_id=workshop_id, limit=clamp_limit(limit))
        return await attach_profiles(session, posts)

    @staticmethod
    async def create_post(session: AsyncSession, user_id: str, data: PostCreate) -> dict:
        post = await CommunityDAO.create_post(
            session, user_id, data.title, content=data.content, workshop_id=data.workshop_id
        )
        return post.to_dict()


# 全局服务实例
community_service = CommunityService()
