"""
用户资料服务
"""

from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import ProfileDAO, StoryDAO, ComicDAO
from hekayaty.errors import NotFound, Forbidden
from hekayaty.models import ProfileUpdate
from hekayaty.services.helpers import compact

STORY_SUMMARY_FIELDS = ("id", "title", "cover_url", "created_at", "is_published")


class ProfileService:
    """用户资料服务"""

    @staticmethod
    async def get_profile(session: AsyncSession, user_id: str) -> dict:
        """
        获取用户资料，附带其故事和漫画摘要

        Returns:
            资料字典，多出 stories / comics 两个列表
        """
        profile = await ProfileDAO.get_by_id(session, user_id)
        if not profile:
            raise NotFound("Profile not found")

        stories = await StoryDAO.list_stories(session, is_published=None, author_id=user_id, limit=100)
        comics = await ComicDAO.list_by_author(session, user_id, limit=100)

        return {
            **profile.to_dict(),
            "stories": [story.to_dict(*STORY_SUMMARY_FIELDS) for story in stories],
            "comics": [comic.to_dict(*STORY_SUMMARY_FIELDS) for comic in comics],
        }

    @staticmethod
    async def _get_own_profile(session: AsyncSession, user_id: str, caller_id: str):
        if user_id != caller_id:
            raise Forbidden()
        profile = await ProfileDAO.get_by_id(session, user_id)
        if not profile:
            raise NotFound("Profile not found")
        return profile

    @staticmethod
    async def update_profile(
        session: AsyncSession,
        caller_id: str,
        user_id: str,
        data: ProfileUpdate
    ) -> dict:
        """更新自己的资料（只允许用户名、全名、头像、简介）"""
        profile = await ProfileService._get_own_profile(session, user_id, caller_id)
        profile = await ProfileDAO.update(session, profile, **compact(data.model_dump(exclude_unset=True)))
        return profile.to_dict()

    @staticmethod
    async def upgrade_premium(session: AsyncSession, caller_id: str, user_id: str) -> dict:
        """升级为会员（仅本人）"""
        profile = await ProfileService._get_own_profile(session, user_id, caller_id)
        profile = await ProfileDAO.update(session, profile, role="vip", is_premium=True)
        return profile.to_dict()


# 全局服务实例
profile_service = ProfileService()
