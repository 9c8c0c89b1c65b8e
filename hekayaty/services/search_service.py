"""
搜索服务

标题/简介、用户名/全名的不区分大小写子串匹配
"""

from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import StoryDAO, ComicDAO, ProfileDAO
from hekayaty.errors import ValidationFailed
from hekayaty.services.helpers import attach_profiles, clamp_limit

SEARCH_TYPES = ("stories", "comics", "users", "all")
USER_FIELDS = ("id", "username", "full_name", "avatar_url", "bio")


class SearchService:
    """搜索服务"""

    @staticmethod
    async def search(session: AsyncSession, query: str, search_type: str = "all", limit: int = 20) -> dict:
        """
        搜索已发布内容和用户

        Args:
            session: 数据库会话
            query: 关键词
            search_type: stories / comics / users / all
            limit: 每类最多返回数量

        Returns:
            {"stories": [...], "comics": [...], "users": [...]}（只包含请求的类型）
        """
        query = (query or "").strip()
        if not query:
            raise ValidationFailed("Search query required")
        if search_type not in SEARCH_TYPES:
            raise ValidationFailed(f"Invalid search type: {search_type}")

        limit = clamp_limit(limit)
        results = {}

        if search_type in ("stories", "all"):
            stories = await StoryDAO.search(session, query, limit=limit)
            results["stories"] = await attach_profiles(session, stories)

        if search_type in ("comics", "all"):
            comics = await ComicDAO.search(session, query, limit=limit)
            results["comics"] = await attach_profiles(session, comics)

        if search_type in ("users", "all"):
            users = await ProfileDAO.search(session, query, limit=limit)
            results["users"] = [user.to_dict(*USER_FIELDS) for user in users]

        return results


# 全局服务实例
search_service = SearchService()
