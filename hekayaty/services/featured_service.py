"""
精选内容服务
"""

from typing import Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import StoryDAO, ComicDAO, AuditLogDAO
from hekayaty.errors import NotFound, ValidationFailed
from hekayaty.services.helpers import attach_profiles, clamp_limit

CONTENT_DAOS = {
    "stories": StoryDAO,
    "comics": ComicDAO,
}


class FeaturedService:
    """精选内容服务"""

    @staticmethod
    async def list_featured(session: AsyncSession, content_type: str = "all", limit: int = 10) -> dict:
        """精选的已发布故事 / 漫画"""
        limit = clamp_limit(limit)
        results = {}

        if content_type in ("stories", "all"):
            stories = await StoryDAO.list_featured(session, limit=limit)
            results["stories"] = await attach_profiles(session, stories)

        if content_type in ("comics", "all"):
            comics = await ComicDAO.list_published(session, limit=limit, featured_only=True)
            results["comics"] = await attach_profiles(session, comics)

        return results

    @staticmethod
    async def set_featured(
        session: AsyncSession,
        content_type: str,
        content_id: str,
        featured: bool,
        admin_id: str,
        ip_address: Optional[str] = None
    ) -> dict:
        """
        设置 / 取消精选（设置精选时写审计日志）

        Args:
            session: 数据库会话
            content_type: stories / comics
            content_id: 内容ID
            featured: 是否精选
            admin_id: 管理员ID
            ip_address: 来源IP

        Returns:
            更新后的内容
        """
        dao = CONTENT_DAOS.get(content_type)
        if dao is None:
            raise ValidationFailed(f"Invalid content type: {content_type}")

        record = await dao.get_by_id(session, content_id)
        if not record:
            raise NotFound("Content not found")

        record = await dao.update(session, record, is_featured=featured)

        if featured:
            await AuditLogDAO.create(
                session,
                action="content_featured",
                user_id=admin_id,
                details={"content_type": content_type, "content_id": content_id},
                ip_address=ip_address,
            )
        logger.info(f"🌟 {content_type}/{content_id} featured={featured}")
        return record.to_dict()


# 全局服务实例
featured_service = FeaturedService()
