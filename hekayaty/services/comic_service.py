"""
漫画服务
"""

from typing import List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import ComicDAO
from hekayaty.errors import NotFound
from hekayaty.models import ComicCreate, ComicUpdate
from hekayaty.services.helpers import attach_profiles, clamp_limit, compact, ensure_owner


class ComicService:
    """漫画服务"""

    @staticmethod
    async def list_comics(
        session: AsyncSession,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[dict]:
        """已发布漫画（附作者资料）"""
        comics = await ComicDAO.list_published(session, limit=clamp_limit(limit), offset=max(0, offset))
        return await attach_profiles(session, comics)

    @staticmethod
    async def get_comic(session: AsyncSession, comic_id: str) -> dict:
        comic = await ComicDAO.get_by_id(session, comic_id)
        if not comic:
            raise NotFound("Comic not found")
        return comic.to_dict()

    @staticmethod
    async def create_comic(session: AsyncSession, user_id: str, data: ComicCreate) -> dict:
        comic = await ComicDAO.create(session, user_id, **data.model_dump())
        logger.info(f"🎨 Comic created: {comic.id} by {user_id}")
        return comic.to_dict()

    @staticmethod
    async def _get_owned(session: AsyncSession, comic_id: str, user_id: str):
        comic = await ComicDAO.get_by_id(session, comic_id)
        if not comic:
            raise NotFound("Comic not found")
        ensure_owner(comic.author_id, user_id)
        return comic

    @staticmethod
    async def update_comic(
        session: AsyncSession,
        user_id: str,
        comic_id: str,
        data: ComicUpdate
    ) -> dict:
        """部分更新漫画（仅作者）"""
        comic = await ComicService._get_owned(session, comic_id, user_id)
        comic = await ComicDAO.update(session, comic, **compact(data.model_dump(exclude_unset=True)))
        return comic.to_dict()

    @staticmethod
    async def delete_comic(session: AsyncSession, user_id: str, comic_id: str) -> dict:
        """删除漫画（仅作者）"""
        await ComicService._get_owned(session, comic_id, user_id)
        await ComicDAO.delete(session, comic_id)
        return {"success": True}


# 全局服务实例
comic_service = ComicService()
