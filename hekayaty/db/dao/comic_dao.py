"""
漫画数据访问对象
"""

from typing import Optional, List
from sqlalchemy import select, func, or_, and_, delete
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.comic import Comic
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.text import contains_pattern, LIKE_ESCAPE
from hekayaty.utils.timeutil import utcnow


class ComicDAO:
    """漫画 DAO"""

    @staticmethod
    async def create(session: AsyncSession, author_id: str, **fields) -> Comic:
        """创建漫画"""
        now = utcnow()
        fields.setdefault("is_published", False)
        comic = Comic(
            id=generate_ulid(),
            **fields,
            author_id=author_id,
            created_at=now,
            updated_at=now,
        )

        session.add(comic)
        await session.flush()

        return comic

    @staticmethod
    async def get_by_id(session: AsyncSession, comic_id: str) -> Optional[Comic]:
        """根据ID获取漫画"""
        result = await session.execute(
            select(Comic).where(Comic.id == comic_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def list_published(
        session: AsyncSession,
        limit: int = 20,
        offset: int = 0,
        featured_only: bool = False
    ) -> List[Comic]:
        """获取已发布漫画（按创建时间倒序）"""
        query = select(Comic).where(Comic.is_published == True)  # noqa: E712
        if featured_only:
            query = query.where(Comic.is_featured == True)  # noqa: E712

        result = await session.execute(
            query.order_by(Comic.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    @staticmethod
    async def update(session: AsyncSession, comic: Comic, **fields) -> Comic:
        """部分更新漫画"""
        for key, value in fields.items():
            setattr(comic, key, value)
        comic.updated_at = utcnow()

        await session.flush()
        return comic

    @staticmethod
    async def delete(session: AsyncSession, comic_id: str) -> bool:
        """删除漫画"""
        result = await session.execute(
            delete(Comic).where(Comic.id == comic_id)
        )
        return result.rowcount > 0

    @staticmethod
    async def count(session: AsyncSession) -> int:
        """统计漫画数量"""
        result = await session.execute(select(func.count()).select_from(Comic))
        return result.scalar() or 0

    @staticmethod
    async def count_by_author(session: AsyncSession, author_ids: Optional[List[str]] = None) -> dict:
        """按作者统计漫画数量，返回 {author_id: count}（author_ids 为 None 时统计全部作者）"""
        query = select(Comic.author_id, func.count(Comic.id)).group_by(Comic.author_id)
        if author_ids is not None:
            if not author_ids:
                return {}
            query = query.where(Comic.author_id.in_(author_ids))

        result = await session.execute(query)
        return {author_id: count for author_id, count in result.all()}

    @staticmethod
    async def list_by_author(session: AsyncSession, author_id: str, limit: int = 20) -> List[Comic]:
        """获取作者的漫画"""
        result = await session.execute(
            select(Comic)
            .where(Comic.author_id == author_id)
            .order_by(Comic.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    @staticmethod
    async def search(session: AsyncSession, keyword: str, limit: int = 20) -> List[Comic]:
        """在已发布漫画的标题和简介中搜索（不区分大小写）"""
        pattern = contains_pattern(keyword)
        result = await session.execute(
            select(Comic)
            .where(
                and_(
                    Comic.is_published == True,  # noqa: E712
                    or_(
                        Comic.title.ilike(pattern, escape=LIKE_ESCAPE),
                        Comic.description.ilike(pattern, escape=LIKE_ESCAPE)
                    )
                )
            )
            .order_by(Comic.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())
