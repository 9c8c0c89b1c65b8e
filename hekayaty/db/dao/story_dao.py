"""
故事数据访问对象
"""

from typing import Optional, List, Tuple
from sqlalchemy import select, func, or_, and_, delete
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.story import Story
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.text import contains_pattern, LIKE_ESCAPE
from hekayaty.utils.timeutil import utcnow


class StoryDAO:
    """故事 DAO"""

    @staticmethod
    async def create(session: AsyncSession, author_id: str, **fields) -> Story:
        """
        创建故事

        Args:
            session: 数据库会话
            author_id: 作者ID（由当前登录用户决定，不接受客户端传入）
            **fields: 其余字段

        Returns:
            Story: 新创建的故事
        """
        now = utcnow()
        fields.setdefault("is_published", False)
        story = Story(
            id=generate_ulid(),
            **fields,
            author_id=author_id,
            average_rating=0.0,
            rating_count=0,
            created_at=now,
            updated_at=now,
        )

        session.add(story)
        await session.flush()

        return story

    @staticmethod
    async def get_by_id(session: AsyncSession, story_id: str) -> Optional[Story]:
        """根据ID获取故事"""
        result = await session.execute(
            select(Story).where(Story.id == story_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def list_stories(
        session: AsyncSession,
        is_published: Optional[bool] = True,
        is_premium: Optional[bool] = None,
        is_short_story: Optional[bool] = None,
        genre: Optional[str] = None,
        author_id: Optional[str] = None,
        limit: int = 20,
        offset: int = 0
    ) -> List[Story]:
        """
        获取故事列表（按创建时间倒序）

        Args:
            session: 数据库会话
            is_published: 发布状态过滤（None 表示不过滤）
            is_premium: 会员专享过滤
            is_short_story: 短篇过滤
            genre: 类型过滤
            author_id: 作者过滤
            limit: 每页数量
            offset: 偏移量

        Returns:
            故事列表
        """
        conditions = []
        if is_published is not None:
            conditions.append(Story.is_published == is_published)
        if is_premium is not None:
            conditions.append(Story.is_premium == is_premium)
        if is_short_story is not None:
            conditions.append(Story.is_short_story == is_short_story)
        if genre:
            conditions.append(Story.genre == genre)
        if author_id:
            conditions.append(Story.author_id == author_id)

        query = select(Story)
        if conditions:
            query = query.where(and_(*conditions))

        result = await session.execute(
            query.order_by(Story.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    @staticmethod
    async def list_featured(session: AsyncSession, limit: int = 10) -> List[Story]:
        """获取精选的已发布故事"""
        result = await session.execute(
            select(Story)
            .where(and_(Story.is_published == True, Story.is_featured == True))  # noqa: E712
            .order_by(Story.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    @staticmethod
    async def update(session: AsyncSession, story: Story, **fields) -> Story:
        """部分更新故事并刷新更新时间"""
        for key, value in fields.items():
            setattr(story, key, value)
        story.updated_at = utcnow()

        await session.flush()
        return story

    @staticmethod
    async def delete(session: AsyncSession, story_id: str) -> bool:
        """删除故事（章节、评分、收藏级联删除）"""
        result = await session.execute(
            delete(Story).where(Story.id == story_id)
        )
        return result.rowcount > 0

    @staticmethod
    async def update_rating_stats(
        session: AsyncSession,
        story: Story,
        average_rating: float,
        rating_count: int
    ) -> Story:
        """写回平均评分和评分人数"""
        story.average_rating = average_rating
        story.rating_count = rating_count
        story.updated_at = utcnow()

        await session.flush()
        return story

    @staticmethod
    async def count(
        session: AsyncSession,
        is_published: Optional[bool] = None,
        created_after=None
    ) -> int:
        """统计故事数量"""
        query = select(func.count()).select_from(Story)
        if is_published is not None:
            query = query.where(Story.is_published == is_published)
        if created_after is not None:
            query = query.where(Story.created_at >= created_after)

        result = await session.execute(query)
        return result.scalar() or 0

    @staticmethod
    async def count_by_author(session: AsyncSession, author_ids: Optional[List[str]] = None) -> dict:
        """按作者统计故事数量，返回 {author_id: count}（author_ids 为 None 时统计全部作者）"""
        query = select(Story.author_id, func.count(Story.id)).group_by(Story.author_id)
        if author_ids is not None:
            if not author_ids:
                return {}
            query = query.where(Story.author_id.in_(author_ids))

        result = await session.execute(query)
        return {author_id: count for author_id, count in result.all()}

    @staticmethod
    async def published_author_ids(session: AsyncSession) -> List[str]:
        """全量扫描已发布故事的作者ID（按创建时间正序）"""
        result = await session.execute(
            select(Story.author_id)
            .where(Story.is_published == True)  # noqa: E712
            .order_by(Story.created_at.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def genre_counts(session: AsyncSession) -> List[Tuple[Optional[str], int]]:
        """已发布故事按类型计数"""
        result = await session.execute(
            select(Story.genre, func.count(Story.id))
            .where(Story.is_published == True)  # noqa: E712
            .group_by(Story.genre)
            .order_by(func.count(Story.id).desc())
        )
        return [(genre, count) for genre, count in result.all()]

    @staticmethod
    async def top_rated(session: AsyncSession, limit: int = 10) -> List[Story]:
        """评分最高的已发布故事"""
        result = await session.execute(
            select(Story)
            .where(Story.is_published == True)  # noqa: E712
            .order_by(Story.average_rating.desc(), Story.rating_count.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    @staticmethod
    async def search(session: AsyncSession, keyword: str, limit: int = 20) -> List[Story]:
        """在已发布故事的标题和简介中搜索（不区分大小写）"""
        pattern = contains_pattern(keyword)
        result = await session.execute(
            select(Story)
            .where(
                and_(
                    Story.is_published == True,  # noqa: E712
                    or_(
                        Story.title.ilike(pattern, escape=LIKE_ESCAPE),
                        Story.description.ilike(pattern, escape=LIKE_ESCAPE)
                    )
                )
            )
            .order_by(Story.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())
