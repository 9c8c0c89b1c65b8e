"""
章节数据访问对象
"""

from typing import Optional, List
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.story import StoryChapter
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.timeutil import utcnow


class ChapterDAO:
    """章节 DAO"""

    @staticmethod
    async def create(session: AsyncSession, story_id: str, **fields) -> StoryChapter:
        """创建章节"""
        now = utcnow()
        chapter = StoryChapter(
            id=generate_ulid(),
            story_id=story_id,
            **fields,
            created_at=now,
            updated_at=now,
        )

        session.add(chapter)
        await session.flush()

        return chapter

    @staticmethod
    async def get_by_id(session: AsyncSession, chapter_id: str) -> Optional[StoryChapter]:
        """根据ID获取章节"""
        result = await session.execute(
            select(StoryChapter).where(StoryChapter.id == chapter_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def list_by_story(session: AsyncSession, story_id: str) -> List[StoryChapter]:
        """获取故事的全部章节（按 chapter_order 升序）"""
        result = await session.execute(
            select(StoryChapter)
            .where(StoryChapter.story_id == story_id)
            .order_by(StoryChapter.chapter_order.asc(), StoryChapter.created_at.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def update(session: AsyncSession, chapter: StoryChapter, **fields) -> StoryChapter:
        """部分更新章节"""
        for key, value in fields.items():
            setattr(chapter, key, value)
        chapter.updated_at = utcnow()

        await session.flush()
        return chapter

    @staticmethod
    async def delete(session: AsyncSession, chapter_id: str) -> bool:
        """删除章节"""
        result = await session.execute(
            delete(StoryChapter).where(StoryChapter.id == chapter_id)
        )
        return result.rowcount > 0
