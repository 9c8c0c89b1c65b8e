"""
社区数据访问对象（工作坊、帖子）
"""

from typing import Optional, List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.community import Workshop, Post
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.timeutil import utcnow


class CommunityDAO:
    """社区 DAO"""

    @staticmethod
    async def create_workshop(
        session: AsyncSession,
        owner_id: str,
        title: str,
        description: Optional[str] = None,
        category: Optional[str] = None
    ) -> Workshop:
        """创建工作坊"""
        workshop = Workshop(
            id=generate_ulid(),
            owner_id=owner_id,
            title=title,
            description=description,
            category=category,
            created_at=utcnow(),
        )

        session.add(workshop)
        await session.flush()

        return workshop

    @staticmethod
    async def list_workshops(
        session: AsyncSession,
        owner_id: Optional[str] = None,
        limit: int = 20
    ) -> List[Workshop]:
        """获取工作坊列表，可按创建者过滤"""
        query = select(Workshop)
        if owner_id:
            query = query.where(Workshop.owner_id == owner_id)

        result = await session.execute(
            query.order_by(Workshop.created_at.desc()).limit(limit)
        )
        return list(result.scalars().all())

    @staticmethod
    async def create_post(
        session: AsyncSession,
        author_id: str,
        title: str,
        content: Optional[str] = None,
        workshop_id: Optional[str] = None
    ) -> Post:
        """发布帖子"""
        post = Post(
            id=generate_ulid(),
            author_id=author_id,
            workshop_id=workshop_id,
            title=title,
            content=content,
            created_at=utcnow(),
        )

        session.add(post)
        await session.flush()

        return post

    @staticmethod
    async def list_posts(
        session: AsyncSession,
        workshop_id: Optional[str] = None,
        limit: int = 20
    ) -> List[Post]:
        """获取帖子列表，可按工作坊过滤"""
        query = select(Post)
        if workshop_id:
            query = query.where(Post.workshop_id == workshop_id)

        result = await session.execute(
            query.order_by(Post.created_at.desc()).limit(limit)
        )
        return list(result.scalars().all())
