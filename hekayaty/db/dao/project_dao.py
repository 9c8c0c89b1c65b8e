"""
创作项目数据访问对象
"""

from typing import Optional, List
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.project import Project
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.timeutil import utcnow


class ProjectDAO:
    """创作项目 DAO"""

    @staticmethod
    async def create(session: AsyncSession, author_id: str, **fields) -> Project:
        """创建项目"""
        now = utcnow()
        project = Project(
            id=generate_ulid(),
            **fields,
            author_id=author_id,
            created_at=now,
            updated_at=now,
        )

        session.add(project)
        await session.flush()

        return project

    @staticmethod
    async def get_by_id(session: AsyncSession, project_id: str) -> Optional[Project]:
        """根据ID获取项目"""
        result = await session.execute(
            select(Project).where(Project.id == project_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def list_by_author(session: AsyncSession, author_id: str) -> List[Project]:
        """获取作者的项目（按时间倒序）"""
        result = await session.execute(
            select(Project)
            .where(Project.author_id == author_id)
            .order_by(Project.created_at.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def update(session: AsyncSession, project: Project, **fields) -> Project:
        """部分更新项目"""
        for key, value in fields.items():
            setattr(project, key, value)
        project.updated_at = utcnow()

        await session.flush()
        return project

    @staticmethod
    async def delete(session: AsyncSession, project_id: str) -> bool:
        """删除项目"""
        result = await session.execute(
            delete(Project).where(Project.id == project_id)
        )
        return result.rowcount > 0
