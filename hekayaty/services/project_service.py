"""
创作项目服务（TaleCraft）
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import ProjectDAO
from hekayaty.errors import NotFound
from hekayaty.models import ProjectCreate, ProjectUpdate
from hekayaty.services.helpers import compact, ensure_owner


class ProjectService:
    """创作项目服务"""

    @staticmethod
    async def list_projects(session: AsyncSession, author_id: str) -> List[dict]:
        return [project.to_dict() for project in await ProjectDAO.list_by_author(session, author_id)]

    @staticmethod
    async def create_project(session: AsyncSession, user_id: str, data: ProjectCreate) -> dict:
        project = await ProjectDAO.create(session, user_id, **data.model_dump())
        return project.to_dict()

    @staticmethod
    async def get_owned_project(session: AsyncSession, project_id: str, user_id: str):
        """
        获取当前用户的项目

        Raises:
            NotFound: 项目不存在
            Forbidden: 不是作者
        """
        project = await ProjectDAO.get_by_id(session, project_id)
        if not project:
            raise NotFound("Project not found")
        ensure_owner(project.author_id, user_id)
        return project

    @staticmethod
    async def get_project(session: AsyncSession, user_id: str, project_id: str) -> dict:
        project = await ProjectService.get_owned_project(session, project_id, user_id)
        return project.to_dict()

    @staticmethod
    async def update_project(
        session: AsyncSession,
        user_id: str,
        project_id: str,
        data: ProjectUpdate
    ) -> dict:
        project = await ProjectService.get_owned_project(session, project_id, user_id)
        project = await ProjectDAO.update(session, project, **compact(data.model_dump(exclude_unset=True)))
        return project.to_dict()

    @staticmethod
    async def delete_project(session: AsyncSession, user_id: str, project_id: str) -> dict:
        await ProjectService.get_owned_project(session, project_id, user_id)
        await ProjectDAO.delete(session, project_id)
        return {"success": True}


# 全局服务实例
project_service = ProjectService()
