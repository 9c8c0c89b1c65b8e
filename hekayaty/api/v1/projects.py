"""
创作项目路由（需要登录）
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import CurrentUser, get_current_user, get_db_session
from hekayaty.models import ProjectCreate, ProjectUpdate
from hekayaty.services import project_service

router = APIRouter()


@router.get("")
async def list_projects(
    author_id: Optional[str] = Query(None, alias="authorId"),
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """项目列表（默认当前用户）"""
    return await project_service.list_projects(session, author_id or current_user.id)


@router.post("")
async def create_project(
    data: ProjectCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await project_service.create_project(session, current_user.id, data)


@router.get("/{project_id}")
async def get_project(
    project_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await project_service.get_project(session, current_user.id, project_id)


@router.put("/{project_id}")
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    更新项目

    - 只有作者可以修改
    - 不存在返回 404，不是作者返回 403
    """
    return await project_service.update_project(session, current_user.id, project_id, data)


@router.delete("/{project_id}")
async def delete_project(
    project_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await project_service.delete_project(session, current_user.id, project_id)
