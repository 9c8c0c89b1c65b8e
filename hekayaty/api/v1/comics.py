"""
漫画模块路由
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import CurrentUser, get_current_user, get_db_session
from hekayaty.models import ComicCreate, ComicUpdate
from hekayaty.services import comic_service

router = APIRouter()


@router.get("")
async def list_comics(
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """已发布漫画（附作者资料）"""
    return await comic_service.list_comics(session, limit=limit, offset=offset)


@router.get("/{comic_id}")
async def get_comic(comic_id: str, session: AsyncSession = Depends(get_db_session, scope="function")):
    return await comic_service.get_comic(session, comic_id)


@router.post("")
async def create_comic(
    data: ComicCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await comic_service.create_comic(session, current_user.id, data)


@router.put("/{comic_id}")
async def update_comic(
    comic_id: str,
    data: ComicUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """更新漫画（仅作者）"""
    return await comic_service.update_comic(session, current_user.id, comic_id, data)


@router.delete("/{comic_id}")
async def delete_comic(
    comic_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """删除漫画（仅作者）"""
    return await comic_service.delete_comic(session, current_user.id, comic_id)
