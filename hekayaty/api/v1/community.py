"""
社区路由（工作坊与帖子）
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import CurrentUser, get_current_user, get_db_session
from hekayaty.models import WorkshopCreate, PostCreate
from hekayaty.services import community_service

router = APIRouter()


@router.get("/workshops")
async def list_workshops(
    user_id: Optional[str] = Query(None, alias="userId"),
    limit: Optional[int] = Query(None, ge=1),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """工作坊列表（附创建者资料）"""
    return await community_service.list_workshops(session, owner_id=user_id, limit=limit)


@router.post("/workshops")
async def create_workshop(
    data: WorkshopCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await community_service.create_workshop(session, current_user.id, data)


@router.get("/posts")
async def list_posts(
    workshop_id: Optional[str] = Query(None, alias="workshopId"),
    limit: Optional[int] = Query(None, ge=1),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await community_service.list_posts(session, workshop_id=workshop_id, limit=limit)


@router.post("/posts")
async def create_post(
    data: PostCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await community_service.create_post(session, current_user.id, data)
