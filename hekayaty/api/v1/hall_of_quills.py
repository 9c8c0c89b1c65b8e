"""
名人堂路由
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import require_admin, get_db_session
from hekayaty.models import CompetitionCreate
from hekayaty.services import creator_service

router = APIRouter()


@router.get("/active")
async def active_writers(
    limit: int = Query(3, ge=1, le=50),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    活跃作者榜

    - 按已发布故事数排序，同数时先发布者在前
    - 没有头像时使用 dicebear 生成的首字母头像
    """
    return await creator_service.active_writers(session, limit=limit)


@router.get("/competitions")
async def list_competitions(session: AsyncSession = Depends(get_db_session, scope="function")):
    return await creator_service.list_competitions(session)


@router.post("/competitions", dependencies=[Depends(require_admin)])
async def create_competition(
    data: CompetitionCreate,
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await creator_service.create_competition(session, data)
