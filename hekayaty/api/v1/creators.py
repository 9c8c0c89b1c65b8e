"""
创作者路由（仅支持 GET）
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import get_db_session
from hekayaty.services import creator_service

router = APIRouter()


@router.get("")
async def list_creators(
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """创作者列表（附故事数、漫画数）"""
    return await creator_service.list_creators(session, limit=limit, offset=offset)


@router.get("/top")
async def top_creators(
    limit: int = Query(5, ge=1, le=100),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    创作者排行

    - 按故事数 + 漫画数降序
    """
    return await creator_service.top_creators(session, limit=limit)
