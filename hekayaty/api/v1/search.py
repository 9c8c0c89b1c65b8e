"""
搜索路由
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import get_db_session
from hekayaty.services import search_service

router = APIRouter()


@router.get("")
async def search(
    q: Optional[str] = Query(None, description="搜索关键词"),
    type: str = Query("all", description="stories / comics / users / all"),
    limit: int = Query(20, ge=1, le=100),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    全站搜索

    - 故事、漫画：已发布内容的标题和简介（不区分大小写）
    - 用户：用户名和全名
    """
    return await search_service.search(session, q or "", search_type=type, limit=limit)
