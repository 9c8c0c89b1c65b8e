"""
数据分析路由（管理员，仅支持 GET）
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import require_admin, get_db_session
from hekayaty.errors import MethodNotAllowed
from hekayaty.services import analytics_service

router = APIRouter()


@router.get("/dashboard", dependencies=[Depends(require_admin)])
async def dashboard(session: AsyncSession = Depends(get_db_session, scope="function")):
    """
    数据总览

    - 用户、故事、漫画、已发布故事、VIP 用户数量
    - 最近 10 个故事（附作者）
    """
    return await analytics_service.dashboard(session)


@router.get("/metrics", dependencies=[Depends(require_admin)])
async def metrics(
    period: int = Query(30, ge=1, le=3650, description="统计天数"),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await analytics_service.metrics(session, period=period)


@router.api_route("", methods=["POST", "PUT", "DELETE", "PATCH"])
@router.api_route("/{path:path}", methods=["POST", "PUT", "DELETE", "PATCH"])
async def reject_writes(path: str = ""):
    raise MethodNotAllowed()
