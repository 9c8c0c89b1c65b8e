"""
精选内容路由
"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import CurrentUser, require_admin, get_db_session, client_ip
from hekayaty.services import featured_service

router = APIRouter()


@router.get("")
async def list_featured(
    type: str = Query("all", description="stories / comics / all"),
    limit: int = Query(10, ge=1, le=100),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await featured_service.list_featured(session, content_type=type, limit=limit)


@router.post("/{content_type}/{content_id}")
async def feature_content(
    content_type: str,
    content_id: str,
    request: Request,
    admin: CurrentUser = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    设为精选

    - 仅管理员
    - 写入审计日志 content_featured
    """
    return await featured_service.set_featured(
        session, content_type, content_id, True, admin.id, ip_address=client_ip(request)
    )


@router.delete("/{content_type}/{content_id}")
async def unfeature_content(
    content_type: str,
    content_id: str,
    request: Request,
    admin: CurrentUser = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await featured_service.set_featured(
        session, content_type, content_id, False, admin.id, ip_address=client_ip(request)
    )
