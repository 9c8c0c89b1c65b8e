"""
通知路由（需要登录）
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import CurrentUser, get_current_user, get_db_session
from hekayaty.models import NotificationCreate
from hekayaty.services import notification_service

router = APIRouter()


@router.get("")
async def list_notifications(
    limit: Optional[int] = Query(None, ge=1),
    unread: bool = Query(False, description="只看未读"),
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await notification_service.list_notifications(
        session, current_user.id, unread_only=unread, limit=limit
    )


@router.put("/{notification_id}/read")
async def mark_read(
    notification_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """标记已读（他人的通知按不存在处理）"""
    return await notification_service.mark_read(session, current_user.id, notification_id)


@router.post("")
async def create_notification(
    data: NotificationCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await notification_service.create_notification(session, current_user.id, data)
