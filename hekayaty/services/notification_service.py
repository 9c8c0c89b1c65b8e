"""
通知服务
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import NotificationDAO
from hekayaty.errors import NotFound
from hekayaty.models import NotificationCreate
from hekayaty.services.helpers import clamp_limit


class NotificationService:
    """通知服务"""

    @staticmethod
    async def list_notifications(
        session: AsyncSession,
        user_id: str,
        unread_only: bool = False,
        limit: Optional[int] = None
    ) -> List[dict]:
        notifications = await NotificationDAO.list_by_user(
            session, user_id, unread_only=unread_only, limit=clamp_limit(limit)
        )
        return [notification.to_dict() for notification in notifications]

    @staticmethod
    async def mark_read(session: AsyncSession, user_id: str, notification_id: str) -> dict:
        """标记已读（只能操作自己的通知）"""
        notification = await NotificationDAO.get_own(session, notification_id, user_id)
        if not notification:
            raise NotFound("Notification not found")
        notification = await NotificationDAO.mark_read(session, notification)
        return notification.to_dict()

    @staticmethod
    async def create_notification(
        session: AsyncSession,
        caller_id: str,
        data: NotificationCreate
    ) -> dict:
        fields = data.model_dump(exclude={"user_id"})
        notification = await NotificationDAO.create(session, data.user_id or caller_id, **fields)
        return notification.to_dict()


# 全局服务实例
notification_service = NotificationService()
