"""
通知数据访问对象
"""

from typing import Optional, List
from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.notification import Notification
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.timeutil import utcnow


class NotificationDAO:
    """通知 DAO"""

    @staticmethod
    async def create(session: AsyncSession, user_id: str, **fields) -> Notification:
        """创建通知（默认未读）"""
        notification = Notification(
            id=generate_ulid(),
            user_id=user_id,
            **fields,
            is_read=False,
            created_at=utcnow(),
        )

        session.add(notification)
        await session.flush()

        return notification

    @staticmethod
    async def list_by_user(
        session: AsyncSession,
        user_id: str,
        unread_only: bool = False,
        limit: int = 20
    ) -> List[Notification]:
        """获取用户通知（按时间倒序）"""
        query = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            query = query.where(Notification.is_read == False)  # noqa: E712

        result = await session.execute(
            query.order_by(Notification.created_at.desc()).limit(limit)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_own(
        session: AsyncSession,
        notification_id: str,
        user_id: str
    ) -> Optional[Notification]:
        """获取属于该用户的通知"""
        result = await session.execute(
            select(Notification).where(
                and_(
                    Notification.id == notification_id,
                    Notification.user_id == user_id
                )
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def mark_read(session: AsyncSession, notification: Notification) -> Notification:
        """标记为已读"""
        notification.is_read = True
        await session.flush()
        return notification
