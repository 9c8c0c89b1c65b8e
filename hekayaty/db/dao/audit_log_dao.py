"""
审计日志数据访问对象
"""

from datetime import datetime
from typing import Optional, List
from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.audit_log import AuditLog
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.timeutil import utcnow


class AuditLogDAO:
    """审计日志 DAO"""

    @staticmethod
    async def create(
        session: AsyncSession,
        action: str,
        user_id: Optional[str] = None,
        details: Optional[dict] = None,
        ip_address: Optional[str] = None
    ) -> AuditLog:
        """
        追加一条审计日志

        Args:
            session: 数据库会话
            action: 动作标签（如 user_banned）
            user_id: 操作者ID
            details: 详情
            ip_address: 来源IP

        Returns:
            AuditLog: 新记录
        """
        log = AuditLog(
            id=generate_ulid(),
            action=action,
            user_id=user_id,
            details=details,
            ip_address=ip_address,
            created_at=utcnow(),
        )

        session.add(log)
        await session.flush()

        return log

    @staticmethod
    async def list_logs(
        session: AsyncSession,
        limit: int = 50,
        offset: int = 0,
        action: Optional[str] = None,
        user_id: Optional[str] = None
    ) -> List[AuditLog]:
        """按时间倒序获取审计日志"""
        query = select(AuditLog)
        if action:
            query = query.where(AuditLog.action == action)
        if user_id:
            query = query.where(AuditLog.user_id == user_id)

        result = await session.execute(
            query.order_by(AuditLog.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    @staticmethod
    async def list_by_actions_since(
        session: AsyncSession,
        actions: List[str],
        since: datetime
    ) -> List[AuditLog]:
        """获取指定时间之后的若干类动作"""
        result = await session.execute(
            select(AuditLog)
            .where(
                and_(
                    AuditLog.action.in_(actions),
                    AuditLog.created_at >= since
                )
            )
            .order_by(AuditLog.created_at.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def list_with_ip(session: AsyncSession, limit: int = 100) -> List[AuditLog]:
        """获取最近带 IP 的日志"""
        result = await session.execute(
            select(AuditLog)
            .where(AuditLog.ip_address.is_not(None))
            .order_by(AuditLog.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())
