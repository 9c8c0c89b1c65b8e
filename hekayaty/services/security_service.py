"""
安全监控服务（审计日志）
"""

from datetime import timedelta
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import AuditLogDAO
from hekayaty.models import AuditLogCreate
from hekayaty.services.aggregation import group_by_ip
from hekayaty.utils.timeutil import utcnow

SUSPICIOUS_ACTIONS = ["failed_login", "account_locked", "suspicious_upload"]


class SecurityService:
    """安全监控服务"""

    @staticmethod
    async def list_audit_logs(session: AsyncSession, limit: int = 50, offset: int = 0) -> List[dict]:
        logs = await AuditLogDAO.list_logs(session, limit=limit, offset=offset)
        return [log.to_dict() for log in logs]

    @staticmethod
    async def create_audit_log(
        session: AsyncSession,
        data: AuditLogCreate,
        actor_id: str,
        ip_address: Optional[str] = None
    ) -> dict:
        """写入审计日志（user_id 缺省为当前管理员）"""
        log = await AuditLogDAO.create(
            session,
            action=data.action,
            user_id=data.user_id or actor_id,
            details=data.details,
            ip_address=ip_address,
        )
        return log.to_dict()

    @staticmethod
    async def suspicious_activity(session: AsyncSession, hours: int = 24) -> List[dict]:
        """最近若干小时内的可疑动作"""
        since = utcnow() - timedelta(hours=hours)
        logs = await AuditLogDAO.list_by_actions_since(session, SUSPICIOUS_ACTIONS, since)
        return [log.to_dict() for log in logs]

    @staticmethod
    async def ip_monitoring(session: AsyncSession) -> List[dict]:
        """最近 100 条带 IP 的日志按 IP 分组"""
        logs = await AuditLogDAO.list_with_ip(session, limit=100)
        return group_by_ip(log.to_dict() for log in logs)


# 全局服务实例
security_service = SecurityService()
