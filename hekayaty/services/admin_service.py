"""
管理后台服务
"""

import asyncio
from typing import List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import ProfileDAO, StoryDAO, AuditLogDAO
from hekayaty.db.session import get_session
from hekayaty.errors import NotFound
from hekayaty.utils.timeutil import utcnow


async def run_counts(*queries):
    """
    并发执行多个计数查询

    每个查询使用独立会话（同一个 AsyncSession 不能并发执行）

    Args:
        *queries: 接收 session 参数的协程函数

    Returns:
        计数结果列表（顺序与参数一致）
    """
    async def run(query):
        async with get_session() as session:
            return await query(session)

    return await asyncio.gather(*(run(query) for query in queries))


class AdminService:
    """管理后台服务"""

    @staticmethod
    async def dashboard() -> dict:
        """用户总数、故事总数、会员数"""
        total_users, total_stories, premium_users = await run_counts(
            lambda s: ProfileDAO.count(s),
            lambda s: StoryDAO.count(s),
            lambda s: ProfileDAO.count(s, is_premium=True),
        )
        return {
            "totalUsers": total_users,
            "totalStories": total_stories,
            "premiumUsers": premium_users,
            "timestamp": utcnow().isoformat() + "Z",
        }

    @staticmethod
    async def list_users(session: AsyncSession, limit: int = 50, offset: int = 0) -> List[dict]:
        profiles = await ProfileDAO.list_profiles(session, limit=limit, offset=offset)
        return [profile.to_dict() for profile in profiles]

    @staticmethod
    async def set_ban(
        session: AsyncSession,
        user_id: str,
        banned: bool,
        reason: Optional[str] = None,
        ip_address: Optional[str] = None
    ) -> dict:
        """
        封禁 / 解封用户，并写入审计日志

        Args:
            session: 数据库会话
            user_id: 目标用户
            banned: 是否封禁
            reason: 原因
            ip_address: 管理员来源IP

        Returns:
            更新后的用户资料
        """
        profile = await ProfileDAO.get_by_id(session, user_id)
        if not profile:
            raise NotFound("User not found")

        profile = await ProfileDAO.update(
            session, profile, is_banned=banned, ban_reason=reason if banned else None
        )
        await AuditLogDAO.create(
            session,
            action="user_banned" if banned else "user_unbanned",
            user_id=user_id,
            details={"reason": reason},
            ip_address=ip_address or "unknown",
        )

        logger.warning(f"🔨 User {user_id} {'banned' if banned else 'unbanned'}: {reason}")
        return profile.to_dict()

    @staticmethod
    async def set_role(session: AsyncSession, user_id: str, role: str) -> dict:
        """修改角色（会员标记随 vip 角色同步）"""
        profile = await ProfileDAO.get_by_id(session, user_id)
        if not profile:
            raise NotFound("User not found")

        profile = await ProfileDAO.update(session, profile, role=role, is_premium=role == "vip")
        logger.info(f"👤 User {user_id} role set to {role}")
        return profile.to_dict()


# 全局服务实例
admin_service = AdminService()
