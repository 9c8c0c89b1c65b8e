"""
VIP 兑换码数据访问对象
"""

from datetime import datetime
from typing import Optional
from sqlalchemy import select, update, and_
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.vip_code import VipCode
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.timeutil import utcnow


class VipCodeDAO:
    """VIP 兑换码 DAO"""

    @staticmethod
    async def create(
        session: AsyncSession,
        code: str,
        email: str,
        expires_at: datetime,
        created_by: Optional[str] = None
    ) -> VipCode:
        """
        创建兑换码

        Args:
            session: 数据库会话
            code: 兑换码
            email: 发放对象邮箱
            expires_at: 过期时间
            created_by: 生成者ID

        Returns:
            VipCode: 新创建的兑换码
        """
        vip_code = VipCode(
            id=generate_ulid(),
            code=code,
            email=email,
            expires_at=expires_at,
            is_used=False,
            created_by=created_by,
            created_at=utcnow(),
        )

        session.add(vip_code)
        await session.flush()

        return vip_code

    @staticmethod
    async def get_by_code(session: AsyncSession, code: str) -> Optional[VipCode]:
        """根据兑换码查询"""
        result = await session.execute(
            select(VipCode).where(VipCode.code == code)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def code_exists(session: AsyncSession, code: str) -> bool:
        """兑换码是否已存在"""
        result = await session.execute(
            select(VipCode.id).where(VipCode.code == code)
        )
        return result.scalar_one_or_none() is not None

    @staticmethod
    async def mark_used(
        session: AsyncSession,
        code: str,
        user_id: str,
        now: datetime
    ) -> bool:
        """
        条件更新：仅当未使用且未过期时标记为已使用

        Returns:
            是否成功占用该兑换码（并发兑换时只有一个请求返回 True）
        """
        result = await session.execute(
            update(VipCode)
            .where(
                and_(
                    VipCode.code == code,
                    VipCode.is_used == False,  # noqa: E712
                    VipCode.expires_at > now
                )
            )
            .values(is_used=True, used_by=user_id, used_at=now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
