"""
会员订阅服务

VIP 兑换码：unused -> used 单向状态，只能兑换一次
"""

from datetime import timedelta

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import VipCodeDAO, ProfileDAO
from hekayaty.endpoints.resend import ResendClient
from hekayaty.errors import ValidationFailed, NotFound, UpstreamFailure
from hekayaty.services.mail_service import MailService
from hekayaty.utils.id_generator import generate_vip_code
from hekayaty.utils.timeutil import utcnow

INVALID_CODE = "Invalid or expired code"


class SubscriptionService:
    """会员订阅服务"""

    @staticmethod
    async def generate_code(
        session: AsyncSession,
        mail_client: ResendClient,
        admin_id: str,
        email: str,
        duration_days: int = 30
    ) -> dict:
        """
        生成兑换码并发送邮件

        邮件发送失败只记录日志，兑换码照常生成

        Args:
            session: 数据库会话
            mail_client: 邮件客户端
            admin_id: 生成者（管理员）
            email: 发放对象邮箱
            duration_days: 有效天数

        Returns:
            {"code": 兑换码记录, "emailSent": bool}
        """
        code = generate_vip_code()
        while await VipCodeDAO.code_exists(session, code):
            code = generate_vip_code()

        expires_at = utcnow() + timedelta(days=duration_days)
        vip_code = await VipCodeDAO.create(session, code, email, expires_at, created_by=admin_id)
        logger.info(f"🎟️ VIP code generated for {email} (expires {expires_at.isoformat()})")

        email_sent = True
        try:
            await MailService.send_vip_email(mail_client, email, code, expires_at, paid=False)
        except UpstreamFailure as e:
            email_sent = False
            logger.error(f"❌ VIP email to {email} failed: {e.message}")

        return {"code": vip_code.to_dict(), "emailSent": email_sent}

    @staticmethod
    async def redeem(session: AsyncSession, user_id: str, code: str) -> dict:
        """
        兑换 VIP 码

        条件更新占用兑换码（未使用且未过期），与会员升级在同一事务中提交。
        码不存在、已使用、已过期统一返回同一个错误

        Returns:
            {"success": True, "profile": ...}
        """
        code = code.strip().upper()
        now = utcnow()

        if not await VipCodeDAO.mark_used(session, code, user_id, now):
            logger.warning(f"🎟️ Rejected VIP code redemption by {user_id}")
            raise ValidationFailed(INVALID_CODE)

        vip_code = await VipCodeDAO.get_by_code(session, code)
        profile = await ProfileDAO.get_by_id(session, user_id)
        if not profile:
            raise NotFound("Profile not found")

        profile = await ProfileDAO.update(
            session,
            profile,
            role="vip",
            is_premium=True,
            subscription_end_date=vip_code.expires_at,
        )

        logger.success(f"✅ VIP code {code} redeemed by {user_id}")
        return {"success": True, "profile": profile.to_dict()}

    @staticmethod
    async def status(session: AsyncSession, user_id: str) -> dict:
        """会员状态（到期后 isPremium 为 False）"""
        profile = await ProfileDAO.get_by_id(session, user_id)
        if not profile:
            raise NotFound("Profile not found")

        end_date = profile.subscription_end_date
        is_expired = end_date is not None and end_date < utcnow()

        return {
            "role": profile.role,
            "isPremium": bool(profile.is_premium) and not is_expired,
            "expiresAt": end_date,
            "isExpired": is_expired,
        }


# 全局服务实例
subscription_service = SubscriptionService()
