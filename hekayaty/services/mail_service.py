"""
邮件服务

VIP 兑换码邀请邮件
"""

import html
from datetime import datetime
from typing import Optional, Tuple

from loguru import logger

from hekayaty.endpoints.resend import ResendClient, ResendError
from hekayaty.errors import UpstreamFailure
from hekayaty.utils.timeutil import parse_datetime

VIP_EMAIL_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>Hekayaty VIP Invitation</title>
    <style>
      body {{ font-family: 'Segoe UI', Roboto, sans-serif; background:#0f0c29; background:linear-gradient(135deg,#24243e 0%,#302b63 50%,#0f0c29 100%); color:#fff; padding:2rem; }}
      .card {{ max-width:600px; margin:auto; background:rgba(255,255,255,0.05); border-radius:12px; padding:2rem; box-shadow:0 8px 16px rgba(0,0,0,0.4); }}
      h1 {{ text-align:center; font-size:2rem; margin-bottom:0.5rem; }}
      h2 {{ text-align:center; font-weight:400; margin-top:0; color:#facc15; }}
      .code {{ font-size:2.2rem; letter-spacing:0.15em; font-weight:700; background:#1e1b4b; padding:1rem 2rem; border-radius:8px; display:inline-block; margin:1.5rem auto; }}
      p {{ line-height:1.6; }}
      .footer {{ margin-top:2rem; font-size:0.75rem; text-align:center; opacity:0.7; }}
    </style>
  </head>
  <body>
    <div class="card">
      <h1>✨ Welcome to Hekayaty ✨</h1>
      <h2>{subtitle}</h2>
      <p>Greetings, Storyteller!</p>
      <p>
        Unlock countless tales of magic, mystery, and imagination with your exclusive VIP code below.
        Redeem it inside Hekayaty to start exploring premium stories without limits.
      </p>
      <div style="text-align:center;">
        <span class="code">{code}</span>
      </div>
      <p style="text-align:center;">Expires on <strong>{expires}</strong></p>
      <p>May your journeys be legendary,<br/>The Hekayaty Team 📚</p>
      <div class="footer">If you did not request this email, please ignore it.</div>
    </div>
  </body>
</html>"""


def render_vip_email(code: str, expires_at, paid: bool = False) -> Tuple[str, str]:
    """
    渲染 VIP 邀请邮件

    Args:
        code: 兑换码
        expires_at: 过期时间（datetime 或 ISO 字符串）
        paid: 是否付费购买（决定标题和副标题）

    Returns:
        (邮件标题, HTML 正文)
    """
    if isinstance(expires_at, str):
        expires_at = parse_datetime(expires_at)
    expires = expires_at.strftime("%Y-%m-%d") if isinstance(expires_at, datetime) else "-"

    subtitle = "Your VIP journey begins!" if paid else "A complimentary pass to worlds unknown"
    subject = "Your Hekayaty VIP Code" if paid else "Your Free Hekayaty VIP Code"

    body = VIP_EMAIL_TEMPLATE.format(
        subtitle=subtitle,
        code=html.escape(code),
        expires=expires,
    )
    return subject, body


class MailService:
    """邮件服务"""

    @staticmethod
    async def send_vip_email(
        client: ResendClient,
        to: str,
        code: str,
        expires_at: Optional[object] = None,
        paid: bool = False
    ) -> dict:
        """
        发送 VIP 兑换码邮件

        Returns:
            {"success": True, "emailId": "..."}

        Raises:
            UpstreamFailure: 邮件服务返回错误
        """
        subject, body = render_vip_email(code, expires_at, paid)

        try:
            result = await client.send_email(to, subject, body)
        except ResendError as e:
            raise UpstreamFailure(f"Email send failed: {e}") from e

        logger.info(f"📧 VIP email sent to {to}")
        return {"success": True, "emailId": result.get("id")}


# 全局服务实例
mail_service = MailService()
