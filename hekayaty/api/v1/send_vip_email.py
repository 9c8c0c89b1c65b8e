"""
VIP 邮件路由（仅管理员）
"""

from fastapi import APIRouter, Depends

from hekayaty.api.deps import require_admin, get_mail_client
from hekayaty.endpoints.resend import ResendClient
from hekayaty.models import VipEmailRequest
from hekayaty.services import mail_service

router = APIRouter()


@router.post("", dependencies=[Depends(require_admin)])
async def send_vip_email(
    data: VipEmailRequest,
    mail_client: ResendClient = Depends(get_mail_client)
):
    """
    发送 VIP 兑换码邮件

    - 邮件服务失败返回 500 "Email send failed: ..."
    """
    return await mail_service.send_vip_email(
        mail_client, data.to, data.code, expires_at=data.expires_at, paid=data.paid
    )
