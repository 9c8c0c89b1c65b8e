"""
会员订阅路由
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import (
    CurrentUser, get_current_user, require_admin, get_db_session, get_mail_client
)
from hekayaty.endpoints.resend import ResendClient
from hekayaty.models import GenerateCodeRequest, RedeemRequest
from hekayaty.services import subscription_service

router = APIRouter()


@router.post("/generate-code")
async def generate_code(
    data: GenerateCodeRequest,
    admin: CurrentUser = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session, scope="function"),
    mail_client: ResendClient = Depends(get_mail_client)
):
    """
    生成 VIP 兑换码

    - 仅管理员
    - 生成 8 位大写字母数字码并发送邮件（邮件失败不影响生成）
    """
    return await subscription_service.generate_code(
        session, mail_client, admin.id, data.email, data.duration_days
    )


@router.post("/redeem")
async def redeem(
    data: RedeemRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    兑换 VIP 码

    - 兑换码只能使用一次，过期不可用
    - 成功后角色变为 vip 并写入会员到期时间
    """
    return await subscription_service.redeem(session, current_user.id, data.code)


@router.get("/status")
async def status(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await subscription_service.status(session, current_user.id)
