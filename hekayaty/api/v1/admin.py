"""
管理后台路由（全部需要管理员）
"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import require_admin, get_db_session, client_ip
from hekayaty.models import BanRequest, RoleUpdate
from hekayaty.services import admin_service

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/dashboard")
async def dashboard():
    """
    后台总览

    - 用户总数、故事总数、会员数（并发统计）
    """
    return await admin_service.dashboard()


@router.get("/users")
async def list_users(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await admin_service.list_users(session, limit=limit, offset=offset)


@router.put("/users/{user_id}/ban")
async def ban_user(
    user_id: str,
    data: BanRequest,
    request: Request,
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    封禁 / 解封用户

    - 写入审计日志 user_banned / user_unbanned（记录管理员来源IP）
    """
    return await admin_service.set_ban(
        session, user_id, data.banned, data.reason, ip_address=client_ip(request)
    )


@router.put("/users/{user_id}/role")
async def set_role(
    user_id: str,
    data: RoleUpdate,
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """修改角色（role 为 vip 时同步会员标记）"""
    return await admin_service.set_role(session, user_id, data.role)
