"""
安全监控路由（全部需要管理员）
"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import CurrentUser, require_admin, get_db_session, client_ip
from hekayaty.models import AuditLogCreate
from hekayaty.services import security_service

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/audit-logs")
async def list_audit_logs(
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await security_service.list_audit_logs(session, limit=limit, offset=offset)


@router.post("/audit-logs")
async def create_audit_log(
    data: AuditLogCreate,
    request: Request,
    admin: CurrentUser = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await security_service.create_audit_log(
        session, data, admin.id, ip_address=client_ip(request)
    )


@router.get("/suspicious-activity")
async def suspicious_activity(
    hours: int = Query(24, ge=1, le=24 * 90),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    可疑行为

    - 最近若干小时内的 failed_login / account_locked / suspicious_upload
    """
    return await security_service.suspicious_activity(session, hours=hours)


@router.get("/ip-monitoring")
async def ip_monitoring(session: AsyncSession = Depends(get_db_session, scope="function")):
    """最近 100 条带 IP 的日志按 IP 聚合，附可疑分"""
    return await security_service.ip_monitoring(session)
