"""
用户资料路由
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import CurrentUser, get_current_user, get_db_session
from hekayaty.models import ProfileUpdate
from hekayaty.services import profile_service

router = APIRouter()


@router.get("/{user_id}")
async def get_profile(user_id: str, session: AsyncSession = Depends(get_db_session, scope="function")):
    """
    用户主页

    - 返回资料以及该用户的故事、漫画摘要
    """
    return await profile_service.get_profile(session, user_id)


@router.put("/{user_id}")
async def update_profile(
    user_id: str,
    data: ProfileUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    更新资料

    - 只能修改自己的资料
    - 可写字段：username、full_name、avatar_url、bio
    """
    return await profile_service.update_profile(session, current_user.id, user_id, data)


@router.post("/{user_id}/premium")
async def upgrade_premium(
    user_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await profile_service.upgrade_premium(session, current_user.id, user_id)
