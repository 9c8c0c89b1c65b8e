"""
收藏模块路由
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import CurrentUser, get_current_user, get_db_session
from hekayaty.models import BookmarkCreate
from hekayaty.services import bookmark_service

router = APIRouter()


@router.get("")
async def list_bookmarks(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """我的收藏（附故事及其作者）"""
    return await bookmark_service.list_bookmarks(session, current_user.id)


@router.post("")
async def add_bookmark(
    data: BookmarkCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    收藏故事

    - 需要登录
    - 不能重复收藏
    """
    return await bookmark_service.add_bookmark(session, current_user.id, data.story_id)


@router.delete("/{story_id}")
async def remove_bookmark(
    story_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await bookmark_service.remove_bookmark(session, current_user.id, story_id)


@router.delete("")
async def remove_bookmark_by_body(
    data: BookmarkCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await bookmark_service.remove_bookmark(session, current_user.id, data.story_id)
