"""
章节模块路由
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import CurrentUser, get_current_user, get_db_session
from hekayaty.errors import ValidationFailed
from hekayaty.models import ChapterCreate, ChapterUpdate
from hekayaty.services import chapter_service

router = APIRouter()


@router.get("")
async def list_chapters(
    story_id: Optional[str] = Query(None),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    if not story_id:
        raise ValidationFailed("story_id is required")
    return await chapter_service.list_chapters(session, story_id)


@router.get("/{story_id}")
async def list_story_chapters(story_id: str, session: AsyncSession = Depends(get_db_session, scope="function")):
    """故事章节（按 chapter_order 升序）"""
    return await chapter_service.list_chapters(session, story_id)


@router.post("")
async def create_chapter(
    data: ChapterCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    新增章节

    - 需要登录
    - 只有故事作者可以添加
    """
    return await chapter_service.create_chapter(session, current_user.id, data)


@router.put("/{chapter_id}")
async def update_chapter(
    chapter_id: str,
    data: ChapterUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await chapter_service.update_chapter(session, current_user.id, chapter_id, data)


@router.delete("/{chapter_id}")
async def delete_chapter(
    chapter_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await chapter_service.delete_chapter(session, current_user.id, chapter_id)
