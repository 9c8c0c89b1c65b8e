"""
评分模块路由
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import CurrentUser, get_current_user, get_db_session
from hekayaty.errors import ValidationFailed
from hekayaty.models import RatingCreate
from hekayaty.services import rating_service

router = APIRouter()


@router.get("")
async def list_ratings(
    story_id: Optional[str] = Query(None),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    if not story_id:
        raise ValidationFailed("story_id is required")
    return await rating_service.list_ratings(session, story_id)


@router.get("/{story_id}")
async def list_story_ratings(story_id: str, session: AsyncSession = Depends(get_db_session, scope="function")):
    return await rating_service.list_ratings(session, story_id)


@router.post("")
async def create_rating(
    data: RatingCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    提交评分

    - 需要登录
    - 评分范围 1-5，重复提交覆盖旧评分
    - 同一请求内重新计算故事的平均分
    """
    return await rating_service.rate_story(
        session, current_user.id, data.story_id, data.rating, data.review
    )
