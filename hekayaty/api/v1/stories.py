"""
故事模块路由
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile

from hekayaty.api.deps import (
    CurrentUser, get_current_user, get_current_user_optional,
    get_db_session, get_media_client
)
from hekayaty.endpoints.cloudinary import CloudinaryClient
from hekayaty.errors import ValidationFailed
from hekayaty.models import StoryCreate, StoryUpdate, StoryPublish, StoryRate
from hekayaty.services import (
    story_service, chapter_service, rating_service, bookmark_service, media_service
)

router = APIRouter()


def _is_multipart(request: Request) -> bool:
    return request.headers.get("content-type", "").startswith("multipart/form-data")


async def read_json(request: Request) -> dict:
    """读取 JSON 请求体（空体视为 {}）"""
    if not await request.body():
        return {}
    try:
        body = await request.json()
    except ValueError:
        raise ValidationFailed("Invalid JSON body")
    if not isinstance(body, dict):
        raise ValidationFailed("Invalid JSON body")
    return body


@router.get("")
async def list_stories(
    premium: Optional[bool] = Query(None, description="会员专享"),
    short_story: Optional[bool] = Query(None, alias="shortStory", description="短篇"),
    genre: Optional[str] = Query(None),
    author_id: Optional[str] = Query(None),
    is_published: Optional[bool] = Query(None),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    current_user: Optional[CurrentUser] = Depends(get_current_user_optional),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    故事列表

    - 默认只返回已发布故事
    - 作者查看自己的故事（author_id 为本人）时可通过 is_published 过滤草稿
    """
    return await story_service.list_stories(
        session,
        caller_id=current_user.id if current_user else None,
        is_premium=premium,
        is_short_story=short_story,
        genre=genre,
        author_id=author_id,
        is_published=is_published,
        limit=limit,
        offset=offset,
    )


@router.get("/special")
async def list_special(session: AsyncSession = Depends(get_db_session, scope="function")):
    return await story_service.list_newest(session)


@router.get("/gems")
async def list_gems(session: AsyncSession = Depends(get_db_session, scope="function")):
    return await story_service.list_newest(session)


@router.get("/workshops")
async def list_workshop_stories(session: AsyncSession = Depends(get_db_session, scope="function")):
    return await story_service.list_newest(session)


@router.post("/create-with-chapters")
async def create_with_chapters(
    data: StoryCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    创建故事主体

    - 返回 storyId，章节随后通过 POST /stories/{story_id}/chapters 上传
    """
    return await story_service.create_with_chapters(session, current_user.id, data)


@router.post("")
async def create_story(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function"),
    media_client: CloudinaryClient = Depends(get_media_client)
):
    """
    创建故事

    - 支持 JSON 或 multipart 表单
    - 表单中带 pdfFile 时先上传 PDF，正文替换为 PDF 标记
    """
    pdf_url = None
    if _is_multipart(request):
        form = await request.form()
        fields = {key: value for key, value in form.items() if not isinstance(value, UploadFile)}
        pdf_file = form.get("pdfFile")
        data = StoryCreate.model_validate(fields)
        if isinstance(pdf_file, UploadFile) and pdf_file.filename:
            uploaded = await media_service.upload_file(media_client, pdf_file, folder="stories")
            pdf_url = uploaded["url"]
    else:
        data = StoryCreate.model_validate(await read_json(request))

    return await story_service.create_story(session, current_user.id, data, pdf_url=pdf_url)


@router.get("/{story_id}")
async def get_story(story_id: str, session: AsyncSession = Depends(get_db_session, scope="function")):
    return await story_service.get_story(session, story_id)


@router.put("/{story_id}")
async def update_story(
    story_id: str,
    data: StoryUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """更新故事（仅作者，只写入提供的字段）"""
    return await story_service.update_story(session, current_user.id, story_id, data)


@router.delete("/{story_id}")
async def delete_story(
    story_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await story_service.delete_story(session, current_user.id, story_id)


@router.put("/{story_id}/publish")
async def publish_story(
    story_id: str,
    data: Optional[StoryPublish] = None,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    发布故事

    - 仅作者
    - 有章节时按章节顺序重新合成正文
    """
    publish_at = data.publish_at if data else None
    return await story_service.publish_story(session, current_user.id, story_id, publish_at)


@router.get("/{story_id}/chapters")
async def list_story_chapters(story_id: str, session: AsyncSession = Depends(get_db_session, scope="function")):
    return {"chapters": await chapter_service.list_chapters(session, story_id)}


@router.post("/{story_id}/chapters")
async def upload_story_chapters(
    story_id: str,
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function"),
    media_client: CloudinaryClient = Depends(get_media_client)
):
    """
    批量上传章节

    - multipart 表单：chapters[]、chapterNames[]、chapterOrders[]
    - 每个文件上传到 chapters 目录后写入章节记录
    """
    if not _is_multipart(request):
        raise ValidationFailed("Multipart form data required")

    form = await request.form()
    files = [item for item in form.getlist("chapters[]") if isinstance(item, UploadFile)]
    names = [str(item) for item in form.getlist("chapterNames[]")]
    orders = [str(item) for item in form.getlist("chapterOrders[]")]

    return await chapter_service.upload_chapters(
        session, media_client, current_user.id, story_id, files, names, orders
    )


@router.get("/{story_id}/ratings")
async def list_story_ratings(story_id: str, session: AsyncSession = Depends(get_db_session, scope="function")):
    return await rating_service.list_ratings(session, story_id)


@router.post("/{story_id}/rate")
async def rate_story(
    story_id: str,
    data: StoryRate,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """
    评分

    - 同一用户对同一故事只保留一条评分（重复提交即更新）
    - 评分后重新计算故事的平均分和评分人数
    """
    return await rating_service.rate_story(
        session, current_user.id, story_id, data.rating, data.review
    )


@router.post("/{story_id}/bookmark")
async def bookmark_story(
    story_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await bookmark_service.add_bookmark(session, current_user.id, story_id)


@router.delete("/{story_id}/bookmark")
async def remove_story_bookmark(
    story_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    return await bookmark_service.remove_bookmark(session, current_user.id, story_id)
