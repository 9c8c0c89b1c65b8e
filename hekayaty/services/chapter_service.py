"""
章节服务
"""

from typing import List, Optional

from fastapi import UploadFile
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import ChapterDAO
from hekayaty.endpoints.cloudinary import CloudinaryClient
from hekayaty.errors import NotFound, ValidationFailed
from hekayaty.models import ChapterCreate, ChapterUpdate
from hekayaty.services.helpers import compact
from hekayaty.services.media_service import MediaService
from hekayaty.services.story_service import StoryService


class ChapterService:
    """章节服务"""

    @staticmethod
    async def list_chapters(session: AsyncSession, story_id: str) -> List[dict]:
        """故事章节（按 chapter_order 升序）"""
        chapters = await ChapterDAO.list_by_story(session, story_id)
        return [chapter.to_dict() for chapter in chapters]

    @staticmethod
    async def create_chapter(session: AsyncSession, user_id: str, data: ChapterCreate) -> dict:
        """新增章节（仅故事作者）"""
        await StoryService.get_owned_story(session, data.story_id, user_id)

        fields = data.model_dump(exclude={"story_id"})
        chapter = await ChapterDAO.create(session, data.story_id, **fields)
        return chapter.to_dict()

    @staticmethod
    async def _get_owned_chapter(session: AsyncSession, chapter_id: str, user_id: str):
        chapter = await ChapterDAO.get_by_id(session, chapter_id)
        if not chapter:
            raise NotFound("Chapter not found")
        await StoryService.get_owned_story(session, chapter.story_id, user_id)
        return chapter

    @staticmethod
    async def update_chapter(
        session: AsyncSession,
        user_id: str,
        chapter_id: str,
        data: ChapterUpdate
    ) -> dict:
        """更新章节（仅故事作者）"""
        chapter = await ChapterService._get_owned_chapter(session, chapter_id, user_id)
        changes = compact(data.model_dump(exclude_unset=True))
        chapter = await ChapterDAO.update(session, chapter, **changes)
        return chapter.to_dict()

    @staticmethod
    async def delete_chapter(session: AsyncSession, user_id: str, chapter_id: str) -> dict:
        """删除章节（仅故事作者）"""
        await ChapterService._get_owned_chapter(session, chapter_id, user_id)
        await ChapterDAO.delete(session, chapter_id)
        return {"success": True}

    @staticmethod
    async def upload_chapters(
        session: AsyncSession,
        media_client: CloudinaryClient,
        user_id: str,
        story_id: str,
        files: List[UploadFile],
        names: List[str],
        orders: List[Optional[str]]
    ) -> dict:
        """
        批量上传章节文件并写入章节记录

        Args:
            session: 数据库会话
            media_client: 媒体托管客户端
            user_id: 当前用户
            story_id: 故事ID
            files: 章节文件（chapters[]）
            names: 章节标题（chapterNames[]，与文件一一对应）
            orders: 章节顺序（chapterOrders[]）

        Returns:
            {"chapters": [...]}
        """
        await StoryService.get_owned_story(session, story_id, user_id)
        if not files:
            raise ValidationFailed("No chapters provided")

        # 先校验全部文件，避免上传到一半才失败
        for file in files:
            if file.size is not None:
                MediaService.validate(file.content_type, file.size)

        uploaded = []
        for index, file in enumerate(files):
            title = names[index] if index < len(names) and names[index] else (file.filename or f"Chapter {index + 1}")
            try:
                order = int(orders[index]) if index < len(orders) and orders[index] else index + 1
            except ValueError:
                raise ValidationFailed(f"Invalid chapter order: {orders[index]}")

            result = await MediaService.upload_file(media_client, file, folder="chapters")
            chapter = await ChapterDAO.create(
                session,
                story_id,
                title=title,
                chapter_order=order,
                file_url=result["url"],
                file_type="pdf" if "pdf" in (file.content_type or "") else "text",
                is_published=True,
            )
            uploaded.append(chapter.to_dict())

        logger.info(f"📚 {len(uploaded)} chapters uploaded for story {story_id}")
        return {"chapters": uploaded}


# 全局服务实例
chapter_service = ChapterService()
