"""
故事服务

处理故事列表、创建、修改、发布等业务逻辑
"""

from datetime import datetime
from typing import List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.config.settings import settings
from hekayaty.db.dao import StoryDAO, ChapterDAO
from hekayaty.db.models import Story, StoryChapter
from hekayaty.errors import NotFound
from hekayaty.models import StoryCreate, StoryUpdate
from hekayaty.services.helpers import ensure_owner, clamp_limit, compact


def pdf_marker(url: str) -> str:
    return f"[PDF_CHAPTER:{url}]"


def compose_content(chapters: List[StoryChapter]) -> str:
    """
    按章节顺序拼接正文

    PDF 章节写成 [PDF_CHAPTER:url]，其他章节写成 [CHAPTER:url]（无文件时用章节正文），空行分隔
    """
    parts = []
    for chapter in chapters:
        if chapter.file_url:
            is_pdf = (chapter.file_type or "").lower() in ("pdf", "application/pdf")
            parts.append(pdf_marker(chapter.file_url) if is_pdf else f"[CHAPTER:{chapter.file_url}]")
        elif chapter.content:
            parts.append(chapter.content)
    return "\n\n".join(parts)


class StoryService:
    """故事服务"""

    @staticmethod
    async def get_owned_story(session: AsyncSession, story_id: str, user_id: str) -> Story:
        """
        获取当前用户拥有的故事

        Raises:
            NotFound: 故事不存在
            Forbidden: 不是作者
        """
        story = await StoryDAO.get_by_id(session, story_id)
        if not story:
            raise NotFound("Story not found")
        ensure_owner(story.author_id, user_id)
        return story

    @staticmethod
    async def list_stories(
        session: AsyncSession,
        caller_id: Optional[str] = None,
        is_premium: Optional[bool] = None,
        is_short_story: Optional[bool] = None,
        genre: Optional[str] = None,
        author_id: Optional[str] = None,
        is_published: Optional[bool] = None,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[dict]:
        """
        故事列表

        公开列表只返回已发布故事；作者查看自己的故事时可看到草稿，
        此时 is_published 作为可选过滤条件

        Returns:
            故事字典列表（按创建时间倒序）
        """
        own_listing = caller_id is not None and author_id == caller_id
        if not own_listing:
            # 公开列表不允许看到未发布内容
            if is_published is False:
                return []
            is_published = True

        stories = await StoryDAO.list_stories(
            session,
            is_published=is_published,
            is_premium=is_premium,
            is_short_story=is_short_story,
            genre=genre,
            author_id=author_id,
            limit=clamp_limit(limit),
            offset=max(0, offset),
        )
        return [story.to_dict() for story in stories]

    @staticmethod
    async def list_newest(session: AsyncSession, limit: Optional[int] = None) -> List[dict]:
        """首页专题（special / gems / workshops）：最新发布的故事"""
        stories = await StoryDAO.list_stories(
            session,
            is_published=True,
            limit=clamp_limit(limit, settings.SPECIAL_LIST_SIZE),
        )
        return [story.to_dict() for story in stories]

    @staticmethod
    async def get_story(session: AsyncSession, story_id: str) -> dict:
        """获取单个故事"""
        story = await StoryDAO.get_by_id(session, story_id)
        if not story:
            raise NotFound("Story not found")
        return story.to_dict()

    @staticmethod
    async def create_story(
        session: AsyncSession,
        user_id: str,
        data: StoryCreate,
        pdf_url: Optional[str] = None
    ) -> dict:
        """
        创建故事

        Args:
            session: 数据库会话
            user_id: 作者ID
            data: 故事内容
            pdf_url: 已上传的 PDF 地址（有则正文替换为 PDF 标记）

        Returns:
            新故事字典
        """
        fields = data.model_dump()
        if pdf_url:
            fields["pdf_url"] = pdf_url
            fields["content"] = pdf_marker(pdf_url)

        story = await StoryDAO.create(session, user_id, **fields)
        logger.info(f"📝 Story created: {story.id} by {user_id}")
        return story.to_dict()

    @staticmethod
    async def create_with_chapters(session: AsyncSession, user_id: str, data: StoryCreate) -> dict:
        """先创建故事主体，章节随后通过 /stories/{id}/chapters 上传"""
        story = await StoryDAO.create(session, user_id, **data.model_dump())
        logger.info(f"📝 Story shell created: {story.id} by {user_id}")
        return {"storyId": story.id}

    @staticmethod
    async def update_story(
        session: AsyncSession,
        user_id: str,
        story_id: str,
        data: StoryUpdate
    ) -> dict:
        """部分更新故事（仅作者）"""
        story = await StoryService.get_owned_story(session, story_id, user_id)
        changes = compact(data.model_dump(exclude_unset=True))
        story = await StoryDAO.update(session, story, **changes)
        return story.to_dict()

    @staticmethod
    async def delete_story(session: AsyncSession, user_id: str, story_id: str) -> dict:
        """删除故事（仅作者）"""
        await StoryService.get_owned_story(session, story_id, user_id)
        await StoryDAO.delete(session, story_id)
        logger.info(f"🗑️ Story deleted: {story_id}")
        return {"success": True}

    @staticmethod
    async def publish_story(
        session: AsyncSession,
        user_id: str,
        story_id: str,
        publish_at: Optional[datetime] = None
    ) -> dict:
        """
        发布故事（仅作者）

        有章节时用章节重新合成正文
        """
        story = await StoryService.get_owned_story(session, story_id, user_id)

        changes = {"is_published": True}
        if publish_at:
            changes["publish_at"] = publish_at

        chapters = await ChapterDAO.list_by_story(session, story_id)
        if chapters:
            changes["content"] = compose_content(chapters)

        story = await StoryDAO.update(session, story, **changes)
        logger.info(f"📢 Story published: {story_id} ({len(chapters)} chapters)")
        return story.to_dict()


# 全局服务实例
story_service = StoryService()
