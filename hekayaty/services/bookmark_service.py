"""
收藏服务
"""

from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import BookmarkDAO, StoryDAO
from hekayaty.errors import NotFound, ValidationFailed
from hekayaty.services.helpers import attach_profiles


class BookmarkService:
    """收藏服务"""

    @staticmethod
    async def list_bookmarks(session: AsyncSession, user_id: str) -> List[dict]:
        """
        当前用户的收藏（按收藏时间倒序）

        每项嵌入 stories（故事本身及其作者资料）
        """
        bookmarks = await BookmarkDAO.list_by_user(session, user_id)

        stories = []
        for bookmark in bookmarks:
            story = await StoryDAO.get_by_id(session, bookmark.story_id)
            if story:
                stories.append(story)
        embedded = {item["id"]: item for item in await attach_profiles(session, stories)}

        return [
            {**bookmark.to_dict(), "stories": embedded.get(bookmark.story_id)}
            for bookmark in bookmarks
        ]

    @staticmethod
    async def add_bookmark(session: AsyncSession, user_id: str, story_id: str) -> dict:
        """
        收藏故事

        Raises:
            ValidationFailed: 已收藏过
            NotFound: 故事不存在
        """
        if await BookmarkDAO.get(session, user_id, story_id):
            raise ValidationFailed("Already bookmarked")

        if not await StoryDAO.get_by_id(session, story_id):
            raise NotFound("Story not found")

        try:
            bookmark = await BookmarkDAO.create(session, user_id, story_id)
        except IntegrityError as e:
            # 并发收藏撞上 (user_id, story_id) 唯一约束
            raise ValidationFailed("Already bookmarked") from e
        return bookmark.to_dict()

    @staticmethod
    async def remove_bookmark(session: AsyncSession, user_id: str, story_id: str) -> dict:
        """取消收藏（不存在时同样返回成功）"""
        await BookmarkDAO.delete(session, user_id, story_id)
        return {"success": True}


# 全局服务实例
bookmark_service = BookmarkService()
