"""
故事与章节相关数据模型

前端同时使用 snake_case 和 camelCase，两种写法都接受
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, AliasChoices


class StoryCreate(BaseModel):
    """创建故事请求"""
    title: str = Field(..., min_length=1, max_length=255, description="标题")
    description: Optional[str] = Field(None, description="简介")
    content: Optional[str] = Field(None, description="正文")
    cover_url: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("cover_url", "coverUrl", "coverImage", "cover_image"),
        description="封面URL"
    )
    genre: Optional[str] = Field(None, description="类型")
    placement: Optional[str] = Field(None, description="首页展示位置")
    author_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("author_name", "authorName"), description="作者署名"
    )
    is_premium: bool = Field(
        False, validation_alias=AliasChoices("is_premium", "isPremium"), description="是否会员专享"
    )
    is_short_story: bool = Field(
        False, validation_alias=AliasChoices("is_short_story", "isShortStory"), description="是否短篇"
    )
    is_published: bool = Field(
        False, validation_alias=AliasChoices("is_published", "isPublished"), description="是否发布"
    )


class StoryUpdate(BaseModel):
    """更新故事请求（部分更新，只写入显式提供的字段）"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    content: Optional[str] = None
    cover_url: Optional[str] = Field(
        None, validation_alias=AliasChoices("cover_url", "coverUrl", "coverImage", "cover_image")
    )
    genre: Optional[str] = None
    placement: Optional[str] = None
    author_name: Optional[str] = Field(None, validation_alias=AliasChoices("author_name", "authorName"))
    is_premium: Optional[bool] = Field(None, validation_alias=AliasChoices("is_premium", "isPremium"))
    is_short_story: Optional[bool] = Field(
        None, validation_alias=AliasChoices("is_short_story", "isShortStory")
    )
    is_published: Optional[bool] = Field(None, validation_alias=AliasChoices("is_published", "isPublished"))
    pdf_url: Optional[str] = Field(None, validation_alias=AliasChoices("pdf_url", "pdfUrl"))


class StoryPublish(BaseModel):
    """发布故事请求"""
    publish_at: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("publish_at", "publishAt"), description="定时发布时间"
    )


class ChapterCreate(BaseModel):
    """创建章节请求"""
    story_id: str = Field(..., validation_alias=AliasChoices("story_id", "storyId"), description="故事ID")
    title: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("title", "chapter_title", "chapterTitle")
    )
    chapter_order: int = Field(
        1, ge=0, validation_alias=AliasChoices("chapter_order", "chapterOrder", "order")
    )
    content: Optional[str] = None
    file_url: Optional[str] = Field(None, validation_alias=AliasChoices("file_url", "fileUrl", "content_url"))
    file_type: Optional[str] = Field(None, validation_alias=AliasChoices("file_type", "fileType", "content_type"))
    is_published: bool = Field(True, validation_alias=AliasChoices("is_published", "isPublished"))


class ChapterUpdate(BaseModel):
    """更新章节请求"""
    title: Optional[str] = Field(
        None, min_length=1, validation_alias=AliasChoices("title", "chapter_title", "chapterTitle")
    )
    chapter_order: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("chapter_order", "chapterOrder", "order")
    )
    content: Optional[str] = None
    file_url: Optional[str] = Field(None, validation_alias=AliasChoices("file_url", "fileUrl", "content_url"))
    file_type: Optional[str] = Field(None, validation_alias=AliasChoices("file_type", "fileType", "content_type"))
    is_published: Optional[bool] = Field(None, validation_alias=AliasChoices("is_published", "isPublished"))
