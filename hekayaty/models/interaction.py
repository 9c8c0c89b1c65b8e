"""
评分与收藏相关数据模型
"""

from typing import Optional
from pydantic import BaseModel, Field, AliasChoices


class StoryRate(BaseModel):
    """对故事评分（故事ID在路径中）"""
    rating: int = Field(..., ge=1, le=5, description="评分（1-5）")
    review: Optional[str] = Field(None, description="评论")


class RatingCreate(StoryRate):
    """评分请求"""
    story_id: str = Field(..., validation_alias=AliasChoices("story_id", "storyId"), description="故事ID")


class BookmarkCreate(BaseModel):
    """收藏请求"""
    story_id: str = Field(..., validation_alias=AliasChoices("story_id", "storyId"), description="故事ID")
