"""
社区、通知、名人堂相关数据模型
"""

from typing import Optional
from pydantic import BaseModel, Field, AliasChoices


class WorkshopCreate(BaseModel):
    """创建工作坊请求"""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = None


class PostCreate(BaseModel):
    """发布帖子请求"""
    title: str = Field(..., min_length=1, max_length=255)
    content: Optional[str] = None
    workshop_id: Optional[str] = Field(None, validation_alias=AliasChoices("workshop_id", "workshopId"))


class NotificationCreate(BaseModel):
    """创建通知请求（user_id 缺省为当前用户）"""
    user_id: Optional[str] = Field(None, validation_alias=AliasChoices("user_id", "userId"))
    title: Optional[str] = None
    content: str = Field(..., min_length=1, validation_alias=AliasChoices("content", "message"))
    type: Optional[str] = None
    link: Optional[str] = None


class CompetitionCreate(BaseModel):
    """新增比赛记录请求"""
    name: str = Field(..., min_length=1)
    winner_name: Optional[str] = Field(None, validation_alias=AliasChoices("winner_name", "winnerName"))
    story_title: Optional[str] = Field(None, validation_alias=AliasChoices("story_title", "storyTitle"))
    winner_id: Optional[str] = Field(None, validation_alias=AliasChoices("winner_id", "winnerId"))


class AuditLogCreate(BaseModel):
    """写入审计日志请求"""
    action: str = Field(..., min_length=1)
    details: Optional[dict] = None
    user_id: Optional[str] = Field(None, validation_alias=AliasChoices("user_id", "userId"))
