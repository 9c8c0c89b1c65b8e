"""
数据模型模块

导出所有 Pydantic 数据模型，用于 API 请求验证
"""

# 故事模块
from .story import StoryCreate, StoryUpdate, StoryPublish, ChapterCreate, ChapterUpdate

# 漫画模块
from .comic import ComicCreate, ComicUpdate

# 评分与收藏
from .interaction import StoryRate, RatingCreate, BookmarkCreate

# 用户资料与管理
from .profile import ProfileUpdate, BanRequest, RoleUpdate

# 会员订阅
from .subscription import GenerateCodeRequest, RedeemRequest, VipEmailRequest

# 社区
from .community import (
    WorkshopCreate, PostCreate, NotificationCreate,
    CompetitionCreate, AuditLogCreate
)

# 角色与项目
from .character import CharacterCreate, CharacterUpdate, ProjectCreate, ProjectUpdate

# 注册登录
from .auth import RegisterRequest, LoginRequest, CompleteProfileRequest

__all__ = [
    "StoryCreate", "StoryUpdate", "StoryPublish", "ChapterCreate", "ChapterUpdate",
    "ComicCreate", "ComicUpdate",
    "StoryRate", "RatingCreate", "BookmarkCreate",
    "ProfileUpdate", "BanRequest", "RoleUpdate",
    "GenerateCodeRequest", "RedeemRequest", "VipEmailRequest",
    "WorkshopCreate", "PostCreate", "NotificationCreate", "CompetitionCreate", "AuditLogCreate",
    "CharacterCreate", "CharacterUpdate", "ProjectCreate", "ProjectUpdate",
    "RegisterRequest", "LoginRequest", "CompleteProfileRequest",
]
