"""
数据库 ORM 模型

导出所有 SQLAlchemy 模型类
"""

from hekayaty.db.base import Base

# 导入所有模型（确保 Base 知道所有表）
from .profile import Profile
from .story import Story, StoryChapter
from .interaction import Rating, Bookmark
from .comic import Comic
from .community import Workshop, Post
from .vip_code import VipCode
from .notification import Notification
from .audit_log import AuditLog
from .project import Project
from .character import LegendaryCharacter
from .competition import HallCompetition

__all__ = [
    # Base
    "Base",

    # Models
    "Profile",
    "Story",
    "StoryChapter",
    "Rating",
    "Bookmark",
    "Comic",
    "Workshop",
    "Post",
    "VipCode",
    "Notification",
    "AuditLog",
    "Project",
    "LegendaryCharacter",
    "HallCompetition",
]
