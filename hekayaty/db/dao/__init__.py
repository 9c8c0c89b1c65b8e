"""
数据访问对象（DAO）

封装数据库查询操作
"""

from .profile_dao import ProfileDAO
from .story_dao import StoryDAO
from .chapter_dao import ChapterDAO
from .rating_dao import RatingDAO
from .bookmark_dao import BookmarkDAO
from .comic_dao import ComicDAO
from .community_dao import CommunityDAO
from .vip_code_dao import VipCodeDAO
from .notification_dao import NotificationDAO
from .audit_log_dao import AuditLogDAO
from .project_dao import ProjectDAO
from .character_dao import CharacterDAO
from .competition_dao import CompetitionDAO

__all__ = [
    "ProfileDAO",
    "StoryDAO",
    "ChapterDAO",
    "RatingDAO",
    "BookmarkDAO",
    "ComicDAO",
    "CommunityDAO",
    "VipCodeDAO",
    "NotificationDAO",
    "AuditLogDAO",
    "ProjectDAO",
    "CharacterDAO",
    "CompetitionDAO",
]
