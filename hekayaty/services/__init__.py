"""
业务服务层

封装业务逻辑，调用 DAO 层进行数据操作
"""

from .story_service import story_service, StoryService
from .chapter_service import chapter_service, ChapterService
from .rating_service import rating_service, RatingService
from .bookmark_service import bookmark_service, BookmarkService
from .comic_service import comic_service, ComicService
from .profile_service import profile_service, ProfileService
from .admin_service import admin_service, AdminService
from .analytics_service import analytics_service, AnalyticsService
from .security_service import security_service, SecurityService
from .subscription_service import subscription_service, SubscriptionService
from .notification_service import notification_service, NotificationService
from .search_service import search_service, SearchService
from .featured_service import featured_service, FeaturedService
from .community_service import community_service, CommunityService
from .character_service import character_service, CharacterService
from .project_service import project_service, ProjectService
from .creator_service import creator_service, CreatorService
from .auth_service import auth_service, AuthService
from .media_service import media_service, MediaService
from .mail_service import mail_service, MailService

__all__ = [
    "story_service", "StoryService",
    "chapter_service", "ChapterService",
    "rating_service", "RatingService",
    "bookmark_service", "BookmarkService",
    "comic_service", "ComicService",
    "profile_service", "ProfileService",
    "admin_service", "AdminService",
    "analytics_service", "AnalyticsService",
    "security_service", "SecurityService",
    "subscription_service", "SubscriptionService",
    "notification_service", "NotificationService",
    "search_service", "SearchService",
    "featured_service", "FeaturedService",
    "community_service", "CommunityService",
    "character_service", "CharacterService",
    "project_service", "ProjectService",
    "creator_service", "CreatorService",
    "auth_service", "AuthService",
    "media_service", "MediaService",
    "mail_service", "MailService",
]
