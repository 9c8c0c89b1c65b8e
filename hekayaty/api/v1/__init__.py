"""
API 路由汇总

每个资源一个路由，前缀即原来的函数名
"""

from fastapi import APIRouter

from .auth import router as auth_router
from .stories import router as stories_router
from .comics import router as comics_router
from .chapters import router as chapters_router
from .ratings import router as ratings_router
from .bookmarks import router as bookmarks_router
from .profiles import router as profiles_router
from .admin import router as admin_router
from .analytics import router as analytics_router
from .security import router as security_router
from .subscriptions import router as subscriptions_router
from .notifications import router as notifications_router
from .search import router as search_router
from .featured import router as featured_router
from .community import router as community_router
from .characters import router as characters_router
from .projects import router as projects_router
from .creators import router as creators_router
from .hall_of_quills import router as hall_of_quills_router
from .upload import router as upload_router
from .pdf_proxy import router as pdf_proxy_router
from .send_vip_email import router as send_vip_email_router

api_router = APIRouter()

# 账号
api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(profiles_router, prefix="/profiles", tags=["Profile"])

# 内容
api_router.include_router(stories_router, prefix="/stories", tags=["Story"])
api_router.include_router(chapters_router, prefix="/chapters", tags=["Chapter"])
api_router.include_router(comics_router, prefix="/comics", tags=["Comic"])
api_router.include_router(characters_router, prefix="/characters", tags=["Character"])
api_router.include_router(projects_router, prefix="/projects", tags=["Project"])

# 互动
api_router.include_router(ratings_router, prefix="/ratings", tags=["Rating"])
api_router.include_router(bookmarks_router, prefix="/bookmarks", tags=["Bookmark"])
api_router.include_router(notifications_router, prefix="/notifications", tags=["Notification"])
api_router.include_router(community_router, prefix="/community", tags=["Community"])

# 发现
api_router.include_router(search_router, prefix="/search", tags=["Search"])
api_router.include_router(featured_router, prefix="/featured", tags=["Featured"])
api_router.include_router(creators_router, prefix="/creators", tags=["Creator"])
api_router.include_router(hall_of_quills_router, prefix="/hall-of-quills", tags=["Hall of Quills"])

# 会员
api_router.include_router(subscriptions_router, prefix="/subscriptions", tags=["Subscription"])
api_router.include_router(send_vip_email_router, prefix="/send-vip-email", tags=["Subscription"])

# 媒体
api_router.include_router(upload_router, prefix="/upload", tags=["Media"])
api_router.include_router(pdf_proxy_router, prefix="/pdf-proxy", tags=["Media"])

# 管理后台
api_router.include_router(admin_router, prefix="/admin", tags=["Admin"])
api_router.include_router(analytics_router, prefix="/analytics", tags=["Analytics"])
api_router.include_router(security_router, prefix="/security", tags=["Security"])
