"""
评分与收藏表 ORM 模型
"""

from sqlalchemy import Column, String, Text, Integer, TIMESTAMP, ForeignKey, UniqueConstraint

from hekayaty.db.base import Base
from hekayaty.utils.timeutil import utcnow


class Rating(Base):
    """评分表（每个用户对每个故事仅一条）"""
    __tablename__ = "ratings"

    id = Column(String(64), primary_key=True, comment="评分ID")
    user_id = Column(String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, comment="用户ID")
    story_id = Column(String(64), ForeignKey("stories.id", ondelete="CASCADE"), nullable=False, comment="故事ID")

    rating = Column(Integer, nullable=False, comment="评分（1-5）")
    review = Column(Text, nullable=True, comment="评论")

    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow, onupdate=utcnow, comment="更新时间")

    __table_args__ = (
        UniqueConstraint('user_id', 'story_id', name='uq_ratings_user_story'),
    )


class Bookmark(Base):
    """收藏表"""
    __tablename__ = "bookmarks"

    id = Column(String(64), primary_key=True, comment="收藏ID")
    user_id = Column(String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, comment="用户ID")
    story_id = Column(String(64), ForeignKey("stories.id", ondelete="CASCADE"), nullable=False, comment="故事ID")

    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="收藏时间")

    __table_args__ = (
        UniqueConstraint('user_id', 'story_id', name='uq_bookmarks_user_story'),
    )
