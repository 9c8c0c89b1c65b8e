"""
名人堂比赛表 ORM 模型
"""

from sqlalchemy import Column, String, TIMESTAMP, ForeignKey

from hekayaty.db.base import Base
from hekayaty.utils.timeutil import utcnow


class HallCompetition(Base):
    """名人堂比赛记录表"""
    __tablename__ = "hall_competitions"

    id = Column(String(64), primary_key=True, comment="记录ID")
    name = Column(String(255), nullable=False, comment="比赛名称")
    winner_name = Column(String(128), nullable=True, comment="获胜者")
    story_title = Column(String(255), nullable=True, comment="获奖作品")
    winner_id = Column(String(64), ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True, comment="获胜者ID")

    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")
