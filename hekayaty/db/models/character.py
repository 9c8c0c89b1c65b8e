"""
传奇角色表 ORM 模型
"""

from sqlalchemy import Column, String, Text, TIMESTAMP

from hekayaty.db.base import Base
from hekayaty.utils.timeutil import utcnow


class LegendaryCharacter(Base):
    """传奇角色表"""
    __tablename__ = "legendary_characters"

    id = Column(String(64), primary_key=True, comment="角色ID")
    name = Column(String(128), nullable=False, comment="名称")
    description = Column(Text, nullable=True, comment="简介")
    image_url = Column(Text, nullable=True, comment="形象图URL")
    role = Column(String(64), nullable=True, comment="身份")
    origin = Column(String(128), nullable=True, comment="出处")

    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow, onupdate=utcnow, comment="更新时间")
