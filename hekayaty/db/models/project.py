"""
创作项目（TaleCraft）表 ORM 模型
"""

from sqlalchemy import Column, String, Text, JSON, TIMESTAMP, ForeignKey

from hekayaty.db.base import Base
from hekayaty.utils.timeutil import utcnow


class Project(Base):
    """创作项目表"""
    __tablename__ = "projects"

    id = Column(String(64), primary_key=True, comment="项目ID")
    author_id = Column(String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, comment="作者ID")

    title = Column(String(255), nullable=False, comment="标题")
    description = Column(Text, nullable=True, comment="简介")
    type = Column(String(32), nullable=True, comment="项目类型（story / comic / photocomic）")
    content = Column(JSON, nullable=True, comment="项目内容")
    status = Column(String(20), nullable=False, default="draft", comment="状态")

    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow, onupdate=utcnow, comment="更新时间")
