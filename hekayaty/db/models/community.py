"""
社区（工作坊与帖子）表 ORM 模型
"""

from sqlalchemy import Column, String, Text, TIMESTAMP, ForeignKey

from hekayaty.db.base import Base
from hekayaty.utils.timeutil import utcnow


class Workshop(Base):
    """写作工作坊表"""
    __tablename__ = "workshops"

    id = Column(String(64), primary_key=True, comment="工作坊ID")
    owner_id = Column(String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, comment="创建者ID")

    title = Column(String(255), nullable=False, comment="标题")
    description = Column(Text, nullable=True, comment="简介")
    category = Column(String(64), nullable=True, comment="分类")

    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")


class Post(Base):
    """社区帖子表"""
    __tablename__ = "posts"

    id = Column(String(64), primary_key=True, comment="帖子ID")
    author_id = Column(String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, comment="作者ID")
    workshop_id = Column(String(64), ForeignKey("workshops.id", ondelete="CASCADE"), nullable=True, comment="所属工作坊")

    title = Column(String(255), nullable=False, comment="标题")
    content = Column(Text, nullable=True, comment="正文")

    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")
