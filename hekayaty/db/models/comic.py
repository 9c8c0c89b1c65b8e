"""
漫画表 ORM 模型
"""

from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP, ForeignKey, Index

from hekayaty.db.base import Base
from hekayaty.utils.timeutil import utcnow


class Comic(Base):
    """漫画表"""
    __tablename__ = "comics"

    id = Column(String(64), primary_key=True, comment="漫画ID")
    author_id = Column(String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, comment="作者ID")

    title = Column(String(255), nullable=False, comment="标题")
    description = Column(Text, nullable=True, comment="简介")
    cover_url = Column(Text, nullable=True, comment="封面URL")
    pdf_url = Column(Text, nullable=True, comment="PDF 文件URL")
    genre = Column(String(64), nullable=True, comment="类型")

    is_premium = Column(Boolean, nullable=False, default=False, comment="是否会员专享")
    is_published = Column(Boolean, nullable=False, default=False, comment="是否已发布")
    is_featured = Column(Boolean, nullable=False, default=False, comment="是否精选")

    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow, onupdate=utcnow, comment="更新时间")

    __table_args__ = (
        Index('idx_comics_author', 'author_id', 'created_at'),
    )
