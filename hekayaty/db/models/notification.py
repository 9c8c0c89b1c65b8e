"""
通知表 ORM 模型
"""

from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP, ForeignKey, Index

from hekayaty.db.base import Base
from hekayaty.utils.timeutil import utcnow


class Notification(Base):
    """用户通知表"""
    __tablename__ = "notifications"

    id = Column(String(64), primary_key=True, comment="通知ID")
    user_id = Column(String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, comment="接收用户")

    title = Column(String(255), nullable=True, comment="标题")
    content = Column(Text, nullable=False, comment="内容")
    type = Column(String(32), nullable=True, comment="通知类型")
    link = Column(Text, nullable=True, comment="跳转链接")
    is_read = Column(Boolean, nullable=False, default=False, comment="是否已读")

    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")

    __table_args__ = (
        Index('idx_notifications_user', 'user_id', 'is_read', 'created_at'),
    )
