"""
审计日志表 ORM 模型（只追加）
"""

from sqlalchemy import Column, String, JSON, TIMESTAMP, Index

from hekayaty.db.base import Base
from hekayaty.utils.timeutil import utcnow


class AuditLog(Base):
    """审计日志表"""
    __tablename__ = "audit_logs"

    id = Column(String(64), primary_key=True, comment="日志ID")
    action = Column(String(64), nullable=False, comment="动作标签")
    user_id = Column(String(64), nullable=True, comment="操作者ID")
    details = Column(JSON, nullable=True, comment="详情")
    ip_address = Column(String(64), nullable=True, comment="来源IP")

    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")

    __table_args__ = (
        Index('idx_audit_logs_action', 'action', 'created_at'),
        Index('idx_audit_logs_ip', 'ip_address', 'created_at'),
    )
