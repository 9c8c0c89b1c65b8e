"""
VIP 兑换码表 ORM 模型
"""

from sqlalchemy import Column, String, Boolean, TIMESTAMP, ForeignKey

from hekayaty.db.base import Base
from hekayaty.utils.timeutil import utcnow


class VipCode(Base):
    """VIP 兑换码表（一次性）"""
    __tablename__ = "vip_codes"

    id = Column(String(64), primary_key=True, comment="记录ID")
    code = Column(String(16), unique=True, nullable=False, comment="兑换码（8位大写字母数字）")
    email = Column(String(128), nullable=True, comment="发放对象邮箱")
    expires_at = Column(TIMESTAMP, nullable=False, comment="过期时间")

    # 使用状态
    is_used = Column(Boolean, nullable=False, default=False, comment="是否已使用")
    used_by = Column(String(64), ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True, comment="兑换用户")
    used_at = Column(TIMESTAMP, nullable=True, comment="兑换时间")

    created_by = Column(String(64), nullable=True, comment="生成者（管理员）")
    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")
