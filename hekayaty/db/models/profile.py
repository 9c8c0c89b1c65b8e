"""
用户资料表 ORM 模型

主键即身份服务（Supabase Auth）返回的用户 ID
"""

from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP, Index

from hekayaty.db.base import Base
from hekayaty.utils.timeutil import utcnow


class Profile(Base):
    """用户资料表"""
    __tablename__ = "profiles"

    # 主键（身份服务用户ID）
    id = Column(String(64), primary_key=True, comment="用户ID")

    # 基本信息
    username = Column(String(64), unique=True, nullable=True, comment="用户名")
    full_name = Column(String(128), nullable=True, comment="全名")
    email = Column(String(128), nullable=True, comment="邮箱")
    avatar_url = Column(Text, nullable=True, comment="头像URL")
    bio = Column(Text, nullable=True, comment="简介")

    # 角色：free / vip / admin
    role = Column(String(20), nullable=False, default="free", comment="角色")
    is_premium = Column(Boolean, nullable=False, default=False, comment="是否会员")
    subscription_end_date = Column(TIMESTAMP, nullable=True, comment="会员到期时间")

    # 封禁
    is_banned = Column(Boolean, nullable=False, default=False, comment="是否封禁")
    ban_reason = Column(Text, nullable=True, comment="封禁原因")

    # 时间戳
    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, comment="创建时间")
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow, onupdate=utcnow, comment="更新时间")

    __table_args__ = (
        Index('idx_profiles_role', 'role'),
    )
