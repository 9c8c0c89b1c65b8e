"""
用户资料数据访问对象
"""

from typing import Optional, List, Iterable
from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.profile import Profile
from hekayaty.utils.text import contains_pattern, LIKE_ESCAPE
from hekayaty.utils.timeutil import utcnow


class ProfileDAO:
    """用户资料 DAO"""

    @staticmethod
    async def create(
        session: AsyncSession,
        user_id: str,
        email: Optional[str] = None,
        username: Optional[str] = None,
        full_name: Optional[str] = None,
    ) -> Profile:
        """
        创建用户资料（注册时调用，默认角色 free）

        Args:
            session: 数据库会话
            user_id: 身份服务返回的用户ID
            email: 邮箱
            username: 用户名
            full_name: 全名

        Returns:
            Profile: 新创建的资料
        """
        now = utcnow()
        profile = Profile(
            id=user_id,
            email=email,
            username=username,
            full_name=full_name,
            role="free",
            is_premium=False,
            is_banned=False,
            created_at=now,
            updated_at=now,
        )

        session.add(profile)
        await session.flush()

        return profile

    @staticmethod
    async def get_by_id(session: AsyncSession, user_id: str) -> Optional[Profile]:
        """根据ID获取用户资料"""
        result = await session.execute(
            select(Profile).where(Profile.id == user_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_ids(session: AsyncSession, user_ids: Iterable[str]) -> List[Profile]:
        """批量获取用户资料"""
        user_ids = list(set(user_ids))
        if not user_ids:
            return []
        result = await session.execute(
            select(Profile).where(Profile.id.in_(user_ids))
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_role(session: AsyncSession, user_id: str) -> Optional[str]:
        """只查询角色字段（管理员校验用）"""
        result = await session.execute(
            select(Profile.role).where(Profile.id == user_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def update(session: AsyncSession, profile: Profile, **fields) -> Profile:
        """
        部分更新用户资料

        Args:
            session: 数据库会话
            profile: 资料对象
            **fields: 需要更新的字段

        Returns:
            更新后的资料
        """
        for key, value in fields.items():
            setattr(profile, key, value)
        profile.updated_at = utcnow()

        await session.flush()
        return profile

    @staticmethod
    async def list_profiles(
        session: AsyncSession,
        limit: int = 50,
        offset: int = 0
    ) -> List[Profile]:
        """按注册时间倒序列出用户"""
        result = await session.execute(
            select(Profile)
            .order_by(Profile.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    @staticmethod
    async def count(
        session: AsyncSession,
        role: Optional[str] = None,
        is_premium: Optional[bool] = None,
        created_after=None
    ) -> int:
        """
        统计用户数量

        Args:
            session: 数据库会话
            role: 按角色过滤
            is_premium: 按会员状态过滤
            created_after: 只统计该时间之后注册的用户

        Returns:
            用户数量
        """
        query = select(func.count()).select_from(Profile)
        if role is not None:
            query = query.where(Profile.role == role)
        if is_premium is not None:
            query = query.where(Profile.is_premium == is_premium)
        if created_after is not None:
            query = query.where(Profile.created_at >= created_after)

        result = await session.execute(query)
        return result.scalar() or 0

    @staticmethod
    async def search(session: AsyncSession, keyword: str, limit: int = 20) -> List[Profile]:
        """按用户名或全名模糊搜索（不区分大小写）"""
        pattern = contains_pattern(keyword)
        result = await session.execute(
            select(Profile)
            .where(
                or_(
                    Profile.username.ilike(pattern, escape=LIKE_ESCAPE),
                    Profile.full_name.ilike(pattern, escape=LIKE_ESCAPE)
                )
            )
            .limit(limit)
        )
        return list(result.scalars().all())
