"""
服务层公共工具

所有者校验、分页参数收敛、作者资料嵌入
"""

from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.config.settings import settings
from hekayaty.db.dao import ProfileDAO
from hekayaty.errors import Forbidden

# 列表中嵌入的作者信息字段
AUTHOR_FIELDS = ("username", "full_name", "avatar_url")


def ensure_owner(owner_id: Optional[str], user_id: str) -> None:
    """记录所有者与当前用户不一致时拒绝写操作"""
    if owner_id != user_id:
        raise Forbidden()


def clamp_limit(limit: Optional[int], default: Optional[int] = None) -> int:
    """分页数量收敛到 [1, MAX_PAGE_SIZE]"""
    if limit is None:
        limit = default if default is not None else settings.DEFAULT_PAGE_SIZE
    return max(1, min(int(limit), settings.MAX_PAGE_SIZE))


def compact(changes: dict) -> dict:
    """去掉值为 None 的字段（部分更新时 null 不覆盖已有值）"""
    return {key: value for key, value in changes.items() if value is not None}


async def attach_profiles(
    session: AsyncSession,
    records: Iterable,
    owner_field: str = "author_id",
    key: str = "profiles",
    fields: tuple = AUTHOR_FIELDS
) -> List[dict]:
    """
    给记录附加所有者资料摘要

    Args:
        session: 数据库会话
        records: ORM 对象列表
        owner_field: 所有者ID字段名
        key: 嵌入的键名
        fields: 资料字段

    Returns:
        字典列表，每项多一个 {key: {username, full_name, avatar_url}}（资料缺失时为 None）
    """
    records = list(records)
    profiles = await ProfileDAO.get_by_ids(
        session, [getattr(record, owner_field) for record in records]
    )
    by_id = {profile.id: profile.to_dict(*fields) for profile in profiles}

    return [
        {**record.to_dict(), key: by_id.get(getattr(record, owner_field))}
        for record in records
    ]
