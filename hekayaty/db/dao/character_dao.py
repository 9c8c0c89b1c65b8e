"""
传奇角色数据访问对象
"""

from typing import Optional, List
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.models.character import LegendaryCharacter
from hekayaty.utils.id_generator import generate_ulid
from hekayaty.utils.timeutil import utcnow


class CharacterDAO:
    """传奇角色 DAO"""

    @staticmethod
    async def create(session: AsyncSession, **fields) -> LegendaryCharacter:
        """创建角色"""
        now = utcnow()
        character = LegendaryCharacter(
            id=generate_ulid(),
            **fields,
            created_at=now,
            updated_at=now,
        )

        session.add(character)
        await session.flush()

        return character

    @staticmethod
    async def get_by_id(session: AsyncSession, character_id: str) -> Optional[LegendaryCharacter]:
        """根据ID获取角色"""
        result = await session.execute(
            select(LegendaryCharacter).where(LegendaryCharacter.id == character_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def list_all(session: AsyncSession) -> List[LegendaryCharacter]:
        """获取全部角色（按时间倒序）"""
        result = await session.execute(
            select(LegendaryCharacter).order_by(LegendaryCharacter.created_at.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def update(
        session: AsyncSession,
        character: LegendaryCharacter,
        **fields
    ) -> LegendaryCharacter:
        """部分更新角色"""
        for key, value in fields.items():
            setattr(character, key, value)
        character.updated_at = utcnow()

        await session.flush()
        return character

    @staticmethod
    async def delete(session: AsyncSession, character_id: str) -> bool:
        """删除角色"""
        result = await session.execute(
            delete(LegendaryCharacter).where(LegendaryCharacter.id == character_id)
        )
        return result.rowcount > 0
