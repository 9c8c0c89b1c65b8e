"""
传奇角色服务
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.db.dao import CharacterDAO
from hekayaty.errors import NotFound
from hekayaty.models import CharacterCreate, CharacterUpdate
from hekayaty.services.helpers import compact


class CharacterService:
    """传奇角色服务"""

    @staticmethod
    async def list_characters(session: AsyncSession) -> List[dict]:
        return [character.to_dict() for character in await CharacterDAO.list_all(session)]

    @staticmethod
    async def get_character(session: AsyncSession, character_id: str) -> dict:
        character = await CharacterDAO.get_by_id(session, character_id)
        if not character:
            raise NotFound("Character not found")
        return character.to_dict()

    @staticmethod
    async def create_character(session: AsyncSession, data: CharacterCreate) -> dict:
        character = await CharacterDAO.create(session, **data.model_dump())
        return character.to_dict()

    @staticmethod
    async def update_character(session: AsyncSession, character_id: str, data: CharacterUpdate) -> dict:
        character = await CharacterDAO.get_by_id(session, character_id)
        if not character:
            raise NotFound("Character not found")
        character = await CharacterDAO.update(session, character, **compact(data.model_dump(exclude_unset=True)))
        return character.to_dict()

    @staticmethod
    async def delete_character(session: AsyncSession, character_id: str) -> dict:
        if not await CharacterDAO.delete(session, character_id):
            raise NotFound("Character not found")
        return {"success": True}


# 全局服务实例
character_service = CharacterService()
