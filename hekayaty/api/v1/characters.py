"""
传奇角色路由
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hekayaty.api.deps import get_current_user, require_admin, get_db_session
from hekayaty.models import CharacterCreate, CharacterUpdate
from hekayaty.services import character_service

router = APIRouter()


@router.get("")
async def list_characters(session: AsyncSession = Depends(get_db_session, scope="function")):
    return await character_service.list_characters(session)


@router.get("/{character_id}")
async def get_character(character_id: str, session: AsyncSession = Depends(get_db_session, scope="function")):
    return await character_service.get_character(session, character_id)


@router.post("", dependencies=[Depends(get_current_user)])
async def create_character(data: CharacterCreate, session: AsyncSession = Depends(get_db_session, scope="function")):
    return await character_service.create_character(session, data)


@router.put("/{character_id}", dependencies=[Depends(require_admin)])
async def update_character(
    character_id: str,
    data: CharacterUpdate,
    session: AsyncSession = Depends(get_db_session, scope="function")
):
    """修改角色（仅管理员）"""
    return await character_service.update_character(session, character_id, data)


@router.delete("/{character_id}", dependencies=[Depends(require_admin)])
async def delete_character(character_id: str, session: AsyncSession = Depends(get_db_session, scope="function")):
    return await character_service.delete_character(session, character_id)
