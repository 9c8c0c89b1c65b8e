"""
传奇角色与创作项目相关数据模型
"""

from typing import Optional, Any
from pydantic import BaseModel, Field, AliasChoices


class CharacterCreate(BaseModel):
    """创建角色请求"""
    name: str = Field(..., min_length=1, max_length=128)
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, validation_alias=AliasChoices("image_url", "imageUrl", "image"))
    role: Optional[str] = None
    origin: Optional[str] = None


class CharacterUpdate(BaseModel):
    """更新角色请求"""
    name: Optional[str] = Field(None, min_length=1, max_length=128)
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, validation_alias=AliasChoices("image_url", "imageUrl", "image"))
    role: Optional[str] = None
    origin: Optional[str] = None


class ProjectCreate(BaseModel):
    """创建项目请求"""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    type: Optional[str] = None
    content: Optional[Any] = None
    status: str = "draft"


class ProjectUpdate(BaseModel):
    """更新项目请求"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    type: Optional[str] = None
    content: Optional[Any] = None
    status: Optional[str] = None
