"""
用户资料与管理相关数据模型
"""

from typing import Optional, Literal
from pydantic import BaseModel, Field, AliasChoices


class ProfileUpdate(BaseModel):
    """资料更新请求（只有这四个字段可由用户自己修改，其余字段忽略）"""
    username: Optional[str] = Field(None, min_length=1, max_length=64)
    full_name: Optional[str] = Field(None, validation_alias=AliasChoices("full_name", "fullName"))
    avatar_url: Optional[str] = Field(None, validation_alias=AliasChoices("avatar_url", "avatarUrl"))
    bio: Optional[str] = None


class BanRequest(BaseModel):
    """封禁/解封请求"""
    banned: bool = Field(..., description="是否封禁")
    reason: Optional[str] = Field(None, description="原因")


class RoleUpdate(BaseModel):
    """修改角色请求"""
    role: Literal["free", "vip", "admin"]
