"""
注册登录相关数据模型
"""

from typing import Optional
from pydantic import BaseModel, Field, AliasChoices


class RegisterRequest(BaseModel):
    """注册请求"""
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=6)
    username: Optional[str] = Field(None, max_length=64)
    full_name: Optional[str] = Field(None, validation_alias=AliasChoices("full_name", "fullName"))


class LoginRequest(BaseModel):
    """登录请求"""
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class CompleteProfileRequest(BaseModel):
    """补全资料请求"""
    username: str = Field(..., min_length=1, max_length=64)
    full_name: Optional[str] = Field(None, validation_alias=AliasChoices("full_name", "fullName"))
