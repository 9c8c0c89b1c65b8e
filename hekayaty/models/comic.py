"""
漫画相关数据模型
"""

from typing import Optional
from pydantic import BaseModel, Field, AliasChoices


class ComicCreate(BaseModel):
    """创建漫画请求"""
    title: str = Field(..., min_length=1, max_length=255, description="标题")
    description: Optional[str] = None
    cover_url: Optional[str] = Field(
        None, validation_alias=AliasChoices("cover_url", "coverUrl", "coverImage", "cover_image")
    )
    pdf_url: Optional[str] = Field(None, validation_alias=AliasChoices("pdf_url", "pdfUrl"))
    genre: Optional[str] = None
    is_premium: bool = Field(False, validation_alias=AliasChoices("is_premium", "isPremium"))
    is_published: bool = Field(False, validation_alias=AliasChoices("is_published", "isPublished"))


class ComicUpdate(BaseModel):
    """更新漫画请求"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    cover_url: Optional[str] = Field(
        None, validation_alias=AliasChoices("cover_url", "coverUrl", "coverImage", "cover_image")
    )
    pdf_url: Optional[str] = Field(None, validation_alias=AliasChoices("pdf_url", "pdfUrl"))
    genre: Optional[str] = None
    is_premium: Optional[bool] = Field(None, validation_alias=AliasChoices("is_premium", "isPremium"))
    is_published: Optional[bool] = Field(None, validation_alias=AliasChoices("is_published", "isPublished"))
