"""
会员订阅（VIP 兑换码）相关数据模型
"""

from typing import Optional
from pydantic import BaseModel, Field, AliasChoices


class GenerateCodeRequest(BaseModel):
    """生成兑换码请求"""
    email: str = Field(..., min_length=3, description="发放对象邮箱")
    duration_days: int = Field(
        30, ge=1, le=3650, validation_alias=AliasChoices("duration_days", "durationDays"), description="有效天数"
    )


class RedeemRequest(BaseModel):
    """兑换请求"""
    code: str = Field(..., min_length=1, description="兑换码")


class VipEmailRequest(BaseModel):
    """VIP 邀请邮件请求"""
    to: str = Field(..., min_length=3, description="收件人")
    code: str = Field(..., min_length=1, description="兑换码")
    expires_at: Optional[str] = Field(
        None, validation_alias=AliasChoices("expires_at", "expiresAt"), description="过期时间（ISO）"
    )
    paid: bool = Field(False, description="是否付费购买")
