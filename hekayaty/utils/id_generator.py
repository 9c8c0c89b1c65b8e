"""
ID 生成器

提供各种实体的唯一 ID 生成功能
"""

import secrets
import string

import ulid

VIP_CODE_ALPHABET = string.ascii_uppercase + string.digits
VIP_CODE_LENGTH = 8


def generate_ulid() -> str:
    """
    生成 ULID（Universally Unique Lexicographically Sortable Identifier）

    特点：
    - 128-bit 兼容性
    - 按时间排序
    - 规范化的字符串表示（26个字符）

    Returns:
        ULID 字符串
    """
    return str(ulid.new())


def generate_vip_code(length: int = VIP_CODE_LENGTH) -> str:
    """
    生成 VIP 兑换码

    格式：8 位大写字母与数字
    示例：K7Q2ZP9D

    Returns:
        兑换码
    """
    return "".join(secrets.choice(VIP_CODE_ALPHABET) for _ in range(length))
