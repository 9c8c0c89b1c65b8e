"""
工具模块
"""

from .id_generator import generate_ulid, generate_vip_code
from .timeutil import utcnow, parse_datetime
from .text import contains_pattern, LIKE_ESCAPE

__all__ = [
    # ID 生成器
    "generate_ulid",
    "generate_vip_code",

    # 时间工具
    "utcnow",
    "parse_datetime",

    # 文本工具
    "contains_pattern",
    "LIKE_ESCAPE",
]
