"""
文本工具
"""

LIKE_ESCAPE = "\\"


def contains_pattern(keyword: str) -> str:
    """
    生成子串匹配的 LIKE 模式

    转义关键词中的 \\ % _，配合 ilike(..., escape=LIKE_ESCAPE) 使用
    """
    escaped = (
        keyword.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
