"""
读时聚合

评分均值、作者计数排行、创作者排行、按 IP 分组，都是对已查询结果的折叠计算
"""

from typing import Iterable, List, Tuple, Dict, Optional

SUSPICIOUS_MARKERS = ("failed", "suspicious")


def average_rating(values: Iterable[int]) -> Tuple[float, int]:
    """
    计算评分均值

    Args:
        values: 全部评分值

    Returns:
        (平均分, 评分数)，没有评分时为 (0.0, 0)
    """
    values = list(values)
    if not values:
        return 0.0, 0
    return sum(values) / len(values), len(values)


def tally_authors(author_ids: Iterable[str]) -> List[Tuple[str, int]]:
    """
    统计每位作者出现次数，按次数降序

    次数相同时保持首次出现的先后顺序
    """
    counts: Dict[str, int] = {}
    for author_id in author_ids:
        if author_id is None:
            continue
        counts[author_id] = counts.get(author_id, 0) + 1

    # sorted 是稳定排序，dict 保留插入顺序
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def rank_creators(
    profiles: Iterable[dict],
    story_counts: Dict[str, int],
    comic_counts: Dict[str, int],
    limit: Optional[int] = None
) -> List[dict]:
    """
    给创作者附加作品数并按总数降序排列

    Args:
        profiles: 创作者资料字典（需包含 id）
        story_counts: {author_id: 故事数}
        comic_counts: {author_id: 漫画数}
        limit: 只返回前 N 名，None 表示全部

    Returns:
        附带 story_count / comic_count / total_works 的创作者列表
    """
    ranked = []
    for profile in profiles:
        stories = story_counts.get(profile["id"], 0)
        comics = comic_counts.get(profile["id"], 0)
        ranked.append({
            **profile,
            "story_count": stories,
            "comic_count": comics,
            "total_works": stories + comics,
        })

    ranked.sort(key=lambda creator: creator["total_works"], reverse=True)
    return ranked[:limit] if limit is not None else ranked


def group_by_ip(logs: Iterable[dict]) -> List[dict]:
    """
    审计日志按 IP 分组

    logs 需按时间倒序传入，每组的 last_seen 取第一次遇到的时间

    Returns:
        [{ip, actions, last_seen, user_count, action_count, suspicious_score}]
    """
    groups: Dict[str, dict] = {}
    for log in logs:
        ip_address = log.get("ip_address")
        if not ip_address:
            continue

        group = groups.get(ip_address)
        if group is None:
            group = groups[ip_address] = {
                "ip": ip_address,
                "actions": [],
                "users": set(),
                "last_seen": log.get("created_at"),
            }

        group["actions"].append(log.get("action"))
        if log.get("user_id"):
            group["users"].add(log["user_id"])

    result = []
    for group in groups.values():
        actions = group["actions"]
        result.append({
            "ip": group["ip"],
            "actions": actions,
            "last_seen": group["last_seen"],
            "user_count": len(group["users"]),
            "action_count": len(actions),
            "suspicious_score": sum(
                1 for action in actions
                if action and any(marker in action for marker in SUSPICIOUS_MARKERS)
            ),
        })
    return result
