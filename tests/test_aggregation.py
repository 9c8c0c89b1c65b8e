from types import SimpleNamespace

from hekayaty.services.aggregation import average_rating, tally_authors, rank_creators, group_by_ip
from hekayaty.services.story_service import compose_content
from hekayaty.utils.id_generator import generate_vip_code, VIP_CODE_ALPHABET


def test_average_rating():
    assert average_rating([]) == (0.0, 0)
    assert average_rating([4, 5]) == (4.5, 2)
    assert average_rating(iter([1, 2, 3])) == (2.0, 3)


def test_tally_authors_orders_by_count_then_first_seen():
    ids = ["carol", "dave", "erin", "dave", "erin", None, "frank"]

    assert tally_authors(ids) == [("dave", 2), ("erin", 2), ("carol", 1), ("frank", 1)]
    assert tally_authors([]) == []


def test_rank_creators():
    profiles = [{"id": "a", "username": "a"}, {"id": "b", "username": "b"}, {"id": "c", "username": "c"}]

    ranked = rank_creators(profiles, {"a": 1, "b": 3}, {"a": 1, "c": 5}, limit=2)

    assert [(c["id"], c["total_works"]) for c in ranked] == [("c", 5), ("b", 3)]
    assert ranked[1]["story_count"] == 3
    assert ranked[1]["comic_count"] == 0


def test_group_by_ip():
    logs = [
        {"ip_address": "10.0.0.1", "action": "failed_login", "user_id": "u1", "created_at": "t3"},
        {"ip_address": "10.0.0.2", "action": "login", "user_id": "u2", "created_at": "t2"},
        {"ip_address": "10.0.0.1", "action": "suspicious_upload", "user_id": "u3", "created_at": "t1"},
        {"ip_address": "10.0.0.1", "action": "login", "user_id": "u1", "created_at": "t0"},
        {"ip_address": None, "action": "login", "user_id": "u4", "created_at": "t0"},
    ]

    groups = {group["ip"]: group for group in group_by_ip(logs)}

    assert set(groups) == {"10.0.0.1", "10.0.0.2"}
    first = groups["10.0.0.1"]
    assert first["last_seen"] == "t3"
    assert first["action_count"] == 3
    assert first["user_count"] == 2
    assert first["suspicious_score"] == 2
    assert groups["10.0.0.2"]["suspicious_score"] == 0


def test_compose_content():
    chapters = [
        SimpleNamespace(file_url="https://cdn/1.pdf", file_type="pdf", content=None),
        SimpleNamespace(file_url="https://cdn/2.txt", file_type="text", content=None),
        SimpleNamespace(file_url=None, file_type=None, content="Inline words"),
        SimpleNamespace(file_url=None, file_type=None, content=None),
    ]

    assert compose_content(chapters) == (
        "[PDF_CHAPTER:https://cdn/1.pdf]\n\n[CHAPTER:https://cdn/2.txt]\n\nInline words"
    )
    assert compose_content([]) == ""


def test_generate_vip_code():
    codes = {generate_vip_code() for _ in range(50)}

    assert all(len(code) == 8 and set(code) <= set(VIP_CODE_ALPHABET) for code in codes)
    assert len(codes) > 1
