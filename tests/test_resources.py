from tests.support import auth, seed_story, seed_comic, seed_audit_log, fetch_profile


def test_comic_lifecycle_and_owner_checks(client, users):
    created = client.post(
        "/comics",
        json={"title": "Ink", "coverUrl": "https://img/ink.png", "isPublished": True},
        headers=auth(users.alice),
    ).json()
    assert created["author_id"] == users.alice

    listed = client.get("/comics").json()
    assert [comic["id"] for comic in listed] == [created["id"]]
    assert listed[0]["profiles"]["username"] == users.alice

    response = client.put(f"/comics/{created['id']}", json={"title": "Mine now"}, headers=auth(users.bob))
    assert response.status_code == 403
    assert client.get(f"/comics/{created['id']}").json()["title"] == "Ink"

    response = client.put(f"/comics/{created['id']}", json={"title": "Ink II"}, headers=auth(users.alice))
    assert response.json()["title"] == "Ink II"

    assert client.delete(f"/comics/{created['id']}", headers=auth(users.bob)).status_code == 403
    assert client.delete(f"/comics/{created['id']}", headers=auth(users.alice)).json() == {"success": True}
    assert client.get(f"/comics/{created['id']}").status_code == 404


def test_draft_comics_are_not_listed(client, users):
    seed_comic(users.alice, title="Sketch")

    assert client.get("/comics").json() == []


def test_profile_page(client, users):
    seed_story(users.alice, title="Tale", is_published=True)
    seed_comic(users.alice, title="Strip")

    profile = client.get(f"/profiles/{users.alice}").json()

    assert profile["username"] == users.alice
    assert [story["title"] for story in profile["stories"]] == ["Tale"]
    assert [comic["title"] for comic in profile["comics"]] == ["Strip"]

    response = client.get("/profiles/ghost")
    assert response.status_code == 404
    assert response.json() == {"error": "Profile not found"}


def test_profile_update_is_self_only(client, users):
    response = client.put(f"/profiles/{users.alice}", json={"bio": "hacked"}, headers=auth(users.bob))
    assert response.status_code == 403

    response = client.put(
        f"/profiles/{users.alice}",
        json={"bio": "Writer of lanterns", "role": "admin", "fullName": "Alice L."},
        headers=auth(users.alice),
    )
    assert response.status_code == 200
    assert response.json()["bio"] == "Writer of lanterns"
    assert response.json()["full_name"] == "Alice L."
    assert response.json()["role"] == "free"


def test_premium_upgrade_is_self_only(client, users):
    assert client.post(f"/profiles/{users.alice}/premium", headers=auth(users.bob)).status_code == 403

    response = client.post(f"/profiles/{users.alice}/premium", headers=auth(users.alice))
    assert response.json()["role"] == "vip"
    assert response.json()["is_premium"] is True


def test_admin_dashboard_and_users(client, users):
    seed_story(users.alice, is_published=True)

    dashboard = client.get("/admin/dashboard", headers=auth(users.admin)).json()
    assert dashboard["totalUsers"] == 3
    assert dashboard["totalStories"] == 1
    assert dashboard["premiumUsers"] == 0
    assert dashboard["timestamp"].endswith("Z")

    assert len(client.get("/admin/users", headers=auth(users.admin)).json()) == 3


def test_admin_ban_writes_audit_log(client, users):
    response = client.put(
        f"/admin/users/{users.bob}/ban",
        json={"banned": True, "reason": "spam"},
        headers={**auth(users.admin), "X-Forwarded-For": "203.0.113.9, 10.0.0.1"},
    )
    assert response.json()["is_banned"] is True

    logs = client.get("/security/audit-logs", headers=auth(users.admin)).json()
    assert logs[0]["action"] == "user_banned"
    assert logs[0]["user_id"] == users.bob
    assert logs[0]["ip_address"] == "203.0.113.9"

    client.put(f"/admin/users/{users.bob}/ban", json={"banned": False}, headers=auth(users.admin))
    assert fetch_profile(users.bob).is_banned is False


def test_admin_role_change(client, users):
    response = client.put(f"/admin/users/{users.bob}/role", json={"role": "vip"}, headers=auth(users.admin))
    assert response.json()["is_premium"] is True

    response = client.put(f"/admin/users/{users.bob}/role", json={"role": "emperor"}, headers=auth(users.admin))
    assert response.status_code == 400


def test_analytics(client, users):
    story_id = seed_story(users.alice, title="Top", genre="fantasy", is_published=True)
    seed_story(users.bob, title="Other", genre="fantasy", is_published=True)
    seed_comic(users.alice)
    client.post(f"/stories/{story_id}/rate", json={"rating": 5}, headers=auth(users.bob))

    dashboard = client.get("/analytics/dashboard", headers=auth(users.admin)).json()
    assert dashboard["totalStories"] == 2
    assert dashboard["publishedStories"] == 2
    assert dashboard["totalComics"] == 1
    assert len(dashboard["recentActivity"]) == 2

    metrics = client.get("/analytics/metrics", params={"period": 7}, headers=auth(users.admin)).json()
    assert metrics["period"] == 7
    assert metrics["newStoriesCount"] == 2
    assert metrics["topGenres"] == [{"genre": "fantasy", "count": 2}]
    assert metrics["topRatedStories"][0]["title"] == "Top"

    assert client.get("/analytics/dashboard", headers=auth(users.alice)).status_code == 403


def test_security_monitoring(client, users):
    seed_audit_log("failed_login", user_id=users.bob, ip_address="198.51.100.7")
    seed_audit_log("failed_login", user_id=users.alice, ip_address="198.51.100.7")
    seed_audit_log("story_created", user_id=users.alice, ip_address="192.0.2.1")

    suspicious = client.get("/security/suspicious-activity", headers=auth(users.admin)).json()
    assert [log["action"] for log in suspicious] == ["failed_login", "failed_login"]

    groups = {group["ip"]: group for group in client.get("/security/ip-monitoring", headers=auth(users.admin)).json()}
    assert groups["198.51.100.7"]["suspicious_score"] == 2
    assert groups["198.51.100.7"]["user_count"] == 2
    assert groups["192.0.2.1"]["suspicious_score"] == 0

    created = client.post(
        "/security/audit-logs", json={"action": "manual_review", "details": {"note": "ok"}}, headers=auth(users.admin)
    ).json()
    assert created["user_id"] == users.admin


def test_search(client, users):
    seed_story(users.alice, title="The Dragon Gate", is_published=True)
    seed_story(users.alice, title="Dragon draft")
    seed_comic(users.bob, title="dragon ink", is_published=True)

    results = client.get("/search", params={"q": "DRAGON"}).json()

    assert [story["title"] for story in results["stories"]] == ["The Dragon Gate"]
    assert results["stories"][0]["profiles"]["username"] == users.alice
    assert [comic["title"] for comic in results["comics"]] == ["dragon ink"]
    assert results["users"] == []

    users_only = client.get("/search", params={"q": "ali", "type": "users"}).json()
    assert list(users_only) == ["users"]
    assert users_only["users"][0]["username"] == users.alice


def test_search_matches_wildcards_literally(client, users):
    seed_story(users.alice, title="Moon", description="night", is_published=True)
    seed_story(users.alice, title="100% true", description="snake_case", is_published=True)

    def titles(q):
        results = client.get("/search", params={"q": q, "type": "stories"}).json()
        return [story["title"] for story in results["stories"]]

    assert titles("%") == ["100% true"]
    assert titles("_") == ["100% true"]
    assert titles("n_g") == []
    assert client.get("/search", params={"q": "_", "type": "users"}).json() == {"users": []}


def test_search_requires_query(client):
    response = client.get("/search")

    assert response.status_code == 400
    assert response.json() == {"error": "Search query required"}


def test_featured(client, users):
    story_id = seed_story(users.alice, title="Shining", is_published=True)

    assert client.post(f"/featured/stories/{story_id}", headers=auth(users.alice)).status_code == 403
    assert client.post(f"/featured/stories/{story_id}", headers=auth(users.admin)).json()["is_featured"] is True

    featured = client.get("/featured").json()
    assert [story["id"] for story in featured["stories"]] == [story_id]
    assert featured["comics"] == []

    logs = client.get("/security/audit-logs", headers=auth(users.admin)).json()
    assert logs[0]["action"] == "content_featured"

    client.delete(f"/featured/stories/{story_id}", headers=auth(users.admin))
    assert client.get("/featured", params={"type": "stories"}).json() == {"stories": []}


def test_community(client, users):
    workshop = client.post(
        "/community/workshops", json={"title": "Night Writers", "category": "horror"}, headers=auth(users.alice)
    ).json()
    client.post(
        "/community/posts",
        json={"title": "Prompt", "content": "Write a ghost", "workshopId": workshop["id"]},
        headers=auth(users.bob),
    )

    workshops = client.get("/community/workshops", params={"userId": users.alice}).json()
    assert workshops[0]["profiles"]["username"] == users.alice

    posts = client.get("/community/posts", params={"workshopId": workshop["id"]}).json()
    assert posts[0]["title"] == "Prompt"
    assert posts[0]["profiles"]["username"] == users.bob

    assert client.post("/community/workshops", json={"title": "Anon"}).status_code == 401


def test_characters(client, users):
    created = client.post("/characters", json={"name": "Scheherazade"}, headers=auth(users.alice)).json()

    assert client.get(f"/characters/{created['id']}").json()["name"] == "Scheherazade"
    assert client.put(f"/characters/{created['id']}", json={"role": "narrator"}, headers=auth(users.alice)) \
        .status_code == 403
    assert client.put(f"/characters/{created['id']}", json={"role": "narrator"}, headers=auth(users.admin)) \
        .json()["role"] == "narrator"

    client.delete(f"/characters/{created['id']}", headers=auth(users.admin))
    response = client.get(f"/characters/{created['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "Character not found"}


def test_projects_owner_checks(client, users):
    project = client.post(
        "/projects", json={"title": "Atlas", "content": {"chapters": 3}}, headers=auth(users.alice)
    ).json()
    assert project["status"] == "draft"

    assert client.get(f"/projects/{project['id']}", headers=auth(users.bob)).status_code == 403
    response = client.put(f"/projects/{project['id']}", json={"title": "Taken"}, headers=auth(users.bob))
    assert response.status_code == 403
    assert client.get(f"/projects/{project['id']}", headers=auth(users.alice)).json()["title"] == "Atlas"

    assert client.get("/projects/missing", headers=auth(users.alice)).status_code == 404
    assert [p["id"] for p in client.get("/projects", headers=auth(users.alice)).json()] == [project["id"]]
    assert client.get("/projects", headers=auth(users.bob)).json() == []


def test_creators(client, users):
    seed_story(users.alice, is_published=True)
    seed_story(users.bob, is_published=True)
    seed_story(users.bob)
    seed_comic(users.bob)

    creators = {creator["id"]: creator for creator in client.get("/creators").json()}
    assert creators[users.bob]["story_count"] == 2
    assert creators[users.bob]["comic_count"] == 1
    assert creators[users.admin]["story_count"] == 0

    top = client.get("/creators/top", params={"limit": 2}).json()
    assert [(creator["id"], creator["total_works"]) for creator in top] == [(users.bob, 3), (users.alice, 1)]


def test_hall_of_quills(client, users):
    seed_story(users.alice, is_published=True)
    seed_story(users.bob, is_published=True)
    seed_story(users.bob, is_published=True)
    seed_story("ghost", is_published=True)

    writers = client.get("/hall-of-quills/active").json()

    assert [writer["stories"] for writer in writers] == [2, 1, 1]
    assert writers[0]["name"] == users.bob
    assert writers[0]["title"] == "Bob"
    assert writers[0]["avatar"] == "https://api.dicebear.com/7.x/initials/svg?seed=bob"

    unknown = next(writer for writer in writers if writer["id"] == "ghost")
    assert unknown["name"] == "Unknown"
    assert unknown["title"] == "Writer"
    assert unknown["avatar"].endswith("seed=A")


def test_competitions(client, users):
    payload = {"name": "Winter Quill", "winnerName": "Alice", "storyTitle": "The Lantern"}

    assert client.post("/hall-of-quills/competitions", json=payload, headers=auth(users.bob)).status_code == 403
    created = client.post("/hall-of-quills/competitions", json=payload, headers=auth(users.admin)).json()
    assert created["winner_name"] == "Alice"

    assert [c["name"] for c in client.get("/hall-of-quills/competitions").json()] == ["Winter Quill"]
