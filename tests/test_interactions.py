from hekayaty.db.dao import BookmarkDAO
from tests.support import auth, seed_story, fetch_story


def test_rating_mean_and_upsert(client, users):
    story_id = seed_story(users.alice, is_published=True)

    client.post(f"/stories/{story_id}/rate", json={"rating": 4}, headers=auth(users.bob))
    client.post("/ratings", json={"storyId": story_id, "rating": 5, "review": "Lovely"}, headers=auth(users.admin))

    story = fetch_story(story_id)
    assert story.average_rating == 4.5
    assert story.rating_count == 2

    # 同一用户再次评分覆盖旧值
    response = client.post(f"/stories/{story_id}/rate", json={"rating": 2}, headers=auth(users.bob))
    assert response.status_code == 200
    assert response.json()["rating"] == 2

    story = fetch_story(story_id)
    assert story.average_rating == 3.5
    assert story.rating_count == 2


def test_ratings_list_embeds_reviewer(client, users):
    story_id = seed_story(users.alice, is_published=True)
    client.post(f"/stories/{story_id}/rate", json={"rating": 3, "review": "ok"}, headers=auth(users.bob))

    for path in (f"/stories/{story_id}/ratings", f"/ratings/{story_id}"):
        ratings = client.get(path).json()
        assert len(ratings) == 1
        assert ratings[0]["profiles"]["username"] == users.bob

    assert client.get("/ratings", params={"story_id": story_id}).json()[0]["review"] == "ok"


def test_rating_out_of_range(client, users):
    story_id = seed_story(users.alice, is_published=True)

    response = client.post(f"/stories/{story_id}/rate", json={"rating": 6}, headers=auth(users.bob))

    assert response.status_code == 400
    assert response.json()["error"].startswith("rating:")
    assert fetch_story(story_id).rating_count == 0


def test_rating_unknown_story(client, users):
    response = client.post("/ratings", json={"story_id": "missing", "rating": 3}, headers=auth(users.bob))

    assert response.status_code == 404


def test_duplicate_bookmark(client, users):
    story_id = seed_story(users.alice, title="Keeper", is_published=True)

    first = client.post("/bookmarks", json={"storyId": story_id}, headers=auth(users.bob))
    assert first.status_code == 200

    second = client.post(f"/stories/{story_id}/bookmark", headers=auth(users.bob))
    assert second.status_code == 400
    assert second.json() == {"error": "Already bookmarked"}

    bookmarks = client.get("/bookmarks", headers=auth(users.bob)).json()
    assert len(bookmarks) == 1
    assert bookmarks[0]["stories"]["title"] == "Keeper"
    assert bookmarks[0]["stories"]["profiles"]["username"] == users.alice


def test_concurrent_bookmark_hits_unique_constraint(client, users, monkeypatch):
    story_id = seed_story(users.alice, is_published=True)
    client.post("/bookmarks", json={"storyId": story_id}, headers=auth(users.bob))

    async def not_yet_bookmarked(session, user_id, story_id):
        return None

    monkeypatch.setattr(BookmarkDAO, "get", staticmethod(not_yet_bookmarked))
    response = client.post("/bookmarks", json={"storyId": story_id}, headers=auth(users.bob))

    assert response.status_code == 400
    assert response.json() == {"error": "Already bookmarked"}
    assert len(client.get("/bookmarks", headers=auth(users.bob)).json()) == 1


def test_bookmark_missing_story(client, users):
    response = client.post("/bookmarks", json={"story_id": "missing"}, headers=auth(users.bob))

    assert response.status_code == 404


def test_remove_bookmark(client, users):
    first = seed_story(users.alice, is_published=True)
    second = seed_story(users.alice, is_published=True)
    client.post("/bookmarks", json={"storyId": first}, headers=auth(users.bob))
    client.post("/bookmarks", json={"storyId": second}, headers=auth(users.bob))

    assert client.delete(f"/bookmarks/{first}", headers=auth(users.bob)).json() == {"success": True}
    response = client.request("DELETE", "/bookmarks", json={"story_id": second}, headers=auth(users.bob))
    assert response.json() == {"success": True}

    assert client.get("/bookmarks", headers=auth(users.bob)).json() == []


def test_notifications_are_private(client, users):
    created = client.post(
        "/notifications",
        json={"user_id": users.bob, "title": "Hello", "message": "New chapter"},
        headers=auth(users.alice),
    ).json()
    assert created["is_read"] is False
    assert created["content"] == "New chapter"

    response = client.put(f"/notifications/{created['id']}/read", headers=auth(users.alice))
    assert response.status_code == 404

    response = client.put(f"/notifications/{created['id']}/read", headers=auth(users.bob))
    assert response.json()["is_read"] is True

    assert client.get("/notifications", params={"unread": "true"}, headers=auth(users.bob)).json() == []
    assert len(client.get("/notifications", headers=auth(users.bob)).json()) == 1
