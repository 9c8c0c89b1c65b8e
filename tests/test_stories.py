from sqlalchemy.ext.asyncio import AsyncSession

from tests.support import auth, seed_story, seed_chapter, fetch_story


def test_create_story_stamps_owner_and_defaults(client, users):
    response = client.post(
        "/stories",
        json={"title": "The Lantern", "description": "A tale", "author_id": users.bob},
        headers=auth(users.alice),
    )

    assert response.status_code == 200
    story = response.json()
    assert story["title"] == "The Lantern"
    assert story["author_id"] == users.alice
    assert story["is_published"] is False
    assert story["created_at"] and story["updated_at"]

    assert fetch_story(story["id"]).author_id == users.alice


def test_create_story_accepts_camel_case(client, users):
    response = client.post(
        "/stories",
        json={"title": "Camel", "coverImage": "https://img.example.com/c.png", "isPremium": True},
        headers=auth(users.alice),
    )

    assert response.status_code == 200
    assert response.json()["cover_url"] == "https://img.example.com/c.png"
    assert response.json()["is_premium"] is True


def test_create_story_requires_title(client, users):
    response = client.post("/stories", json={"description": "no title"}, headers=auth(users.alice))

    assert response.status_code == 400
    assert response.json() == {"error": "title is required"}


def test_create_story_requires_auth(client, users):
    response = client.post("/stories", json={"title": "Anonymous"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_create_story_with_pdf_upload(client, users, fakes):
    response = client.post(
        "/stories",
        data={"title": "Scroll", "genre": "fantasy"},
        files={"pdfFile": ("scroll.pdf", b"%PDF-1.4 body", "application/pdf")},
        headers=auth(users.alice),
    )

    assert response.status_code == 200
    story = response.json()
    assert story["pdf_url"] == "https://res.cloudinary.com/demo/documents/stories/scroll.pdf"
    assert story["content"] == f"[PDF_CHAPTER:{story['pdf_url']}]"
    assert fakes.media.uploads[0]["folder"] == "documents/stories"


def test_public_listing_only_shows_published(client, users):
    published = seed_story(users.alice, title="Out", is_published=True)
    draft = seed_story(users.alice, title="Draft")

    ids = [story["id"] for story in client.get("/stories").json()]
    assert published in ids
    assert draft not in ids

    assert client.get("/stories", params={"is_published": "false"}).json() == []

    # 其他人查看 alice 的故事同样看不到草稿
    response = client.get("/stories", params={"author_id": users.alice}, headers=auth(users.bob))
    assert [story["id"] for story in response.json()] == [published]


def test_author_can_list_own_drafts(client, users):
    seed_story(users.alice, title="Out", is_published=True)
    draft = seed_story(users.alice, title="Draft")

    response = client.get(
        "/stories",
        params={"author_id": users.alice, "is_published": "false"},
        headers=auth(users.alice),
    )

    assert [story["id"] for story in response.json()] == [draft]


def test_listing_filters(client, users):
    short = seed_story(users.alice, title="Short", is_published=True, is_short_story=True, genre="horror")
    seed_story(users.alice, title="Long", is_published=True, genre="romance")

    response = client.get("/stories", params={"shortStory": "true"})
    assert [story["id"] for story in response.json()] == [short]

    response = client.get("/stories", params={"genre": "romance"})
    assert [story["title"] for story in response.json()] == ["Long"]


def test_special_lists_newest_published(client, users):
    seed_story(users.alice, title="Draft")
    published = seed_story(users.alice, title="Out", is_published=True)

    for path in ("/stories/special", "/stories/gems", "/stories/workshops"):
        assert [story["id"] for story in client.get(path).json()] == [published]


def test_get_missing_story(client, users):
    response = client.get("/stories/missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Story not found"}


def test_non_owner_cannot_update_or_delete(client, users):
    story_id = seed_story(users.alice, title="Mine", is_published=True)

    response = client.put(f"/stories/{story_id}", json={"title": "Stolen"}, headers=auth(users.bob))
    assert response.status_code == 403
    assert response.json() == {"error": "Unauthorized"}

    response = client.delete(f"/stories/{story_id}", headers=auth(users.bob))
    assert response.status_code == 403

    response = client.put(f"/stories/{story_id}/publish", json={}, headers=auth(users.bob))
    assert response.status_code == 403

    assert fetch_story(story_id).title == "Mine"


def test_partial_update_ignores_nulls(client, users):
    story_id = seed_story(users.alice, title="Before", description="kept")

    response = client.put(
        f"/stories/{story_id}",
        json={"title": "After", "description": None},
        headers=auth(users.alice),
    )

    assert response.status_code == 200
    assert response.json()["title"] == "After"
    assert response.json()["description"] == "kept"


def test_delete_story(client, users):
    story_id = seed_story(users.alice)

    response = client.delete(f"/stories/{story_id}", headers=auth(users.alice))

    assert response.json() == {"success": True}
    assert fetch_story(story_id) is None


def test_publish_composes_content_from_chapters(client, users):
    story_id = seed_story(users.alice, title="Saga", content="old")
    seed_chapter(story_id, title="Two", chapter_order=2, file_url="https://cdn/two.txt", file_type="text")
    seed_chapter(story_id, title="One", chapter_order=1, file_url="https://cdn/one.pdf", file_type="pdf")

    response = client.put(
        f"/stories/{story_id}/publish",
        json={"publishAt": "2026-01-01T10:00:00"},
        headers=auth(users.alice),
    )

    assert response.status_code == 200
    story = response.json()
    assert story["is_published"] is True
    assert story["content"] == "[PDF_CHAPTER:https://cdn/one.pdf]\n\n[CHAPTER:https://cdn/two.txt]"
    assert story["publish_at"].startswith("2026-01-01T10:00:00")


def test_publish_without_body(client, users):
    story_id = seed_story(users.alice, content="plain text")

    response = client.put(f"/stories/{story_id}/publish", headers=auth(users.alice))

    assert response.status_code == 200
    assert response.json()["is_published"] is True
    assert response.json()["content"] == "plain text"


def test_create_with_chapters_then_upload(client, users, fakes):
    response = client.post("/stories/create-with-chapters", json={"title": "Serial"}, headers=auth(users.alice))
    story_id = response.json()["storyId"]

    response = client.post(
        f"/stories/{story_id}/chapters",
        files=[
            ("chapters[]", ("first.pdf", b"%PDF-1.4 a", "application/pdf")),
            ("chapters[]", ("second.png", b"png-bytes", "image/png")),
        ],
        data={"chapterNames[]": ["First", "Second"], "chapterOrders[]": ["1", "2"]},
        headers=auth(users.alice),
    )

    assert response.status_code == 200
    chapters = response.json()["chapters"]
    assert [chapter["title"] for chapter in chapters] == ["First", "Second"]
    assert [chapter["file_type"] for chapter in chapters] == ["pdf", "text"]
    assert {upload["folder"] for upload in fakes.media.uploads} == {"documents/chapters", "hekayaty/chapters"}

    listed = client.get(f"/stories/{story_id}/chapters").json()["chapters"]
    assert [chapter["chapter_order"] for chapter in listed] == [1, 2]


def test_chapter_upload_rejected_for_non_owner(client, users, fakes):
    story_id = seed_story(users.alice)

    response = client.post(
        f"/stories/{story_id}/chapters",
        files=[("chapters[]", ("x.pdf", b"%PDF", "application/pdf"))],
        headers=auth(users.bob),
    )

    assert response.status_code == 403
    assert fakes.media.uploads == []


def test_chapter_crud_checks_story_owner(client, users):
    story_id = seed_story(users.alice)

    response = client.post(
        "/chapters",
        json={"story_id": story_id, "title": "Intrusion", "chapter_order": 1},
        headers=auth(users.bob),
    )
    assert response.status_code == 403

    response = client.post(
        "/chapters",
        json={"story_id": story_id, "title": "Opening", "chapter_order": 1, "content": "Once"},
        headers=auth(users.alice),
    )
    chapter_id = response.json()["id"]

    response = client.put(f"/chapters/{chapter_id}", json={"title": "Hijacked"}, headers=auth(users.bob))
    assert response.status_code == 403

    response = client.put(f"/chapters/{chapter_id}", json={"title": "Prologue"}, headers=auth(users.alice))
    assert response.json()["title"] == "Prologue"

    assert [c["title"] for c in client.get("/chapters", params={"story_id": story_id}).json()] == ["Prologue"]

    assert client.delete(f"/chapters/{chapter_id}", headers=auth(users.alice)).json() == {"success": True}
    assert client.get(f"/chapters/{story_id}").json() == []


def test_failed_commit_is_reported_as_server_error(client, users, monkeypatch):
    async def failing_commit(self):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(AsyncSession, "commit", failing_commit)
    response = client.post("/stories", json={"title": "Lost"}, headers=auth(users.alice))
    monkeypatch.undo()

    assert response.status_code == 500
    assert response.json() == {"error": "database unavailable"}
    assert client.get("/stories", params={"author_id": users.alice}, headers=auth(users.alice)).json() == []
