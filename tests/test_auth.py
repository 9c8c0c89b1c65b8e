from tests.support import auth, fetch_profile


def test_register_creates_profile(client, fakes):
    response = client.post(
        "/auth/register",
        json={"email": "new@example.com", "password": "secret123", "username": "newbie", "fullName": "New Bie"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["id"] == "user-1"
    assert body["profile"]["username"] == "newbie"
    assert body["profile"]["role"] == "free"
    assert fakes.auth.created[0]["user_metadata"] == {"username": "newbie", "full_name": "New Bie"}
    assert fetch_profile("user-1").email == "new@example.com"


def test_register_rejected_by_identity_provider(client):
    response = client.post("/auth/register", json={"email": "taken@example.com", "password": "secret123"})

    assert response.status_code == 400
    assert response.json() == {"error": "A user with this email address has already been registered"}
    assert fetch_profile("user-1") is None


def test_register_requires_password(client):
    response = client.post("/auth/register", json={"email": "new@example.com"})

    assert response.status_code == 400
    assert response.json() == {"error": "password is required"}


def test_login_returns_session_and_profile(client, users):
    response = client.post("/auth/login", json={"email": "alice@example.com", "password": "secret123"})

    body = response.json()
    assert body["session"] == {
        "access_token": "token-alice",
        "refresh_token": "refresh",
        "expires_in": 3600,
        "token_type": "bearer",
    }
    assert body["profile"]["id"] == users.alice


def test_login_with_wrong_password(client, users):
    response = client.post("/auth/login", json={"email": "alice@example.com", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid login credentials"}


def test_logout(client, fakes, users):
    assert client.post("/auth/logout", headers=auth(users.alice)).json() == {"success": True}
    assert fakes.auth.signed_out == ["token-alice"]

    assert client.post("/auth/logout").json() == {"success": True}
    assert fakes.auth.signed_out == ["token-alice"]


def test_complete_profile(client, users):
    response = client.post(
        "/auth/complete-profile", json={"username": "lantern", "full_name": "Alice Lantern"}, headers=auth(users.alice)
    )

    assert response.json()["profile"]["username"] == "lantern"
    assert fetch_profile(users.alice).full_name == "Alice Lantern"

    assert client.post("/auth/complete-profile", json={"username": "x"}).status_code == 401


def test_google_authorize_url(client):
    body = client.post("/auth/google").json()

    assert body["provider"] == "google"
    assert "provider=google" in body["url"]
    assert body["url"].endswith("/auth/callback")
