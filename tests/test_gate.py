from fastapi import FastAPI
from fastapi.testclient import TestClient

from hekayaty.api.cors import CorsGateMiddleware, function_name, resolve_origin
from hekayaty.app import first_validation_message
from hekayaty.config.settings import settings
from tests.support import auth


def test_preflight_short_circuits_with_cors_headers(client):
    response = client.options("/stories/anything", headers={"Origin": "https://evil.example.com"})

    assert response.status_code == 200
    assert response.text == "ok"
    assert response.headers["access-control-allow-origin"] == settings.CORS_ORIGINS[0]
    assert response.headers["access-control-allow-credentials"] == "true"
    assert "authorization" in response.headers["access-control-allow-headers"]
    assert "PUT" in response.headers["access-control-allow-methods"]


def test_allowed_origin_is_echoed(client):
    origin = settings.CORS_ORIGINS[0]
    response = client.get("/", headers={"Origin": origin})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == origin


def test_unknown_route_is_json_404_with_cors(client):
    response = client.get("/no-such-function")

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}
    assert "access-control-allow-origin" in response.headers


def test_wrong_method_is_405(client):
    response = client.post("/search", json={})

    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}


def test_analytics_rejects_writes(client, users):
    for method in ("post", "put", "delete"):
        response = getattr(client, method)("/analytics/dashboard", headers=auth(users.admin))
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}


def test_missing_or_invalid_credentials_are_401(client, users):
    assert client.get("/bookmarks").status_code == 401
    response = client.get("/bookmarks", headers={"Authorization": "Bearer forged"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_non_admin_is_forbidden(client, users):
    response = client.get("/admin/dashboard", headers=auth(users.alice))

    assert response.status_code == 403
    assert response.json() == {"error": "Admin access required"}


def test_unhandled_exception_becomes_500_with_cors():
    app = FastAPI()
    app.add_middleware(CorsGateMiddleware)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database exploded")

    response = TestClient(app).get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "database exploded"}
    assert "access-control-allow-origin" in response.headers


def test_resolve_origin():
    allowed = ["https://a.example.com", "https://b.example.com"]

    assert resolve_origin("https://b.example.com", allowed) == "https://b.example.com"
    assert resolve_origin("https://c.example.com", allowed) == "https://a.example.com"
    assert resolve_origin(None, allowed) == "https://a.example.com"
    assert resolve_origin("https://c.example.com", ["*"]) == "https://c.example.com"
    assert resolve_origin(None, []) == "*"


def test_function_name():
    assert function_name("/stories/abc/chapters") == "stories"
    assert function_name("/pdf-proxy") == "pdf-proxy"
    assert function_name("/") == "root"


def test_first_validation_message():
    assert first_validation_message([{"loc": ("body", "title"), "type": "missing", "msg": "Field required"}]) \
        == "title is required"
    assert first_validation_message([
        {"loc": ("body", "rating"), "type": "less_than_equal", "msg": "Input should be less than or equal to 5"}
    ]) == "rating: Input should be less than or equal to 5"
    assert first_validation_message([]) == "Invalid request"
