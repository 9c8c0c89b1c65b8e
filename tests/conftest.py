import asyncio
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from hekayaty.api.deps import get_auth_client, get_media_client, get_mail_client
from hekayaty.app import app
from hekayaty.db.base import init_db, close_db
from hekayaty.db.dao import ProfileDAO
from tests.support import FakeAuthClient, FakeMediaClient, FakeMailClient, run_in_session


@pytest.fixture
def fakes():
    return SimpleNamespace(auth=FakeAuthClient(), media=FakeMediaClient(), mail=FakeMailClient())


@pytest.fixture
def client(tmp_path, fakes):
    asyncio.run(init_db(f"sqlite+aiosqlite:///{tmp_path / 'hekayaty.db'}", create_tables=True))
    app.dependency_overrides[get_auth_client] = lambda: fakes.auth
    app.dependency_overrides[get_media_client] = lambda: fakes.media
    app.dependency_overrides[get_mail_client] = lambda: fakes.mail

    yield TestClient(app)

    app.dependency_overrides.clear()
    asyncio.run(close_db())


@pytest.fixture
def users(client):
    """alice、bob 为普通用户，root 为管理员"""
    async def _seed(session):
        for user_id in ("alice", "bob", "root"):
            await ProfileDAO.create(
                session, user_id, email=f"{user_id}@example.com",
                username=user_id, full_name=user_id.title()
            )
        root = await ProfileDAO.get_by_id(session, "root")
        await ProfileDAO.update(session, root, role="admin")

    run_in_session(_seed)
    return SimpleNamespace(alice="alice", bob="bob", admin="root")
