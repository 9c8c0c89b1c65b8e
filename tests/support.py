"""测试用的外部服务替身与数据准备工具"""

import asyncio

from hekayaty.db.dao import ProfileDAO, StoryDAO, ChapterDAO, ComicDAO, VipCodeDAO, AuditLogDAO
from hekayaty.db.session import get_session
from hekayaty.endpoints import CloudinaryError, ResendError, SupabaseAuthError


class FakeAuthClient:
    """令牌格式为 token-<user_id>"""

    def __init__(self):
        self.created = []
        self.signed_out = []

    async def get_user(self, access_token):
        if not access_token.startswith("token-"):
            return None
        user_id = access_token[len("token-"):]
        return {"id": user_id, "email": f"{user_id}@example.com", "user_metadata": {}}

    async def create_user(self, email, password, user_metadata=None):
        if email == "taken@example.com":
            raise SupabaseAuthError(422, "A user with this email address has already been registered")
        user = {"id": f"user-{len(self.created) + 1}", "email": email, "user_metadata": user_metadata or {}}
        self.created.append(user)
        return user

    async def sign_in_with_password(self, email, password):
        if password != "secret123":
            raise SupabaseAuthError(400, "Invalid login credentials")
        user_id = email.split("@")[0]
        return {
            "access_token": f"token-{user_id}",
            "refresh_token": "refresh",
            "expires_in": 3600,
            "token_type": "bearer",
            "user": {"id": user_id, "email": email},
        }

    async def sign_out(self, access_token):
        self.signed_out.append(access_token)

    def oauth_url(self, provider, redirect_to):
        return f"https://auth.example.com/auth/v1/authorize?provider={provider}&redirect_to={redirect_to}"


class FakeMediaClient:

    def __init__(self):
        self.pdf_configured = True
        self.fail_with = None
        self.uploads = []
        self.fetch_result = (200, b"%PDF-1.4 fake")
        self.fetched = []

    def _record(self, filename, content_type, folder, resource_type):
        if self.fail_with is not None:
            raise CloudinaryError(400, self.fail_with)
        self.uploads.append({"filename": filename, "content_type": content_type, "folder": folder})
        return {
            "secure_url": f"https://res.cloudinary.com/demo/{folder}/{filename}",
            "public_id": f"{folder}/{filename}",
            "resource_type": resource_type,
            "format": filename.rsplit(".", 1)[-1],
        }

    async def upload_unsigned(self, data, filename, content_type, folder):
        return self._record(filename, content_type, folder, "image")

    async def upload_signed_raw(self, data, filename, content_type, folder, timestamp=None):
        return self._record(filename, content_type, folder, "raw")

    async def fetch(self, url):
        self.fetched.append(url)
        return self.fetch_result


class FakeMailClient:

    def __init__(self):
        self.fail = False
        self.sent = []

    async def send_email(self, to, subject, html):
        if self.fail:
            raise ResendError("domain not verified")
        self.sent.append({"to": to, "subject": subject, "html": html})
        return {"id": f"email-{len(self.sent)}"}


def auth(user_id):
    return {"Authorization": f"Bearer token-{user_id}"}


def run_in_session(func):
    """在独立会话中执行 func(session) 并提交"""
    async def _run():
        async with get_session() as session:
            return await func(session)
    return asyncio.run(_run())


def seed_story(author_id, **fields):
    fields.setdefault("title", "Untitled")
    story = run_in_session(lambda session: StoryDAO.create(session, author_id, **fields))
    return story.id


def seed_chapter(story_id, **fields):
    chapter = run_in_session(lambda session: ChapterDAO.create(session, story_id, **fields))
    return chapter.id


def seed_comic(author_id, **fields):
    fields.setdefault("title", "Untitled comic")
    comic = run_in_session(lambda session: ComicDAO.create(session, author_id, **fields))
    return comic.id


def seed_vip_code(code, expires_at, email="reader@example.com"):
    run_in_session(lambda session: VipCodeDAO.create(session, code, email, expires_at))


def seed_audit_log(action, user_id=None, ip_address=None, details=None):
    run_in_session(lambda session: AuditLogDAO.create(
        session, action=action, user_id=user_id, details=details, ip_address=ip_address
    ))


def fetch_story(story_id):
    return run_in_session(lambda session: StoryDAO.get_by_id(session, story_id))


def fetch_profile(user_id):
    return run_in_session(lambda session: ProfileDAO.get_by_id(session, user_id))
