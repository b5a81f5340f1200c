import base64
import unittest

from fastapi.testclient import TestClient
from sqlmodel import SQLModel

from portfolio.core.database import AsyncSessionLocal, engine
from portfolio.main import app
from portfolio.models.user import Role
from portfolio.services.auth_service import create_access_token, create_user

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 24
GIF_BYTES = b"GIF89a" + b"\x00" * 24
WEBP_BYTES = b"RIFF\x24\x00\x00\x00WEBPVP8 " + b"\x00" * 16


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


async def reset_db() -> None:
    import portfolio.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)


async def add_user(username: str, password: str, role: Role = Role.USER) -> None:
    async with AsyncSessionLocal() as session:
        await create_user(session, username, password, role)


def bearer(role: str = Role.ADMIN.value, subject: str = "admin") -> dict:
    return {"Authorization": f"Bearer {create_access_token(subject, role=role)}"}


class ApiTestCase(unittest.TestCase):
    """Fresh database and a running app per test."""

    def setUp(self):
        self.client = TestClient(app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)
        self.client.portal.call(reset_db)
        self.admin = bearer()
        self.visitor = bearer(role=Role.USER.value, subject="visitor")

    def run_async(self, func, *args):
        return self.client.portal.call(func, *args)

    # payload builders

    def project_payload(self, **overrides) -> dict:
        payload = {
            "name": "Wave solver",
            "shortDesc": "A 2D shallow water solver",
            "longDesc": "Finite volume scheme on structured grids.",
            "statusFlag": "COMPLETED",
            "startDate": "2024-01-10T00:00:00Z",
            "endDate": "2024-06-01T00:00:00Z",
            "collabMode": "SOLO",
            "affiliation": "Self",
            "affiliationType": "INDEPENDENT",
            "sourceCodeAvailability": "OPEN_SOURCE",
            "techStacks": "Python, NumPy",
            "projectUrl": "https://github.com/example/wave",
        }
        payload.update(overrides)
        return payload

    def post_payload(self, **overrides) -> dict:
        payload = {
            "title": "Hello world",
            "slug": "hello-world",
            "excerpt": "First post",
            "content": "# Hello\n\nSome markdown.",
            "published": True,
            "tags": "intro, meta",
        }
        payload.update(overrides)
        return payload

    def gallery_payload(self, **overrides) -> dict:
        payload = {
            "title": "Sunset",
            "mediaType": "IMAGE",
            "image": b64(PNG_BYTES),
            "imageType": "image/png",
            "tags": "demo, travel",
        }
        payload.update(overrides)
        return payload

    def create(self, path: str, payload: dict) -> dict:
        response = self.client.post(path, json=payload, headers=self.admin)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

