"""Shared fixtures: a fresh SQLite schema and an in-process HTTP client per test."""
import unittest

import httpx

from app.db.base import Base
from app.db.session import engine
from app.main import app

LOGIN = "admin"
PASSWORD = "s3cret"


async def reset_schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


class ApiTestCase(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        await reset_schema()
        self.http = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app),
            base_url="http://testserver",
        )

    async def asyncTearDown(self):
        await self.http.aclose()

    async def sign_in(self):
        res = await self.http.post(
            "/api/auth/login", json={"login": LOGIN, "password": PASSWORD}
        )
        self.assertEqual(res.status_code, 200, res.text)
        return res
