"""Tests for the client-side AuthGate.

Scenarios:
- Wrong password: ApiError(401), flag stays unset, form shows the credentials message
- Successful login sets the flag
- Logout clears the flag even when the server call fails
- validate_session clears the flag for a dead session
- client-flag-only policy trusts the flag and never asks the server
- FileFlagStore survives a new gate instance
"""
import os
import tempfile
import unittest

from app.client.api import ApiError
from app.client.auth import (
    AuthGate,
    AuthPolicy,
    FileFlagStore,
    MemoryFlagStore,
    login_error_message,
)
from tests.fakes import FakeBoardApi


class TestServerSessionGate(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.api = FakeBoardApi()
        self.gate = AuthGate(self.api)

    async def test_wrong_password_leaves_flag_unset(self):
        with self.assertRaises(ApiError) as ctx:
            await self.gate.login("admin", "wrong")

        self.assertEqual(ctx.exception.status, 401)
        self.assertFalse(self.gate.is_authenticated())
        self.assertEqual(login_error_message(ctx.exception), "Неверный логин или пароль")

    async def test_login_sets_flag(self):
        await self.gate.login("admin", "s3cret")
        self.assertTrue(self.gate.is_authenticated())

    async def test_logout_clears_flag_even_if_server_fails(self):
        await self.gate.login("admin", "s3cret")
        self.api.fail_logout = ApiError("connection refused", None)

        with self.assertRaises(ApiError):
            await self.gate.logout()
        self.assertFalse(self.gate.is_authenticated())

    async def test_validate_session(self):
        await self.gate.login("admin", "s3cret")
        self.assertTrue(await self.gate.validate_session())

        self.api.session = False
        self.assertFalse(await self.gate.validate_session())
        self.assertFalse(self.gate.is_authenticated())

    async def test_invalidate(self):
        await self.gate.login("admin", "s3cret")
        self.gate.invalidate()
        self.assertFalse(self.gate.is_authenticated())


class TestClientFlagOnlyGate(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.api = FakeBoardApi()
        self.gate = AuthGate(self.api, policy="client-flag-only")

    async def test_policy_from_string(self):
        self.assertIs(self.gate.policy, AuthPolicy.CLIENT_FLAG_ONLY)

    async def test_validate_trusts_flag(self):
        self.assertFalse(await self.gate.validate_session())
        await self.gate.login("admin", "s3cret")
        self.api.session = False

        self.assertTrue(await self.gate.validate_session())
        self.assertNotIn(("check_session",), self.api.calls)

    async def test_logout_stays_local(self):
        await self.gate.login("admin", "s3cret")
        await self.gate.logout()

        self.assertFalse(self.gate.is_authenticated())
        self.assertNotIn(("logout",), self.api.calls)


class TestLoginErrorMessage(unittest.TestCase):
    def test_other_failures(self):
        self.assertEqual(
            login_error_message(ApiError("boom", 500)),
            "Ошибка входа. Проверьте, что бэкенд запущен.",
        )
        self.assertEqual(
            login_error_message(ApiError("refused", None)),
            "Ошибка входа. Проверьте, что бэкенд запущен.",
        )


class TestFlagStores(unittest.TestCase):
    def test_memory_store(self):
        store = MemoryFlagStore()
        self.assertFalse(store.get())
        store.set()
        self.assertTrue(store.get())
        store.clear()
        self.assertFalse(store.get())

    def test_file_store_persists(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "state", "auth")
            FileFlagStore(path).set()

            gate = AuthGate(FakeBoardApi(), store=FileFlagStore(path))
            self.assertTrue(gate.is_authenticated())

            gate.invalidate()
            self.assertFalse(os.path.exists(path))
            self.assertFalse(FileFlagStore(path).get())
            FileFlagStore(path).clear()
