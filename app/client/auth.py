import enum
import logging
from pathlib import Path

from app.client.api import ApiError, BoardApiClient

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Неверный логин или пароль"
LOGIN_FAILED = "Ошибка входа. Проверьте, что бэкенд запущен."


class AuthPolicy(str, enum.Enum):
    SERVER_SESSION = "server-session"
    CLIENT_FLAG_ONLY = "client-flag-only"


class MemoryFlagStore:
    """Authenticated flag kept for the lifetime of the process."""

    def __init__(self):
        self._value = False

    def get(self) -> bool:
        return self._value

    def set(self):
        self._value = True

    def clear(self):
        self._value = False


class FileFlagStore:
    """Authenticated flag persisted as a marker file ("1" when set)."""

    def __init__(self, path):
        self.path = Path(path)

    def get(self) -> bool:
        try:
            return self.path.read_text().strip() == "1"
        except FileNotFoundError:
            return False

    def set(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("1")

    def clear(self):
        self.path.unlink(missing_ok=True)


class AuthGate:
    """Client-side login state.

    With ``SERVER_SESSION`` the local flag mirrors a server session and is
    checked against ``/api/auth/me``. With ``CLIENT_FLAG_ONLY`` the flag is
    trusted as is and the server is only asked to verify credentials.
    """

    def __init__(self, api: BoardApiClient, policy=AuthPolicy.SERVER_SESSION, store=None):
        self.api = api
        self.policy = AuthPolicy(policy)
        self.store = store if store is not None else MemoryFlagStore()

    def is_authenticated(self) -> bool:
        return self.store.get()

    async def login(self, login: str, password: str):
        """Raises ``ApiError`` on rejection; the flag is set only on success."""
        await self.api.login(login, password)
        self.store.set()
        logger.info(f"Logged in as '{login}'")

    async def logout(self):
        try:
            if self.policy is AuthPolicy.SERVER_SESSION:
                await self.api.logout()
        finally:
            self.store.clear()

    async def validate_session(self) -> bool:
        if self.policy is AuthPolicy.CLIENT_FLAG_ONLY:
            return self.is_authenticated()

        ok = await self.api.check_session()
        if not ok:
            self.store.clear()
        return ok

    def invalidate(self):
        self.store.clear()


def login_error_message(exc: Exception) -> str:
    """Text shown on the login form for a failed ``AuthGate.login``."""
    if isinstance(exc, ApiError) and exc.unauthorized:
        return INVALID_CREDENTIALS
    return LOGIN_FAILED
