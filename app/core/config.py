import os

AUTH_MODES = ("server-session", "client-flag-only")

# Detect environment (default to production)
ENV = os.getenv("APP_ENV", "production").lower()
PORT = int(os.getenv("PORT", "3001"))


def _database_url() -> str:
    url = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./kanban.db")
    # Hosted Postgres usually hands out a sync-driver URL
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


DATABASE_URL = _database_url()

FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN", "http://localhost:5173")
ALLOWED_ORIGINS = [FRONTEND_ORIGIN] + [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "").split(",")
    if origin.strip() and origin.strip() != FRONTEND_ORIGIN
]

SESSION_SECRET = os.getenv("SESSION_SECRET", "change-me-in-production")
SESSION_COOKIE = "kanban.sid"
SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", str(7 * 24 * 60 * 60)))  # 7 days
SESSION_HTTPS_ONLY = ENV == "production"

LOGIN = os.getenv("LOGIN", "")
PASSWORD = os.getenv("PASSWORD", "")

AUTH_MODE = os.getenv("AUTH_MODE", "server-session").lower()
if AUTH_MODE not in AUTH_MODES:
    raise ValueError(f"AUTH_MODE must be one of {AUTH_MODES}, got {AUTH_MODE!r}")
