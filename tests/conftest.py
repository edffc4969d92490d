import os
import tempfile

# Settings are read at import time, so they must be in place before app.* loads
_TEST_DIR = tempfile.mkdtemp(prefix="board-tests-")

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_DIR, 'boards.db')}"
os.environ["SESSION_SECRET"] = "test-secret"
os.environ["LOGIN"] = "admin"
os.environ["PASSWORD"] = "s3cret"
os.environ.pop("AUTH_MODE", None)
