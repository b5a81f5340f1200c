import os
import tempfile

# settings are read at import time, so the test database must be chosen first
_tmpdir = tempfile.mkdtemp(prefix="portfolio-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_tmpdir, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("PUBLIC_URL", None)
os.environ.setdefault("LOG_LEVEL", "WARNING")
