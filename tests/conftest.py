import os
import tempfile
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

# Point the app at a throwaway database before quickadd.config is imported
_db_dir = tempfile.mkdtemp(prefix="quickadd-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_db_dir}/test.sqlite")
os.environ.setdefault("USER_TIMEZONE", "UTC")

UTC = ZoneInfo("UTC")


@pytest.fixture()
def now() -> datetime:
    # A Wednesday morning
    return datetime(2025, 6, 11, 9, 0, tzinfo=UTC)
