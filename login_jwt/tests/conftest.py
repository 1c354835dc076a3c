from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator

import pytest

_TMP_DIR = tempfile.mkdtemp(prefix="login_jwt_tests_")

os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}")
os.environ.setdefault("PASSWORD_HASH_METHOD", "pbkdf2:sha256:1000")
os.environ.setdefault("LOG_FILE", os.path.join(_TMP_DIR, "app.log"))
os.environ.setdefault("APP_ENV", "test")


@pytest.fixture()
def database() -> Iterator[None]:
    from login_jwt.infrastructure.db import ENGINE, Base
    from login_jwt.infrastructure.db import models  # noqa: F401

    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)
