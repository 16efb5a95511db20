"""Root conftest: shared test configuration."""

import os

# Ensure tests never use a real database or production secret
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_FORMAT", "text")
