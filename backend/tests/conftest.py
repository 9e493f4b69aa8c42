"""Root conftest — shared test configuration."""

import os

# Tests never touch the real database or emit JSON logs
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
