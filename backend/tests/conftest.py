"""Root conftest — shared test configuration."""

import os

# Settings are cached on first import: configure the environment before that happens
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-do-not-use")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")
