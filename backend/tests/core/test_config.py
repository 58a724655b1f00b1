"""Settings — required signing secret and URL normalization."""

import pytest
from pydantic import ValidationError

from freight.config import Settings


def test_missing_secret_fails(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_secret_fails():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, jwt_secret="   ")


def test_postgres_url_gets_asyncpg_driver():
    settings = Settings(
        _env_file=None, jwt_secret="s", database_url="postgresql://u:p@host/db",
    )
    assert settings.database_url == "postgresql+asyncpg://u:p@host/db"


def test_defaults():
    settings = Settings(_env_file=None, jwt_secret="s", bcrypt_rounds=12)
    assert settings.jwt_algorithm == "HS256"
    assert settings.bcrypt_rounds == 12
    assert settings.log_file is None
