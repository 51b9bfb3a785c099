import os
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent.parent


def _database_uri(default: str) -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        return default
    # SQLAlchemy only accepts the postgresql:// spelling.
    if url.startswith("postgres://"):
        return "postgresql://" + url.removeprefix("postgres://")
    return url


def _csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    SQLALCHEMY_DATABASE_URI = _database_uri(f"sqlite:///{BASE_DIR / 'keeplater.db'}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWKS_URI = os.environ.get(
        "JWKS_URI", "https://keeplater.kinde.com/.well-known/jwks.json"
    )
    JWKS_FETCH_TIMEOUT = float(os.environ.get("JWKS_FETCH_TIMEOUT", "10"))
    JWKS_CACHE_SECONDS = int(os.environ.get("JWKS_CACHE_SECONDS", "300"))
    JWT_ALGORITHMS = _csv(os.environ.get("JWT_ALGORITHMS", "RS256"))
    JWT_AUDIENCE = os.environ.get("JWT_AUDIENCE") or None
    JWT_ISSUER = os.environ.get("JWT_ISSUER") or None
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWKS_URI = "https://auth.keeplater.test/.well-known/jwks.json"
    JWT_ALGORITHMS = ["RS256"]
    JWT_AUDIENCE = None
    JWT_ISSUER = None
