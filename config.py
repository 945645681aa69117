"""Application configuration module."""

import os
from datetime import timedelta


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "y"}


class Config:
    """Base configuration for the Flask application."""

    # Core
    ENVIRONMENT = os.getenv("APP_ENV", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PORT = int(os.getenv("PORT", "5000"))

    # Store
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasktidy.db")
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Auth
    JWT_SECRET_KEY = os.getenv("JWT_SECRET")
    ACCESS_TOKEN_TTL = timedelta(days=int(os.getenv("TOKEN_EXPIRES_DAYS", "7")))
    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")
    TASKS_REQUIRE_AUTH = _env_flag("TASKS_REQUIRE_AUTH")

    # CORS
    _raw_origins = os.getenv(
        "ORIGINS", "http://localhost:5173,http://localhost:3000"
    )
    if _raw_origins.strip() == "*":
        CORS_ORIGINS = "*"
    else:
        CORS_ORIGINS = [o.strip().rstrip("/") for o in _raw_origins.split(",") if o.strip()]
        _frontend_url = os.getenv("FRONTEND_URL", "").strip().rstrip("/")
        if _frontend_url and _frontend_url not in CORS_ORIGINS:
            CORS_ORIGINS.append(_frontend_url)
