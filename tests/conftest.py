"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402


class _BaseTestConfig(Config):
    TESTING = True
    ENVIRONMENT = "test"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    # Fast hashing keeps the suite quick.
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    CORS_ORIGINS = ["https://client.example"]
    TASKS_REQUIRE_AUTH = False


def build_app(**overrides) -> Flask:
    """Create an app from ``_BaseTestConfig`` with per-test attribute overrides."""

    config_class = type("OverrideConfig", (_BaseTestConfig,), dict(overrides))
    return create_app(config_class)


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application instance for tests."""

    application = build_app()

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def app_factory():
    """Return ``build_app`` for tests that need a custom configuration."""

    return build_app
