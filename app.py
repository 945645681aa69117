"""Application factory."""

import json
import logging
import os
import sys
import uuid

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from config import Config
from errors import TaskTidyError, Unavailable
from models import db
from routes.auth import auth_bp
from routes.meta import meta_bp
from routes.tasks import tasks_bp
from services.auth_service import AuthService
from services.task_service import TaskService

jwt = JWTManager()


# Token failures use the same ``message`` body as every other error.
def _unauthorized(message: str):
    return jsonify({"error": "Unauthenticated", "message": message}), 401


@jwt.unauthorized_loader
def _missing_token(reason: str):
    return _unauthorized("Missing bearer token")


@jwt.invalid_token_loader
def _invalid_token(reason: str):
    return _unauthorized("Invalid token")


@jwt.expired_token_loader
def _expired_token(jwt_header, jwt_payload):
    return _unauthorized("Token has expired")


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    if not app.config.get("JWT_SECRET_KEY"):
        raise RuntimeError("JWT_SECRET is not configured; refusing to start.")

    # Core subsystems
    db.init_app(app)
    jwt.init_app(app)

    # CORS
    CORS(
        app,
        resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
        supports_credentials=True,
    )

    _init_store(app)

    app.extensions["tasktidy"] = {
        "auth": AuthService(
            db,
            token_ttl=app.config["ACCESS_TOKEN_TTL"],
            password_hash_method=app.config.get("PASSWORD_HASH_METHOD", "scrypt"),
        ),
        "tasks": TaskService(db),
    }

    # Blueprints
    app.register_blueprint(meta_bp)
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(tasks_bp, url_prefix="/api/tasks")

    # Errors
    _register_error_handlers(app)

    app.logger.info(
        "TaskTidy API ready (environment=%s, database=%s, cors_origins=%s, tasks_require_auth=%s)",
        app.config.get("ENVIRONMENT"),
        "configured" if app.config.get("SQLALCHEMY_DATABASE_URI") else "missing",
        app.config.get("CORS_ORIGINS"),
        bool(app.config.get("TASKS_REQUIRE_AUTH")),
    )
    return app


def _init_store(app: Flask) -> None:
    """Create tables and ping the store; any failure here is fatal."""
    with app.app_context():
        try:
            db.create_all()
            db.session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            app.logger.critical("Database connection failed: %s", exc.__class__.__name__)
            raise Unavailable("Database connection failed") from exc
        finally:
            db.session.remove()


def _register_error_handlers(app: Flask) -> None:
    """Register JSON error handlers with request IDs."""

    def _error_response(payload: dict, status: int):
        request_id = g.get("request_id") or str(uuid.uuid4())
        payload["request_id"] = request_id
        response = jsonify(payload)
        response.status_code = status
        response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    @app.after_request
    def _add_request_id_header(response):
        request_id = g.get("request_id")
        if request_id:
            response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(TaskTidyError)
    def _handle_app_error(error: TaskTidyError):
        return _error_response(error.to_dict(), int(error.status_code))

    @app.errorhandler(HTTPException)
    def _handle_http_exception(error: HTTPException):
        request_id = g.get("request_id") or str(uuid.uuid4())
        response = error.get_response()
        payload = {
            "error": getattr(error, "name", "Error"),
            "message": error.description,
            "request_id": request_id,
        }
        response.data = json.dumps(payload)
        response.content_type = "application/json"
        response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(SQLAlchemyError)
    def _handle_store_error(error: SQLAlchemyError):
        db.session.rollback()
        app.logger.exception("Database error", exc_info=error)
        return _error_response(Unavailable().to_dict(), 500)

    @app.errorhandler(Exception)
    def _handle_unexpected(error: Exception):
        app.logger.exception("Unhandled application error", exc_info=error)
        payload = {"error": "Internal Server Error", "message": "Server error"}
        return _error_response(payload, 500)


if __name__ == "__main__":
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        application = create_app()
    except (Unavailable, RuntimeError) as exc:
        logging.getLogger(__name__).critical("Startup failed: %s", exc)
        sys.exit(1)
    application.run(host="0.0.0.0", port=int(os.environ.get("PORT", Config.PORT)))
