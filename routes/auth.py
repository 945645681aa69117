"""Authentication blueprint providing register and login endpoints."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request

from services.auth_service import AuthService
from utils.request_validation import LoginRequest, RegisterRequest, parse_json_request

auth_bp = Blueprint("auth", __name__)


def _auth_service() -> AuthService:
    return current_app.extensions["tasktidy"]["auth"]


@auth_bp.route("", methods=["GET"])
def index():
    """Describe the available authentication endpoints."""
    return jsonify(
        {
            "message": "TaskTidy Authentication API",
            "endpoints": {
                "POST /api/auth/register": "Register a new user",
                "POST /api/auth/login": "Login with existing credentials",
            },
            "status": "Available",
        }
    )


@auth_bp.route("/register", methods=["GET"])
def register_info():
    return jsonify(
        {
            "message": "User Registration",
            "method": "POST",
            "endpoint": "/api/auth/register",
            "requiredFields": {"name": "string", "email": "string", "password": "string"},
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "password": "securepassword123",
            },
        }
    )


@auth_bp.route("/login", methods=["GET"])
def login_info():
    return jsonify(
        {
            "message": "User Login",
            "method": "POST",
            "endpoint": "/api/auth/login",
            "requiredFields": {"email": "string", "password": "string"},
            "example": {"email": "john@example.com", "password": "securepassword123"},
        }
    )


@auth_bp.route("/register", methods=["POST"])
def register() -> tuple:
    """Register a new user and return it with a bearer token."""
    payload = parse_json_request(request)
    result = _auth_service().register(RegisterRequest.from_payload(payload))
    return jsonify(result.to_dict()), HTTPStatus.CREATED


@auth_bp.route("/login", methods=["POST"])
def login() -> tuple:
    """Authenticate a user and return a bearer token."""
    payload = parse_json_request(request)
    result = _auth_service().login(LoginRequest.from_payload(payload))
    return jsonify(result.to_dict()), HTTPStatus.OK
