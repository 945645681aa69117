"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

from flask import Request

from errors import ValidationError

# Match the column sizes in models/.
NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 255
TITLE_MAX_LENGTH = 255


def parse_json_request(
    req: Request,
    *,
    required_keys: Iterable[str] | None = None,
    allow_empty: bool = False,
) -> dict:
    """Return the parsed JSON body or raise a 400 error."""

    if not req.is_json:
        raise ValidationError("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise ValidationError("Request JSON body is required.")

    if not isinstance(data, dict):
        raise ValidationError("Request JSON payload must be an object.")

    if not data and not allow_empty:
        raise ValidationError("Request JSON body must not be empty.")

    if required_keys:
        missing = [key for key in required_keys if not data.get(key)]
        if missing:
            raise ValidationError(
                "Missing required fields: {}.".format(", ".join(sorted(missing)))
            )

    return data


def parse_bool(value: object) -> bool | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "y"}:
        return True
    if text in {"0", "false", "no", "n"}:
        return False
    return None


def parse_datetime(value: object) -> datetime | None:
    """Parse an ISO 8601 date or datetime; empty values mean no date."""

    if value in (None, ""):
        return None
    if not isinstance(value, str):
        raise ValueError("not a string")
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        # Stored naive, in UTC.
        try:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError as exc:
            raise ValueError("date out of range") from exc
    return parsed


def _optional_string(data: dict, key: str, errors: list[str]) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        errors.append(f"{key} must be a string")
        return None
    return value


def _required_string(
    data: dict, key: str, errors: list[str], max_length: int | None = None
) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        errors.append(f"{key} is required")
        return ""
    if max_length is not None and len(value.strip()) > max_length:
        errors.append(f"{key} must be at most {max_length} characters")
        return ""
    return value


def _raise_if(errors: list[str]) -> None:
    if errors:
        raise ValidationError("; ".join(errors))


@dataclass(frozen=True)
class RegisterRequest:
    name: str
    email: str
    password: str

    @classmethod
    def from_payload(cls, data: dict) -> "RegisterRequest":
        errors: list[str] = []
        name = _required_string(data, "name", errors, NAME_MAX_LENGTH).strip()
        email = _required_string(data, "email", errors, EMAIL_MAX_LENGTH).strip().lower()
        password = _required_string(data, "password", errors)
        if email and "@" not in email:
            errors.append("email must be a valid email address")
        _raise_if(errors)
        return cls(name=name, email=email, password=password)


@dataclass(frozen=True)
class LoginRequest:
    email: str
    password: str

    @classmethod
    def from_payload(cls, data: dict) -> "LoginRequest":
        errors: list[str] = []
        email = _required_string(data, "email", errors).strip().lower()
        password = _required_string(data, "password", errors)
        _raise_if(errors)
        return cls(email=email, password=password)


@dataclass(frozen=True)
class TaskCreate:
    title: str
    description: str | None = None
    due_date: datetime | None = None

    @classmethod
    def from_payload(cls, data: dict) -> "TaskCreate":
        errors: list[str] = []
        title = _required_string(data, "title", errors, TITLE_MAX_LENGTH).strip()
        description = _optional_string(data, "description", errors)
        due_date = None
        try:
            due_date = parse_datetime(data.get("dueDate"))
        except ValueError:
            errors.append("dueDate must be ISO 8601 format")
        _raise_if(errors)
        return cls(title=title, description=description, due_date=due_date)


@dataclass(frozen=True)
class TaskUpdate:
    """Partial task update; ``changes`` only holds the fields the client sent."""

    changes: dict = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: dict) -> "TaskUpdate":
        errors: list[str] = []
        changes: dict = {}

        if "title" in data:
            title = _required_string(data, "title", errors, TITLE_MAX_LENGTH)
            if title:
                changes["title"] = title.strip()

        if "description" in data:
            changes["description"] = _optional_string(data, "description", errors)

        if "dueDate" in data:
            try:
                changes["due_date"] = parse_datetime(data.get("dueDate"))
            except ValueError:
                errors.append("dueDate must be ISO 8601 format")

        if "completed" in data:
            completed = parse_bool(data.get("completed"))
            if completed is None:
                errors.append("completed must be boolean")
            else:
                changes["completed"] = completed

        _raise_if(errors)
        return cls(changes=changes)
