"""User model definition."""

import uuid
from datetime import datetime

from werkzeug.security import check_password_hash, generate_password_hash

from . import db


def _new_id() -> str:
    return uuid.uuid4().hex


class User(db.Model):
    """Represents a registered account."""

    __tablename__ = "users"

    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def set_password(self, password: str, method: str = "scrypt") -> None:
        """Hash and store the password."""

        self.password_hash = generate_password_hash(password, method=method)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return check_password_hash(self.password_hash, password)

    def to_dict(self) -> dict:
        """Serialize the public fields of the user."""

        return {"id": self.id, "name": self.name, "email": self.email}

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
