"""Registration, login and bearer token issuing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta

from flask_jwt_extended import create_access_token
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from errors import Conflict, Unauthenticated
from models.user import User
from utils.request_validation import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    user: User
    token: str

    def to_dict(self) -> dict:
        return {"user": self.user.to_dict(), "token": self.token}


class AuthService:
    """Validates credentials against the user table and issues tokens.

    Tokens are JWTs signed with the app's ``JWT_SECRET_KEY``; they are not
    persisted, so validity rests on signature and expiry alone.
    """

    def __init__(
        self,
        store: SQLAlchemy,
        token_ttl: timedelta,
        password_hash_method: str = "scrypt",
    ) -> None:
        self._store = store
        self._token_ttl = token_ttl
        self._password_hash_method = password_hash_method

    def _find_by_email(self, email: str) -> User | None:
        # Case-insensitive lookup
        stmt = select(User).where(func.lower(User.email) == email.lower())
        return self._store.session.execute(stmt).scalars().first()

    def issue_token(self, user: User) -> str:
        return create_access_token(identity=user.id, expires_delta=self._token_ttl)

    def register(self, request: RegisterRequest) -> AuthResult:
        """Create a user and return it with a fresh token."""

        if self._find_by_email(request.email) is not None:
            raise Conflict("User already exists")

        user = User(name=request.name, email=request.email)
        user.set_password(request.password, method=self._password_hash_method)

        session = self._store.session
        session.add(user)
        try:
            session.commit()
        except IntegrityError as exc:
            # Lost a race with a concurrent registration for the same email.
            session.rollback()
            raise Conflict("User already exists") from exc

        logger.info("Registered user %s", user.id)
        return AuthResult(user=user, token=self.issue_token(user))

    def login(self, request: LoginRequest) -> AuthResult:
        """Check credentials; unknown email and wrong password fail identically."""

        user = self._find_by_email(request.email)
        if user is None or not user.check_password(request.password):
            logger.info("Rejected login attempt")
            raise Unauthenticated("Invalid email or password")

        return AuthResult(user=user, token=self.issue_token(user))
