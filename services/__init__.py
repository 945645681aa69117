"""Application services operating on the store."""

from .auth_service import AuthResult, AuthService
from .task_service import TaskService

__all__ = ["AuthResult", "AuthService", "TaskService"]
