"""Task model definition."""

from datetime import datetime

from . import db
from .user import _new_id


class Task(db.Model):
    """A single to-do item."""

    __tablename__ = "tasks"

    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    due_date = db.Column(db.DateTime, nullable=True)
    completed = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def to_dict(self) -> dict:
        """Serialize the task using the camelCase keys clients expect."""

        return {
            "id": self.id,
            # Older front ends key tasks by ``_id``.
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "completed": bool(self.completed),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Task {self.id} {self.title!r}>"
