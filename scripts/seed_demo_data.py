"""Seed a demo user and a handful of tasks."""

from datetime import datetime, timedelta

from flask import Flask

from app import create_app
from config import Config
from models import db
from models.task import Task
from models.user import User

DEMO_NAME = "Demo User"
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "DemoPass123"

DEMO_TASKS = [
    {"title": "Plan the week", "description": "Block out focus time.", "days": 1},
    {"title": "Pay rent", "description": None, "days": 3},
    {"title": "Call the dentist", "description": "Reschedule the cleaning.", "days": None},
]


def get_or_create_user(email: str, name: str, password: str, method: str) -> User:
    user = User.query.filter_by(email=email).first()
    if user is None:
        user = User(email=email, name=name)
        db.session.add(user)
    else:
        user.name = name
    user.set_password(password, method=method)
    return user


def seed(app: Flask) -> tuple[User, list[Task]]:
    """Create the demo account and any demo tasks not already present."""
    with app.app_context():
        user = get_or_create_user(
            DEMO_EMAIL, DEMO_NAME, DEMO_PASSWORD, app.config["PASSWORD_HASH_METHOD"]
        )

        existing = {title for (title,) in db.session.query(Task.title).all()}
        created = []
        for data in DEMO_TASKS:
            if data["title"] in existing:
                continue
            due_date = (
                datetime.utcnow() + timedelta(days=data["days"]) if data["days"] else None
            )
            task = Task(title=data["title"], description=data["description"], due_date=due_date)
            db.session.add(task)
            created.append(task)

        db.session.commit()
        return user, created


def main(config_class: type[Config] = Config) -> None:
    app = create_app(config_class)
    user, created = seed(app)
    print(f"Demo user ready: {DEMO_EMAIL} / {DEMO_PASSWORD}")
    print(f"Created {len(created)} demo tasks")


if __name__ == "__main__":
    main()
