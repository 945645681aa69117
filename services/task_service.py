"""CRUD operations over tasks."""

from __future__ import annotations

import logging

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from errors import NotFound, ValidationError
from models.task import Task
from utils.request_validation import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, store: SQLAlchemy) -> None:
        self._store = store

    def list_tasks(self) -> list[Task]:
        stmt = select(Task).order_by(Task.created_at.asc())
        return list(self._store.session.execute(stmt).scalars())

    def get_task(self, task_id: str) -> Task:
        task = self._store.session.get(Task, task_id)
        if task is None:
            logger.warning("Task not found: %s", task_id)
            raise NotFound("Task not found")
        return task

    def create_task(self, data: TaskCreate) -> Task:
        task = Task(
            title=data.title,
            description=data.description,
            due_date=data.due_date,
            completed=False,
        )
        session = self._store.session
        session.add(task)
        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            raise ValidationError("Failed to create task") from exc

        logger.info("Task created: %s", task.id)
        return task

    def update_task(self, task_id: str, data: TaskUpdate) -> Task:
        """Apply only the provided fields and return the updated task."""

        task = self.get_task(task_id)
        for attr, value in data.changes.items():
            setattr(task, attr, value)

        session = self._store.session
        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            raise ValidationError("Failed to update task") from exc

        logger.info("Task updated: %s", task_id)
        return task

    def delete_task(self, task_id: str) -> None:
        task = self.get_task(task_id)
        session = self._store.session
        session.delete(task)
        session.commit()
        logger.info("Task deleted: %s", task_id)
