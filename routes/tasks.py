"""Tasks blueprint with list, create, update and delete."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import verify_jwt_in_request

from services.task_service import TaskService
from utils.request_validation import TaskCreate, TaskUpdate, parse_json_request

tasks_bp = Blueprint("tasks", __name__)


def _task_service() -> TaskService:
    return current_app.extensions["tasktidy"]["tasks"]


@tasks_bp.before_request
def _enforce_auth():
    # Task routes are public unless the deployment opts in.
    if request.method == "OPTIONS" or not current_app.config.get("TASKS_REQUIRE_AUTH"):
        return None
    verify_jwt_in_request()
    return None


@tasks_bp.route("/info", methods=["GET"])
def info():
    return jsonify(
        {
            "message": "TaskTidy Tasks API",
            "endpoints": {
                "GET /api/tasks": "Get all tasks",
                "POST /api/tasks": "Create a new task",
                "PUT /api/tasks/:id": "Update a task",
                "DELETE /api/tasks/:id": "Delete a task",
            },
            "status": "Available",
        }
    )


@tasks_bp.route("", methods=["GET"])
def list_tasks():
    """Return every task."""

    tasks = _task_service().list_tasks()
    current_app.logger.debug("Found %d tasks", len(tasks))
    return jsonify([task.to_dict() for task in tasks])


@tasks_bp.route("", methods=["POST"])
def create_task():
    data = parse_json_request(request, required_keys=["title"])
    task = _task_service().create_task(TaskCreate.from_payload(data))
    return jsonify(task.to_dict()), HTTPStatus.CREATED


@tasks_bp.route("/<task_id>", methods=["GET"])
def get_task(task_id: str):
    return jsonify(_task_service().get_task(task_id).to_dict())


@tasks_bp.route("/<task_id>", methods=["PUT", "PATCH"])
def update_task(task_id: str):
    """Apply any subset of task fields."""

    data = parse_json_request(request, allow_empty=True)
    task = _task_service().update_task(task_id, TaskUpdate.from_payload(data))
    return jsonify(task.to_dict())


@tasks_bp.route("/<task_id>", methods=["DELETE"])
def delete_task(task_id: str):
    _task_service().delete_task(task_id)
    return jsonify({"message": "Task deleted"})
