# src/taskdesk/web/routes.py

"""
HTTP handlers for the task manager.

Routes:
    GET  /                      -> list view
    POST /create-task           -> create, redirect to /
    GET  /task/<id>             -> detail view
    POST /delete-task/<id>      -> delete, redirect to /
    GET  /edit-task/<id>        -> edit form
    POST /update-task/<id>      -> update, redirect to /task/<id>

Outcomes are reported as plain-text `success` / `error` query parameters on
the redirect target. Each handler finishes its file I/O before responding.
"""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, redirect, render_template, request, url_for
from flask.typing import ResponseReturnValue

from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_errors import NotFoundError, TaskError, ValidationError
from ..tasks.task_models import DecodeMode

logger = logging.getLogger(__name__)

tasks_bp = Blueprint("tasks", __name__)

MSG_TITLE_REQUIRED = "Title is required"
MSG_TASK_NOT_FOUND = "Task not found"
MSG_CREATED = "Task created successfully"
MSG_CREATE_FAILED = "Failed to create task"
MSG_DELETED = "Task deleted successfully"
MSG_DELETE_FAILED = "Failed to delete task"
MSG_UPDATED = "Task updated successfully"
MSG_UPDATE_FAILED = "Failed to update task"


def _store() -> TaskRepo:
    state: AppState = current_app.extensions["taskdesk"]
    return state.task_store


def _submitted(field: str) -> str | None:
    """Read a field from a form-encoded or JSON object body."""
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return None
        value = data.get(field)
        return value if isinstance(value, str) else None
    return request.form.get(field)


@tasks_bp.route("/", methods=["GET"])
def index() -> ResponseReturnValue:
    return render_template(
        "index.html",
        tasks=_store().list_tasks(),
        success=request.args.get("success"),
        error=request.args.get("error"),
    )


@tasks_bp.route("/create-task", methods=["POST"])
def create_task() -> ResponseReturnValue:
    try:
        _store().add_task(title=_submitted("title"), description=_submitted("description"))
    except ValidationError:
        return redirect(url_for(".index", error=MSG_TITLE_REQUIRED))
    except TaskError as exc:
        logger.error("Error creating task: %s", exc)
        return redirect(url_for(".index", error=MSG_CREATE_FAILED))

    return redirect(url_for(".index", success=MSG_CREATED))


@tasks_bp.route("/task/<task_id>", methods=["GET"])
def task_detail(task_id: str) -> ResponseReturnValue:
    try:
        task = _store().get_task(task_id)
    except NotFoundError as exc:
        logger.error("Error reading task: %s (%s)", exc, exc.__cause__)
        return redirect(url_for(".index", error=MSG_TASK_NOT_FOUND))

    return render_template("task_detail.html", task=task, success=request.args.get("success"))


@tasks_bp.route("/delete-task/<task_id>", methods=["POST"])
def delete_task(task_id: str) -> ResponseReturnValue:
    try:
        _store().delete_task(task_id)
    except TaskError as exc:
        logger.error("Error deleting task: %s", exc)
        return redirect(url_for(".index", error=MSG_DELETE_FAILED))

    return redirect(url_for(".index", success=MSG_DELETED))


@tasks_bp.route("/edit-task/<task_id>", methods=["GET"])
def edit_task(task_id: str) -> ResponseReturnValue:
    try:
        task = _store().get_task(task_id, mode=DecodeMode.EDIT)
    except NotFoundError as exc:
        logger.error("Error reading task for edit: %s (%s)", exc, exc.__cause__)
        return redirect(url_for(".index", error=MSG_TASK_NOT_FOUND))

    return render_template("edit_task.html", task=task, error=request.args.get("error"))


@tasks_bp.route("/update-task/<task_id>", methods=["POST"])
def update_task(task_id: str) -> ResponseReturnValue:
    try:
        _store().update_task(
            task_id,
            title=_submitted("title"),
            description=_submitted("description"),
        )
    except ValidationError:
        return redirect(url_for(".edit_task", task_id=task_id, error=MSG_TITLE_REQUIRED))
    except TaskError as exc:
        logger.error("Error updating task: %s", exc)
        return redirect(url_for(".edit_task", task_id=task_id, error=MSG_UPDATE_FAILED))

    return redirect(url_for(".task_detail", task_id=task_id, success=MSG_UPDATED))
