# src/taskdesk/web/app.py

from __future__ import annotations

from flask import Flask

from ..core.state import AppState
from .routes import tasks_bp


def create_app(state: AppState) -> Flask:
    """Application factory. The task store comes from `state`, never from globals."""
    app = Flask(__name__)
    app.config["APP_NAME"] = str(getattr(state.settings, "app_name", "taskdesk"))

    app.extensions["taskdesk"] = state
    app.register_blueprint(tasks_bp)

    @app.context_processor
    def _inject_app_name() -> dict[str, str]:
        return {"app_name": app.config["APP_NAME"]}

    return app
