# src/taskdesk/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (creating the storage directory if needed),
then serves the web app with Flask's built-in server.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging
from ..web.app import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(log_dir=settings.log_dir, console_level=console_level)
    logger.debug("Writing full logs to %s", log_file)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    app = create_app(state)

    logger.info("Task Manager server running on http://%s:%s", settings.host, settings.port)
    logger.info("Tasks will be stored in the %s directory", settings.tasks_dir)

    try:
        app.run(host=settings.host, port=settings.port, debug=settings.debug, use_reloader=False)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
