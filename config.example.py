# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Blank values count as unset; malformed numbers/booleans fall back to the default.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKDESK_APP_NAME": "App display name, shown in page titles (default: taskdesk).",
    "TASKDESK_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKDESK_LOG_DIR": "Directory for taskdesk.log (default: .local/taskdesk).",
    # HTTP server
    "TASKDESK_HOST": "Interface to bind (default: 127.0.0.1).",
    "TASKDESK_PORT": "Port to listen on (default: 3000).",
    "TASKDESK_DEBUG": "Flask debug mode (true/false, default: false).",
    # Storage
    "TASKDESK_TASKS_DIR": "Directory holding one <id>.txt file per task (default: ./tasks).",
}
