# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real tokens. Put them in .env (local, gitignored).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "REMINDLIST_APP_NAME": "App display name (default: remindlist).",
    "REMINDLIST_LOG_LEVEL": "Console logging level (default: INFO; console shows WARNING+).",
    "REMINDLIST_LOCALE": "List strings language: pt-BR or en-US (default: pt-BR).",
    # Paths (gitignored)
    "REMINDLIST_DATA_DIR": "Local data directory for logs and the SQLite store (default: .local/remindlist).",
    "REMINDLIST_TASKS_DB_PATH": "SQLite store path (default: <data_dir>/tasks.sqlite3).",
    # Gateway
    "REMINDLIST_GATEWAY": "Task store backend: sqlite or http (default: sqlite).",
    "REMINDLIST_API_BASE_URL": "Base URL of the REST task API (required for the http gateway).",
    "REMINDLIST_API_TOKEN": "Optional bearer token for the REST task API.",
    "REMINDLIST_API_TIMEOUT_SECONDS": "HTTP timeout per request (default: 10).",
    # Task list
    "REMINDLIST_SORT_ORDER": "favorites_first | recent_first | name | id (default: favorites_first).",
}
