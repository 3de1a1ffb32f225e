# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-groups).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for storage and todo.log (default: .local/todo).",
    "TODO_STORAGE_BACKEND": "sqlite | json | memory (default: sqlite).",
    "TODO_STORAGE_PATH": (
        "Storage file (default: <data_dir>/storage.sqlite3, or storage.json for the json backend)."
    ),
    "TODO_GROUPS_KEY": "Key the group collection is stored under (default: @todo_groups_v1).",
    # Console
    "TODO_TASK_PREVIEW_LIMIT": "Tasks shown per group card (default: 6).",
    "TODO_CONSOLE_CLEAR": "Clear the terminal before each redraw (true/false, default: false).",
}
