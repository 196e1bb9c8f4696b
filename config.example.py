# config.example.py

"""
Documentation-only module (safe to commit).

Configuration is loaded from environment variables, optionally via a local
.env file in the working directory. This file lists every variable read by
todolist.config.Settings.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "Program name shown in help output (default: todo).",
    "TODO_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TODO_FILE_LOG": "Write a debug log to <data_dir>/todo.log (true/false, default: true).",
    # Behaviour
    "TODO_DEFAULT_CATEGORY": "Category used when no -category is given (default: misc).",
    "TODO_LENIENT": "Listing a missing category prints a notice instead of failing (default: false).",
    # Paths
    "TODO_DATA_DIR": "Directory for the log file (default: ~/.local/share/todo).",
    "TODO_FILE": "JSON file holding the task lists (default: ~/.todo.json).",
}
