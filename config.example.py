# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLINE_APP_NAME": "Name shown in the greeting (default: taskline).",
    "TASKLINE_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKLINE_DATA_DIR": "Local data directory (default: .local/taskline).",
    "TASKLINE_TASKS_PATH": "Task store, JSON Lines (default: <data_dir>/tasks.jsonl).",
    "TASKLINE_LOG_DIR": "Directory for taskline.log (default: <data_dir>).",
    # Console
    "TASKLINE_FRAME_OUTPUT": "Frame replies between horizontal rules (true/false, default: true).",
    "TASKLINE_FRAME_WIDTH": "Width of the frame rule in characters (default: 60).",
}
