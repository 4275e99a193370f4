# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file
in the working directory). Command-line flags win over both.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    "PLAINTASK_FILE": "Task file (default: ./database). Overridden by -f/--file.",
    "PLAINTASK_LOG_LEVEL": "Console log level (default: WARNING). -v / -vv raise it to INFO / DEBUG.",
    "PLAINTASK_LOG_FILE": "Optional log file; receives DEBUG logs when set.",
    "PLAINTASK_COLOR": (
        "Colour `list` output (true/false). Unset: colour only when stdout is a terminal. "
        "Overridden by --color / --no-color."
    ),
}
