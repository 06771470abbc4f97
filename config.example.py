# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
All variables are optional; malformed values fall back to the defaults below.

This file exists to make the repo self-documenting even without opening src/schedulr/config.py.
"""

ENV_VARS = {
    # App / logging
    "SCHEDULR_APP_NAME": "App display name (default: schedulr).",
    "SCHEDULR_LOG_LEVEL": "Console logging level (default: INFO).",
    "SCHEDULR_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/schedulr.log (default: true).",
    # Connectors
    "SCHEDULR_CONSOLE_ENABLED": "Run the console REPL (default: true).",
    # Task store
    "SCHEDULR_SEED_SAMPLE_DATA": "Seed the five sample tasks at startup (default: true).",
    # UI
    "SCHEDULR_THEME": "Initial theme: dark | light (default: dark).",
    # Paths (gitignored)
    "SCHEDULR_DATA_DIR": "Local data directory for the log file (default: .local/schedulr).",
}
