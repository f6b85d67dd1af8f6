"""
Configuration utilities for the todocli tool.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_FILE_NAME = ".todocli.env"
DEFAULT_TASKS_FILE = "tasks.json"
DEFAULT_LOG_LEVEL = "WARNING"


def load_env_vars() -> None:
    """
    Load environment variables from .env files in the following order:
    1. .todocli.env in the current directory
    2. .todocli.env in the user's home directory

    Variables already set in the environment are never overridden.
    """
    # Load from current directory
    if os.path.exists(ENV_FILE_NAME):
        load_dotenv(ENV_FILE_NAME)

    # Load from home directory
    home_env = Path.home() / ENV_FILE_NAME
    if home_env.exists():
        load_dotenv(home_env)


def get_config(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get configuration value from environment variables."""
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value


def get_tasks_file() -> Path:
    """Path of the JSON file holding the task list."""
    return Path(get_config("TODOCLI_TASKS_FILE", DEFAULT_TASKS_FILE)).expanduser()


def get_log_level() -> str:
    return get_config("TODOCLI_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
