"""
Registration store configuration - environment driven, read at call time.
"""

import os
from pathlib import Path

from dotenv import load_dotenv, find_dotenv


def load_environment() -> bool:
    """Load .env from the working directory; variables already set win."""
    return load_dotenv(find_dotenv(usecwd=True))


load_environment()

# Database path configuration
DB_PATH = os.getenv("DB_PATH", "./data/student_db.sqlite")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Name of the single table owned by the record store
STUDENTS_TABLE = "students"


def get_db_path() -> str:
    """Get the database path, honouring DB_PATH changes made after import."""
    return os.getenv("DB_PATH", DB_PATH)


def debug_enabled():
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "false").lower() == "true"


def get_log_level() -> str:
    """Get the effective log level name."""
    if debug_enabled():
        return "DEBUG"
    return os.getenv("LOG_LEVEL", LOG_LEVEL).upper()


def ensure_db_directory(db_path: str = None):
    """Ensure the database directory exists."""
    Path(db_path or get_db_path()).parent.mkdir(parents=True, exist_ok=True)
