"""
Structured logging for registration operations - validation, store and listing events.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Sequence

from src.core.config import get_log_level


def mask_email(email: str) -> str:
    """Keep the first character of the local part and the full domain."""
    if not email or "@" not in email:
        return "[REDACTED]"
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}"


class StructuredLogger:
    """Structured logger for registration workflow operations."""

    def __init__(self, name: str = "student_registration"):
        self.logger = logging.getLogger(name)
        self.refresh_level()

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def refresh_level(self) -> int:
        """Re-read DEBUG / LOG_LEVEL, e.g. after a .env file was loaded."""
        level = getattr(logging, get_log_level(), logging.INFO)
        self.logger.setLevel(level)
        return level

    @contextmanager
    def handlers_replaced(self, *handlers: logging.Handler) -> Iterator[None]:
        """Temporarily route records to other handlers, restoring the originals on exit."""
        previous = self.logger.handlers[:]
        self.logger.handlers = list(handlers)
        try:
            yield
        finally:
            self.logger.handlers = previous

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        if status in ("failed", "error"):
            self.logger.error(message)
        elif status == "rejected":
            self.logger.warning(message)
        else:
            self.logger.info(message)

    def log_student_operation(self, operation: str, roll_number: str = None, status: str = "success", details: Dict[str, Any] = None):
        """Log a student store operation."""
        log_details = {}
        if roll_number is not None:
            log_details["roll_number"] = roll_number
        if details:
            log_details.update(details)

        self.log_operation(f"students.{operation}", status, log_details)

    def log_validation_error(self, kind: str, fields: Sequence[str] = (), email: str = None):
        """Log a rejected candidate without leaking the full email address."""
        log_details = {"kind": kind}
        if fields:
            log_details["fields"] = list(fields)
        if email is not None:
            log_details["email"] = mask_email(email)

        self.log_operation("validation", "rejected", log_details)

    def log_schema_bootstrap(self, table: str, db_path: str, status: str = "success", error: str = None):
        """Log table bootstrap."""
        log_details = {"table": table, "db_path": db_path}
        if error:
            log_details["error"] = error[:100]

        self.log_operation("schema.bootstrap", status, log_details)

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)

# Global logger instance
logger = StructuredLogger()
