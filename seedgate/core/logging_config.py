"""Structured logging configuration for the application."""

from datetime import UTC, datetime
import json
import logging
import sys

from seedgate.core.config import settings


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with ``extra_fields`` merged in."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class StandardFormatter(logging.Formatter):
    """Plain single-line format for development and tests."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


# Root level per environment; anything else logs at INFO.
ENVIRONMENT_LOG_LEVELS = {
    "development": logging.DEBUG,
    "production": logging.WARNING,
}

# Third-party loggers this service runs with.
LIBRARY_LOG_LEVELS = {
    "uvicorn.access": logging.WARNING,
    "asyncpg": logging.WARNING,
}


def setup_logging(environment: str | None = None) -> None:
    """
    Install a single stdout handler on the root logger.

    Production gets JSON lines, every other environment the plain format.
    """
    environment = environment or settings.ENVIRONMENT
    log_level = ENVIRONMENT_LOG_LEVELS.get(environment, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(
        JSONFormatter() if environment == "production" else StandardFormatter()
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in LIBRARY_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


class SecurityLogger:
    """Specialized logger for access decisions on the seed endpoints."""

    def __init__(self) -> None:
        self.logger = get_logger("security")

    def log_unauthorized_access(
        self,
        resource: str,
        user_id: str | None = None,
        ip_address: str | None = None,
        reason: str | None = None,
    ) -> None:
        """Log a request rejected for missing identity or role."""
        self.logger.warning(
            f"Unauthorized access attempt to: {resource}",
            extra={
                "extra_fields": {
                    "event_type": "unauthorized_access",
                    "resource": resource,
                    "user_id": user_id,
                    "ip_address": ip_address,
                    "reason": reason,
                }
            },
        )

    def log_environment_denied(
        self, resource: str, environment: str, ip_address: str | None = None
    ) -> None:
        """Log a request rejected because of the runtime environment."""
        self.logger.warning(
            f"Seeding blocked in environment '{environment}': {resource}",
            extra={
                "extra_fields": {
                    "event_type": "environment_denied",
                    "resource": resource,
                    "environment": environment,
                    "ip_address": ip_address,
                }
            },
        )

    def log_seed_requested(self, resource: str, user_id: str | None = None) -> None:
        """Log an accepted seed request."""
        self.logger.info(
            f"Seed requested: {resource}",
            extra={
                "extra_fields": {
                    "event_type": "seed_requested",
                    "resource": resource,
                    "user_id": user_id,
                }
            },
        )


# Global security logger instance
security_logger = SecurityLogger()
