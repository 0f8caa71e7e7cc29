"""
Logging configuration for eventprogress.

Provides:
- Rich console output with colors and formatting
- Rotating file logs, human-readable or JSON structured
"""
import logging
import json
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..core.config import get_config


# Global console instance (shared with the reporter)
console = Console(stderr=True)

# Extra record fields copied into JSON output
EXTRA_FIELDS = ("domain", "notification", "job_id")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class HumanFormatter(logging.Formatter):
    """Human-readable formatter for file logs."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s | %(name)-30s | %(levelname)-8s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def setup_logging(
    level: Optional[str] = None,
    enable_file_logging: bool = False,
    log_file: Optional[Path] = None,
    json_format: bool = False,
) -> logging.Logger:
    """
    Initialize the logging system.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR); config default if None
        enable_file_logging: Whether to write logs to a rotating file
        log_file: Custom log file path (uses logs_dir/eventprogress.log if None)
        json_format: Use JSON format for file logs

    Returns:
        The package root logger
    """
    config = get_config()
    level = (level or config.log.level).upper()

    root_logger = logging.getLogger("eventprogress")
    root_logger.setLevel(getattr(logging, level))

    # Clear existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        markup=False,
    )
    console_handler.setLevel(getattr(logging, level))
    root_logger.addHandler(console_handler)

    if enable_file_logging:
        if log_file is None:
            config.ensure_directories()
            log_file = config.logs_dir / "eventprogress.log"
        else:
            log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config.log.max_file_size,
            backupCount=config.log.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)  # File captures everything

        if json_format:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(HumanFormatter())

        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (will be prefixed with 'eventprogress.')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"eventprogress.{name}")
