"""Logging infrastructure."""
from .setup import setup_logging, get_logger, JSONFormatter, HumanFormatter

__all__ = ["setup_logging", "get_logger", "JSONFormatter", "HumanFormatter"]
