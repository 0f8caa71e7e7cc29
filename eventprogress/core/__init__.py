"""Core configuration, errors and types."""
from .config import Config, TrackerConfig, get_config, set_config
from .exceptions import (
    ProgressError,
    ProgressConstructionError,
    InvariantViolationError,
    UnbalancedUndoError,
    UnresolvedJobError,
    NotificationError,
)
from .types import (
    NotificationKind,
    Notification,
    TaskInfo,
    StageInfo,
    JobStartInfo,
    JobEndInfo,
)

__all__ = [
    "Config", "TrackerConfig", "get_config", "set_config",
    "ProgressError", "ProgressConstructionError", "InvariantViolationError",
    "UnbalancedUndoError", "UnresolvedJobError", "NotificationError",
    "NotificationKind", "Notification", "TaskInfo", "StageInfo",
    "JobStartInfo", "JobEndInfo",
]
