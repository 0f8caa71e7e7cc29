"""
eventprogress - Lifecycle Event Progress Tracking

Accumulates start/end notifications for events, tasks, stages and jobs
into invariant-checked progress counters, with undo support for
stepping backwards through an event stream.
"""

__version__ = "1.0.0"

from .core.exceptions import (
    ProgressError,
    InvariantViolationError,
    UnbalancedUndoError,
    UnresolvedJobError,
)
from .core.types import Notification, NotificationKind
from .progress import ProgressCounter, ProgressTracker, TrackerSnapshot

__all__ = [
    "ProgressError", "InvariantViolationError", "UnbalancedUndoError",
    "UnresolvedJobError", "Notification", "NotificationKind",
    "ProgressCounter", "ProgressTracker", "TrackerSnapshot",
]
