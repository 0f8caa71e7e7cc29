"""Progress tracking system."""
from .counter import ProgressCounter
from .snapshot import CounterSnapshot, TrackerSnapshot
from .tracker import ProgressTracker
from .reporter import ProgressReporter

__all__ = [
    "ProgressCounter",
    "CounterSnapshot",
    "TrackerSnapshot",
    "ProgressTracker",
    "ProgressReporter",
]
