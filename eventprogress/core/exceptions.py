"""
Custom exceptions for eventprogress.

Every error carries a message and suggestions for the code feeding the tracker.
"""
from typing import List, Optional


class ProgressError(Exception):
    """Base exception for eventprogress errors."""

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []


class ProgressConstructionError(ProgressError):
    """A counter or tracker was built from invalid seed values."""

    def __init__(self, message: str):
        super().__init__(
            message,
            suggestions=[
                "Use ProgressCounter.empty() for a fresh counter",
                "Seed values must satisfy 0 <= completed <= started <= count",
            ]
        )


class InvariantViolationError(ProgressError):
    """A counter mutation would break completed <= started <= count."""

    def __init__(self, field: str, current: int, limit: int, message: str = ""):
        self.field = field
        self.current = current
        self.limit = limit
        super().__init__(
            message or f"Cannot advance '{field}' past {limit} (currently {current})",
            suggestions=[
                "Preprocess every notification before applying it",
                "Check the notification stream for more completions than starts",
            ]
        )


class UnbalancedUndoError(InvariantViolationError):
    """An undo would drive a counter below its floor."""

    def __init__(self, field: str, current: int, limit: int):
        super().__init__(
            field,
            current,
            limit,
            message=f"Cannot undo '{field}' below {limit} (currently {current})",
        )
        self.suggestions = [
            "Only revert notifications that were previously applied",
            "Revert notifications in the reverse order they were applied",
        ]


class UnresolvedJobError(ProgressError):
    """A job end referenced a job id never seen at job start."""

    def __init__(self, job_id: int):
        self.job_id = job_id
        super().__init__(
            f"No job start registered for job id {job_id}",
            suggestions=[
                "Apply the job start notification before its job end",
                "Check the event stream for out-of-order job events",
            ]
        )


class NotificationError(ProgressError):
    """A notification payload does not match its kind."""
    pass
