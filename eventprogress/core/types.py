"""
Type definitions for eventprogress.

Payloads an event decoder hands to the tracker, and the envelope that
pairs each payload with its notification kind.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

from .exceptions import NotificationError


class NotificationKind(str, Enum):
    """Lifecycle notification kinds."""
    EVENT = "event"
    TASK_START = "task_start"
    TASK_END = "task_end"
    STAGE_SUBMITTED = "stage_submitted"
    STAGE_COMPLETED = "stage_completed"
    JOB_START = "job_start"
    JOB_END = "job_end"


@dataclass(frozen=True)
class TaskInfo:
    """Identity of a task attempt."""
    task_id: int
    locality: str          # Placement locality, e.g. NODE_LOCAL
    host: str
    attempt: int = 0

    @property
    def display_name(self) -> str:
        """Name used in the task active set."""
        return f"ID{self.task_id}:{self.locality}:{self.host}(attempt {self.attempt})"


@dataclass(frozen=True)
class StageInfo:
    """Identity of a stage."""
    stage_id: int
    name: str


@dataclass(frozen=True)
class JobStartInfo:
    """Job start payload; the description lives in the job properties."""
    job_id: int
    properties: Dict[str, str] = field(default_factory=dict)

    def description(self, key: str, default: str) -> str:
        """Look up the descriptive property, falling back to default."""
        value = self.properties.get(key)
        return default if value is None else value


@dataclass(frozen=True)
class JobEndInfo:
    """Job end payload; carries only the job id."""
    job_id: int


Payload = Union[TaskInfo, StageInfo, JobStartInfo, JobEndInfo, None]

# Payload type each kind requires
PAYLOAD_TYPES = {
    NotificationKind.EVENT: type(None),
    NotificationKind.TASK_START: TaskInfo,
    NotificationKind.TASK_END: TaskInfo,
    NotificationKind.STAGE_SUBMITTED: StageInfo,
    NotificationKind.STAGE_COMPLETED: StageInfo,
    NotificationKind.JOB_START: JobStartInfo,
    NotificationKind.JOB_END: JobEndInfo,
}


@dataclass(frozen=True)
class Notification:
    """
    A single lifecycle notification.

    Forward and undo application are chosen by the caller
    (ProgressTracker.apply / ProgressTracker.revert), so the same
    notification object serves both directions.
    """
    kind: NotificationKind
    payload: Payload = None

    def __post_init__(self):
        try:
            kind = NotificationKind(self.kind)
        except ValueError:
            raise NotificationError(f"Unknown notification kind: {self.kind!r}") from None
        object.__setattr__(self, "kind", kind)

        expected = PAYLOAD_TYPES[kind]
        if not isinstance(self.payload, expected):
            raise NotificationError(
                f"{self.kind.value} notification requires {expected.__name__}, "
                f"got {type(self.payload).__name__}"
            )

    @classmethod
    def event(cls) -> "Notification":
        return cls(NotificationKind.EVENT)

    @classmethod
    def task_start(cls, task_id: int, locality: str, host: str, attempt: int = 0) -> "Notification":
        return cls(NotificationKind.TASK_START, TaskInfo(task_id, locality, host, attempt))

    @classmethod
    def task_end(cls, task_id: int, locality: str, host: str, attempt: int = 0) -> "Notification":
        return cls(NotificationKind.TASK_END, TaskInfo(task_id, locality, host, attempt))

    @classmethod
    def stage_submitted(cls, stage_id: int, name: str) -> "Notification":
        return cls(NotificationKind.STAGE_SUBMITTED, StageInfo(stage_id, name))

    @classmethod
    def stage_completed(cls, stage_id: int, name: str) -> "Notification":
        return cls(NotificationKind.STAGE_COMPLETED, StageInfo(stage_id, name))

    @classmethod
    def job_start(cls, job_id: int, properties: Optional[Dict[str, str]] = None) -> "Notification":
        return cls(NotificationKind.JOB_START, JobStartInfo(job_id, dict(properties or {})))

    @classmethod
    def job_end(cls, job_id: int) -> "Notification":
        return cls(NotificationKind.JOB_END, JobEndInfo(job_id))
