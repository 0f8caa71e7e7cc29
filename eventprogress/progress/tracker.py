"""
Progress tracking across the event, task, stage and job domains.

Maps each lifecycle notification, and its undo form, onto mutations of
the matching ProgressCounter.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from ..core.config import TrackerConfig, get_config
from ..core.exceptions import (
    ProgressConstructionError,
    ProgressError,
    UnresolvedJobError,
)
from ..core.types import (
    JobEndInfo,
    JobStartInfo,
    Notification,
    NotificationKind,
    StageInfo,
    TaskInfo,
)
from ..logging import get_logger
from .counter import ProgressCounter
from .snapshot import CounterSnapshot, TrackerSnapshot

logger = get_logger("progress.tracker")


# Forward / undo method names per notification kind
DISPATCH: Dict[NotificationKind, Tuple[Optional[str], Optional[str]]] = {
    NotificationKind.EVENT: (None, None),
    NotificationKind.TASK_START: ("task_start", "un_task_start"),
    NotificationKind.TASK_END: ("task_end", "un_task_end"),
    NotificationKind.STAGE_SUBMITTED: ("stage_submitted", "un_stage_submitted"),
    NotificationKind.STAGE_COMPLETED: ("stage_completed", "un_stage_completed"),
    NotificationKind.JOB_START: ("job_start", "un_job_start"),
    NotificationKind.JOB_END: ("job_end", "un_job_end"),
}

# Domain counters bumped while preprocessing, in addition to the event counter
PREPROCESS: Dict[NotificationKind, str] = {
    NotificationKind.TASK_END: "preprocess_task_end",
    NotificationKind.STAGE_COMPLETED: "preprocess_stage_completed",
    NotificationKind.JOB_END: "preprocess_job_end",
}

# Counter touched by each kind, for log records
DOMAINS: Dict[NotificationKind, str] = {
    NotificationKind.EVENT: "event",
    NotificationKind.TASK_START: "task",
    NotificationKind.TASK_END: "task",
    NotificationKind.STAGE_SUBMITTED: "stage",
    NotificationKind.STAGE_COMPLETED: "stage",
    NotificationKind.JOB_START: "job",
    NotificationKind.JOB_END: "job",
}


@dataclass
class ProgressTracker:
    """
    Tracks progress of an event stream across four domains.

    Counters are owned exclusively by this instance. The only cross-call
    state besides the counters is ``job_names``, which remembers the name
    a job was given at start so the job end (which carries only an id)
    can remove the same name from the active set.

    Not thread-safe; feed notifications in the order they were observed.
    """
    event_progress: ProgressCounter = field(default_factory=ProgressCounter.empty)
    task_progress: ProgressCounter = field(default_factory=ProgressCounter.empty)
    stage_progress: ProgressCounter = field(default_factory=ProgressCounter.empty)
    job_progress: ProgressCounter = field(default_factory=ProgressCounter.empty)
    config: Optional[TrackerConfig] = None

    def __post_init__(self):
        counters = {
            "event_progress": self.event_progress,
            "task_progress": self.task_progress,
            "stage_progress": self.stage_progress,
            "job_progress": self.job_progress,
        }
        for name, counter in counters.items():
            if not isinstance(counter, ProgressCounter):
                raise ProgressConstructionError(
                    f"{name} must be a ProgressCounter, got {type(counter).__name__}"
                )
        if len({id(c) for c in counters.values()}) != len(counters):
            raise ProgressConstructionError("Each domain needs its own ProgressCounter")

        self.config = (self.config or get_config().tracker).copy()
        self.job_names: Dict[int, str] = {}

    # Counting pass

    def preprocess_event(self) -> None:
        self.event_progress.record_unit()

    def preprocess_task_end(self) -> None:
        self.task_progress.record_unit()

    def preprocess_stage_completed(self) -> None:
        self.stage_progress.record_unit()

    def preprocess_job_end(self) -> None:
        self.job_progress.record_unit()

    # Generic on/off framing

    def on_event(self) -> None:
        self.event_progress.toggle_on()

    def un_event(self) -> None:
        self.event_progress.toggle_off()

    # Tasks

    def task_start(self, info: TaskInfo) -> None:
        self.task_progress.begin(info.display_name)

    def task_end(self, info: TaskInfo) -> None:
        self.task_progress.finish(info.display_name)

    def un_task_start(self, info: TaskInfo) -> None:
        self.task_progress.undo_begin(info.display_name)

    def un_task_end(self, info: TaskInfo) -> None:
        self.task_progress.undo_finish(info.display_name)

    # Stages

    def stage_submitted(self, info: StageInfo) -> None:
        self.stage_progress.begin(info.name)

    def stage_completed(self, info: StageInfo) -> None:
        self.stage_progress.finish(info.name)

    def un_stage_submitted(self, info: StageInfo) -> None:
        self.stage_progress.undo_begin(info.name)

    def un_stage_completed(self, info: StageInfo) -> None:
        self.stage_progress.undo_finish(info.name)

    # Jobs

    def job_start(self, info: JobStartInfo) -> None:
        name = self._job_name_from_info(info)
        self.job_progress.begin(name)
        self.job_names.setdefault(info.job_id, name)

    def job_end(self, info: JobEndInfo) -> None:
        self.job_progress.finish(self._job_name_from_id(info.job_id))

    def un_job_start(self, info: JobStartInfo) -> None:
        self.job_progress.undo_begin(self._job_name_from_info(info))

    def un_job_end(self, info: JobEndInfo) -> None:
        self.job_progress.undo_finish(self._job_name_from_id(info.job_id))

    def _job_name_from_info(self, info: JobStartInfo) -> str:
        """Name for a starting job; the first name registered for an id wins."""
        name = self.job_names.get(info.job_id)
        if name is not None:
            return name
        description = info.description(
            self.config.job_description_key, self.config.unknown_name
        )
        return f"ID{info.job_id}:{description}"

    def _job_name_from_id(self, job_id: int) -> str:
        try:
            return self.job_names[job_id]
        except KeyError:
            raise UnresolvedJobError(job_id) from None

    # Envelope dispatch

    def preprocess(self, notification: Notification) -> None:
        """Count a notification before it is stepped through."""
        self.preprocess_event()
        method = PREPROCESS.get(notification.kind)
        if method:
            getattr(self, method)()

    def apply(self, notification: Notification) -> None:
        """Apply a notification in the forward direction."""
        forward, _ = DISPATCH[notification.kind]
        self._dispatch(notification, self.on_event, self.un_event, forward, "apply")

    def revert(self, notification: Notification) -> None:
        """Reverse a previously applied notification."""
        _, undo = DISPATCH[notification.kind]
        self._dispatch(notification, self.un_event, self.on_event, undo, "revert")

    def _dispatch(
        self,
        notification: Notification,
        frame: Callable[[], None],
        unframe: Callable[[], None],
        method: Optional[str],
        direction: str,
    ) -> None:
        extra = {"notification": notification.kind.value}
        job_id = getattr(notification.payload, "job_id", None)
        if job_id is not None:
            extra["job_id"] = job_id

        try:
            frame()
        except ProgressError as e:
            logger.warning(
                f"Rejected {direction} of {notification.kind.value}: {e}",
                extra={**extra, "domain": "event"},
            )
            raise

        if method is None:
            logger.debug(f"{direction} {notification.kind.value}", extra=extra)
            return

        try:
            getattr(self, method)(notification.payload)
        except ProgressError as e:
            # Keep the event counter in step with the domain counter
            unframe()
            logger.warning(
                f"Rejected {direction} of {notification.kind.value}: {e}",
                extra={**extra, "domain": DOMAINS[notification.kind]},
            )
            raise

        logger.debug(f"{direction} {notification.kind.value}", extra=extra)

    # Read side

    def snapshot(self) -> TrackerSnapshot:
        """Capture the current state of every domain."""
        return TrackerSnapshot(
            events=CounterSnapshot.of(self.event_progress),
            tasks=CounterSnapshot.of(self.task_progress),
            stages=CounterSnapshot.of(self.stage_progress),
            jobs=CounterSnapshot.of(self.job_progress),
        )

    def __str__(self) -> str:
        return (
            f"Event: {self.event_progress}, Task: {self.task_progress}, "
            f"Stage: {self.stage_progress}, Job: {self.job_progress}"
        )
