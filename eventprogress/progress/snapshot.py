"""Read-only views of tracker state for display and throttling decisions."""
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterator, Tuple

from .counter import ProgressCounter


@dataclass(frozen=True)
class CounterSnapshot:
    """Immutable copy of a ProgressCounter at one point in time."""
    count: int
    started: int
    completed: int
    active: FrozenSet[str]
    percent: int
    in_flight: int
    has_next: bool
    has_previous: bool
    description: str

    @classmethod
    def of(cls, counter: ProgressCounter) -> "CounterSnapshot":
        return cls(
            count=counter.count,
            started=counter.started,
            completed=counter.completed,
            active=frozenset(counter.active),
            percent=counter.percent,
            in_flight=counter.in_flight,
            has_next=counter.has_next,
            has_previous=counter.has_previous,
            description=counter.description,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "count": self.count,
            "started": self.started,
            "completed": self.completed,
            "active": sorted(self.active),
            "percent": self.percent,
            "in_flight": self.in_flight,
            "has_next": self.has_next,
            "has_previous": self.has_previous,
            "description": self.description,
        }


@dataclass(frozen=True)
class TrackerSnapshot:
    """Snapshot of all four domains of a ProgressTracker."""
    events: CounterSnapshot
    tasks: CounterSnapshot
    stages: CounterSnapshot
    jobs: CounterSnapshot

    def domains(self) -> Iterator[Tuple[str, CounterSnapshot]]:
        """Yield (label, snapshot) pairs in event, task, stage, job order."""
        yield "Event", self.events
        yield "Task", self.tasks
        yield "Stage", self.stages
        yield "Job", self.jobs

    def to_dict(self) -> Dict[str, Any]:
        return {label.lower(): snap.to_dict() for label, snap in self.domains()}
