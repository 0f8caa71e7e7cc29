"""
Progress counter for a single lifecycle domain.

Holds count/started/completed plus the names currently in flight. Seeds
must satisfy completed <= started <= count; afterwards any mutation that
would complete more than started, or undo below zero, is rejected.
"""
from dataclasses import dataclass, field
from typing import Optional, Set

from ..core.exceptions import (
    ProgressConstructionError,
    InvariantViolationError,
    UnbalancedUndoError,
)


@dataclass
class ProgressCounter:
    """Aggregate progress for one domain (events, tasks, stages or jobs)."""
    count: int = 0
    started: int = 0
    completed: int = 0
    active: Set[str] = field(default_factory=set)  # Display aid only, not authoritative

    def __post_init__(self):
        if self.active is None:
            raise ProgressConstructionError("Active set must not be None")
        if self.count < 0:
            raise ProgressConstructionError(f"count must be non-negative, got {self.count}")
        if not 0 <= self.started <= self.count:
            raise ProgressConstructionError(
                f"started must be within [0, {self.count}], got {self.started}"
            )
        if not 0 <= self.completed <= self.started:
            raise ProgressConstructionError(
                f"completed must be within [0, {self.started}], got {self.completed}"
            )
        self.active = set(self.active)

    @classmethod
    def empty(cls) -> "ProgressCounter":
        """Create a counter with nothing observed."""
        return cls()

    # Mutations

    def record_unit(self) -> None:
        """Observe one more unit."""
        self.count += 1

    def begin(self, name: Optional[str] = None) -> None:
        """Mark a unit as started; independent of record_unit()."""
        self.started += 1
        if name is not None:
            self.active.add(name)

    def finish(self, name: Optional[str] = None) -> None:
        """Mark a unit as completed."""
        self._check_can_complete()
        self.completed += 1
        if name is not None:
            self.active.discard(name)

    def undo_begin(self, name: Optional[str] = None) -> None:
        """Reverse a begin(); the unit is no longer considered started."""
        self._check_can_unstart()
        self.started -= 1
        if name is not None:
            self.active.discard(name)

    def undo_finish(self, name: Optional[str] = None) -> None:
        """Reverse a finish(); the unit becomes active again."""
        self._check_can_uncomplete()
        self.completed -= 1
        if name is not None:
            self.active.add(name)

    def toggle_on(self) -> None:
        """Start and complete a unit in one step."""
        self.started += 1
        self.completed += 1

    def toggle_off(self) -> None:
        """Reverse toggle_on()."""
        if self.completed <= 0:
            raise UnbalancedUndoError("completed", self.completed, 0)
        self.started -= 1
        self.completed -= 1

    # Invariant checks, run before any field changes.
    # count only bounds started at construction; begin() may run ahead of record_unit().

    def _check_can_complete(self):
        if self.completed >= self.started:
            raise InvariantViolationError("completed", self.completed, self.started)

    def _check_can_unstart(self):
        # started may not drop below completed (nor below zero, since completed >= 0)
        if self.started <= self.completed:
            raise UnbalancedUndoError("started", self.started, self.completed)

    def _check_can_uncomplete(self):
        if self.completed <= 0:
            raise UnbalancedUndoError("completed", self.completed, 0)

    # Derived metrics

    @property
    def percent(self) -> int:
        """Completed share of observed units, rounded half up (0 - 100)."""
        if self.count == 0:
            return 0
        return min(100, int(100 * self.completed / self.count + 0.5))

    @property
    def in_flight(self) -> int:
        """Units started but not completed."""
        return self.started - self.completed

    @property
    def has_next(self) -> bool:
        return self.completed < self.count

    @property
    def has_previous(self) -> bool:
        return self.completed > 0

    @property
    def description(self) -> str:
        """Human-readable summary, e.g. 'Completed 1 / 4 (25%) with 1 active (a).'"""
        return (
            f"Completed {self.completed} / {self.count} ({self.percent}%) "
            f"with {self.in_flight} active{self._active_string()}."
        )

    def _active_string(self) -> str:
        if not self.active:
            return ""
        return f" ({', '.join(sorted(self.active))})"

    def __str__(self) -> str:
        return f"{self.completed} of {self.count} with {self.in_flight} active"
