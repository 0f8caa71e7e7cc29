"""
Progress reporting using Rich library.

Renders tracker snapshots as a table or as plain text lines.
"""
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .snapshot import TrackerSnapshot
from .tracker import ProgressTracker


class ProgressReporter:
    """
    Reports tracker progress to the console.

    Only reads snapshots; never mutates the tracker.
    """

    def __init__(self, tracker: ProgressTracker, console: Optional[Console] = None):
        """
        Initialize progress reporter.

        Args:
            tracker: ProgressTracker to report on
            console: Console to print to (stderr console if None)
        """
        self.tracker = tracker
        self.console = console or Console(stderr=True)

    def build_table(self, snapshot: Optional[TrackerSnapshot] = None) -> Table:
        """Build a table with one row per domain."""
        snapshot = snapshot or self.tracker.snapshot()

        table = Table(title="Event Progress")
        table.add_column("Domain", style="bold")
        table.add_column("Completed", justify="right")
        table.add_column("Count", justify="right")
        table.add_column("%", justify="right")
        table.add_column("In flight", justify="right")
        table.add_column("Active")

        for label, snap in snapshot.domains():
            table.add_row(
                label,
                str(snap.completed),
                str(snap.count),
                f"{snap.percent}%",
                str(snap.in_flight),
                ", ".join(sorted(snap.active)),
            )
        return table

    def text_lines(self, snapshot: Optional[TrackerSnapshot] = None) -> List[str]:
        """Plain text summary, one line per domain."""
        snapshot = snapshot or self.tracker.snapshot()
        return [f"{label}: {snap.description}" for label, snap in snapshot.domains()]

    def print_table(self):
        self.console.print(self.build_table())

    def print_summary(self):
        """Print the plain text summary."""
        for line in self.text_lines():
            self.console.print(line, markup=False, highlight=False)
