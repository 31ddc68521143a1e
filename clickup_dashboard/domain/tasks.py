"""
Task domain models - ClickUp work items and status classification

Represents tasks fetched from a ClickUp list and the immutable status sets
used to classify them:
    - Task: One work item snapshot (feature or bug)
    - Open / Closed: Closure state of a task
    - StatusConfig: Done / in-progress / deferred status labels
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Open:
    """Closure state of a task that has not been closed."""


@dataclass(frozen=True)
class Closed:
    """
    Closure state of a closed task.

    Attributes:
        at: When the task was closed (timezone-aware)
    """

    at: datetime


Closure = Open | Closed


@dataclass(frozen=True)
class Task:
    """
    Represents a task snapshot from a ClickUp list.

    Attributes:
        id: ClickUp task ID
        name: Task title
        status: Raw status label as configured in ClickUp (e.g., "In Progress")
        created_at: When the task was created (UTC), or None if not reported
        closure: Open() or Closed(at=...)
        url: Link to the task in ClickUp

    Example:
        task = Task(
            id="86b1x2",
            name="Export invoices to CSV",
            status="done",
            created_at=datetime(2026, 2, 1, tzinfo=UTC),
            closure=Closed(at=datetime(2026, 2, 9, tzinfo=UTC)),
            url="https://app.clickup.com/t/86b1x2",
        )

        if task.closed_at:
            print(f"{task.name} closed {task.closed_at:%Y-%m-%d}")
    """

    id: str
    name: str
    status: str
    created_at: datetime | None = None
    closure: Closure = field(default_factory=Open)
    url: str | None = None

    @property
    def closed_at(self) -> datetime | None:
        """
        Closure timestamp.

        Returns:
            Closure datetime, or None for open tasks
        """
        if isinstance(self.closure, Closed):
            return self.closure.at
        return None

    @property
    def normalized_status(self) -> str:
        """Status label lower-cased for case-insensitive matching"""
        return self.status.strip().lower()


@dataclass(frozen=True)
class StatusConfig:
    """
    Immutable status classification sets.

    All labels are stored lower-cased; matching is case-insensitive.

    Attributes:
        done: Statuses that count as finished work
        in_progress: Statuses that count as active work
        deferred: Status label for deferred bugs
    """

    done: frozenset[str]
    in_progress: frozenset[str]
    deferred: str = "deferred"

    def __post_init__(self) -> None:
        # Normalize so callers may pass mixed-case labels or plain sets
        object.__setattr__(self, "done", frozenset(s.strip().lower() for s in self.done))
        object.__setattr__(self, "in_progress", frozenset(s.strip().lower() for s in self.in_progress))
        object.__setattr__(self, "deferred", self.deferred.strip().lower())

    def is_done(self, task: Task) -> bool:
        return task.normalized_status in self.done

    def is_in_progress(self, task: Task) -> bool:
        return task.normalized_status in self.in_progress

    def is_deferred(self, task: Task) -> bool:
        return task.normalized_status == self.deferred


DEFAULT_STATUSES = StatusConfig(
    done=frozenset({"complete", "done", "closed", "shipped"}),
    in_progress=frozenset({"in progress", "in review", "in qa", "dev", "review"}),
)
