"""
Dashboard statistics domain models

Represents the aggregated output written to the dashboard data file:
    - TimeWindow: Named cutoff defining "recent" activity
    - StatsSnapshot: Delivery and bug counts for one window
    - RecentActivity: One recently closed task
    - ReportDocument: The complete data.json document
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from clickup_dashboard.utils.datetime_utils import to_iso_timestamp


@dataclass(frozen=True)
class TimeWindow:
    """
    A named trailing time range.

    Attributes:
        name: Key used in the output "ranges" object (e.g., "7d")
        since: Cutoff timestamp; activity at or after it is "in range"
        label: Human-readable label for console output
    """

    name: str
    since: datetime
    label: str = ""


@dataclass
class StatsSnapshot:
    """
    Aggregated task counts for one time window.

    Attributes:
        features_shipped: Features closed in the window
        qa_pass_rate: Percentage of closed work that was features rather than bugs
        in_progress: Features currently in an in-progress status
        open_bugs: Bugs not in a done status
        tasks_closed: Features and bugs closed in the window
        bugs_new: Bugs created in the window
        bugs_resolved: Bugs closed in the window
        bugs_deferred: Bugs in the deferred status

    Example:
        snapshot = compute_stats(features, bugs, since=days_ago(7))
        print(f"Shipped {snapshot.features_shipped}, pass rate {snapshot.qa_pass_rate}%")
    """

    features_shipped: int = 0
    qa_pass_rate: int = 100
    in_progress: int = 0
    open_bugs: int = 0
    tasks_closed: int = 0
    bugs_new: int = 0
    bugs_resolved: int = 0
    bugs_deferred: int = 0

    def __post_init__(self) -> None:
        """
        Validate counts.

        Raises:
            ValueError: If any count is negative or the pass rate is outside 0-100
        """
        for name in (
            "features_shipped",
            "in_progress",
            "open_bugs",
            "tasks_closed",
            "bugs_new",
            "bugs_resolved",
            "bugs_deferred",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

        if not 0 <= self.qa_pass_rate <= 100:
            raise ValueError(f"qa_pass_rate must be between 0 and 100, got {self.qa_pass_rate}")

    def stats_dict(self) -> dict[str, int]:
        """Headline stats in dashboard key format"""
        return {
            "featuresShipped": self.features_shipped,
            "qaPassRate": self.qa_pass_rate,
            "inProgress": self.in_progress,
            "openBugs": self.open_bugs,
            "tasksClosed": self.tasks_closed,
        }

    def bugs_dict(self) -> dict[str, int]:
        """Bug breakdown in dashboard key format"""
        return {
            "newThisWeek": self.bugs_new,
            "resolved": self.bugs_resolved,
            "open": self.open_bugs,
            "deferred": self.bugs_deferred,
        }

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {"stats": self.stats_dict(), "bugs": self.bugs_dict()}


@dataclass(frozen=True)
class RecentActivity:
    """One recently closed task, reduced to what the dashboard shows."""

    title: str
    status: str
    closed_at: datetime
    url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "status": self.status,
            "closedAt": to_iso_timestamp(self.closed_at),
            "url": self.url,
        }


@dataclass
class ReportDocument:
    """
    The complete dashboard data document.

    Attributes:
        last_updated: When the report was generated
        ranges: Window name -> StatsSnapshot, in output order
        recent_activity: Most recently closed tasks (newest first)
        default_range: Window mirrored into the top-level "stats" and "bugs"
            keys for dashboards that predate "ranges"
    """

    last_updated: datetime
    ranges: dict[str, StatsSnapshot]
    recent_activity: list[RecentActivity] = field(default_factory=list)
    default_range: str = "7d"

    def __post_init__(self) -> None:
        """
        Validate the document.

        Raises:
            TypeError: If last_updated is not a datetime
            ValueError: If default_range is not one of the ranges
        """
        if not isinstance(self.last_updated, datetime):
            raise TypeError(f"last_updated must be datetime, got {type(self.last_updated)}")

        if self.default_range not in self.ranges:
            raise ValueError(f"default_range '{self.default_range}' not in ranges: {list(self.ranges)}")

    @property
    def default_snapshot(self) -> StatsSnapshot:
        return self.ranges[self.default_range]

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the data.json shape.

        Returns:
            Dictionary with lastUpdated, stats, bugs, ranges and recentActivity
        """
        return {
            "lastUpdated": to_iso_timestamp(self.last_updated),
            "stats": self.default_snapshot.stats_dict(),
            "bugs": self.default_snapshot.bugs_dict(),
            "ranges": {name: snapshot.to_dict() for name, snapshot in self.ranges.items()},
            "recentActivity": [activity.to_dict() for activity in self.recent_activity],
        }
