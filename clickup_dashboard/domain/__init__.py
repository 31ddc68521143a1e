"""
Domain Models - Type-safe data structures for dashboard metrics

This package contains dataclasses representing business domain concepts:
    - tasks: Task, Open, Closed, StatusConfig
    - stats: TimeWindow, StatsSnapshot, RecentActivity, ReportDocument

Usage:
    from clickup_dashboard.domain.tasks import Task, DEFAULT_STATUSES

    if DEFAULT_STATUSES.is_done(task):
        print(f"{task.name} is done")
"""

from .stats import RecentActivity, ReportDocument, StatsSnapshot, TimeWindow
from .tasks import DEFAULT_STATUSES, Closed, Closure, Open, StatusConfig, Task

__all__ = [
    # Tasks
    "Task",
    "Open",
    "Closed",
    "Closure",
    "StatusConfig",
    "DEFAULT_STATUSES",
    # Stats
    "TimeWindow",
    "StatsSnapshot",
    "RecentActivity",
    "ReportDocument",
]
