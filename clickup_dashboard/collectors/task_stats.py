#!/usr/bin/env python3
"""
Task Statistics Aggregator

Computes delivery and bug metrics for the dashboard from feature and bug tasks:
- Features Shipped: Features moved to a done status within the window
- In Progress: Features currently in an in-progress status
- Tasks Closed: Features and bugs closed within the window
- Bug Flow: New, resolved, open and deferred bugs
- QA Pass Rate: Share of closed work that was features rather than bug fixes

All functions are pure: results depend only on the task collections, the
window cutoff and the status configuration.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime

from clickup_dashboard.domain.stats import RecentActivity, StatsSnapshot
from clickup_dashboard.domain.tasks import DEFAULT_STATUSES, StatusConfig, Task

RECENT_ACTIVITY_LIMIT = 5


def round_half_up(numerator: int, denominator: int) -> int:
    """
    Round numerator / denominator to the nearest integer, halves rounding up.

    Uses integer arithmetic so 12.5 always becomes 13 (Python's round() would
    give 12).

    Args:
        numerator: Non-negative dividend
        denominator: Positive divisor

    Returns:
        Rounded quotient

    Raises:
        ValueError: If denominator is not positive
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    return (2 * numerator + denominator) // (2 * denominator)


def closed_in_range(task: Task, since: datetime, statuses: StatusConfig = DEFAULT_STATUSES) -> bool:
    """Done and closed at or after the cutoff"""
    closed_at = task.closed_at
    return statuses.is_done(task) and closed_at is not None and closed_at >= since


def created_in_range(task: Task, since: datetime) -> bool:
    """Created at or after the cutoff (tasks without a creation date never match)"""
    return task.created_at is not None and task.created_at >= since


def calculate_qa_pass_rate(features_shipped: int, bugs_closed: int) -> int:
    """
    Calculate QA pass rate as a whole percentage.

    Pass rate = features shipped / (features shipped + bugs closed). A window
    with no closed work at all reports 100.

    Args:
        features_shipped: Features closed in the window
        bugs_closed: Bugs closed in the window

    Returns:
        Integer percentage in [0, 100]
    """
    total = features_shipped + bugs_closed
    if total == 0:
        return 100

    return round_half_up(100 * features_shipped, total)


def _count(tasks: Iterable[Task], predicate) -> int:
    return sum(1 for task in tasks if predicate(task))


def compute_stats(
    features: Sequence[Task],
    bugs: Sequence[Task],
    since: datetime,
    statuses: StatusConfig = DEFAULT_STATUSES,
) -> StatsSnapshot:
    """
    Compute the dashboard counters for one time window.

    Args:
        features: Tasks from the features list
        bugs: Tasks from the bugs list
        since: Window cutoff (timezone-aware)
        statuses: Status classification sets

    Returns:
        StatsSnapshot with all counts for the window

    Example:
        >>> snapshot = compute_stats(features, bugs, since=days_ago(7))
        >>> snapshot.features_shipped
        2
    """
    features_shipped = _count(features, lambda t: closed_in_range(t, since, statuses))
    bugs_resolved = _count(bugs, lambda t: closed_in_range(t, since, statuses))

    return StatsSnapshot(
        features_shipped=features_shipped,
        qa_pass_rate=calculate_qa_pass_rate(features_shipped, bugs_resolved),
        in_progress=_count(features, statuses.is_in_progress),
        open_bugs=_count(bugs, lambda t: not statuses.is_done(t)),
        tasks_closed=features_shipped + bugs_resolved,
        bugs_new=_count(bugs, lambda t: created_in_range(t, since)),
        bugs_resolved=bugs_resolved,
        bugs_deferred=_count(bugs, statuses.is_deferred),
    )


def recent_activity(
    features: Sequence[Task],
    bugs: Sequence[Task],
    statuses: StatusConfig = DEFAULT_STATUSES,
    limit: int = RECENT_ACTIVITY_LIMIT,
) -> list[RecentActivity]:
    """
    Most recently closed done tasks across both lists, newest first.

    Ties keep feature-then-bug upstream order (list.sort is stable).

    Args:
        features: Tasks from the features list
        bugs: Tasks from the bugs list
        statuses: Status classification sets
        limit: Maximum entries to return (default: 5)

    Returns:
        Up to `limit` RecentActivity entries
    """
    closed_tasks = [task for task in [*features, *bugs] if statuses.is_done(task) and task.closed_at is not None]
    closed_tasks.sort(key=lambda task: task.closed_at, reverse=True)  # type: ignore[arg-type,return-value]

    return [
        RecentActivity(title=task.name, status=task.status, closed_at=task.closed_at, url=task.url)  # type: ignore[arg-type]
        for task in closed_tasks[:limit]
    ]
