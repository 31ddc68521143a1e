"""
Pytest configuration and shared fixtures

Provides common test fixtures for domain models, raw ClickUp payloads and
the aggregation scenarios.
"""

from datetime import UTC, datetime, timedelta

import pytest

from clickup_dashboard.domain.tasks import Closed, Open, Task


def epoch_millis(value: datetime) -> str:
    """ClickUp-style string timestamp for a datetime"""
    return str(int(value.timestamp() * 1000))


# ===== Time Fixtures =====


@pytest.fixture
def now():
    """Provide a consistent, timezone-aware report time"""
    return datetime(2026, 2, 10, 12, 0, 0, tzinfo=UTC)


# ===== Domain Model Fixtures =====


@pytest.fixture
def make_task(now):
    """Factory for Task models; closed_days_ago=None means open"""

    def _make_task(
        status: str,
        closed_days_ago: float | None = None,
        created_days_ago: float = 30,
        name: str = "Sample task",
        task_id: str = "t1",
    ) -> Task:
        closure = Open() if closed_days_ago is None else Closed(at=now - timedelta(days=closed_days_ago))
        return Task(
            id=task_id,
            name=name,
            status=status,
            created_at=now - timedelta(days=created_days_ago),
            closure=closure,
            url=f"https://app.clickup.com/t/{task_id}",
        )

    return _make_task


@pytest.fixture
def scenario_features(make_task):
    """Two done features closed 2 days ago, one in progress"""
    return [
        make_task("done", closed_days_ago=2, name="Invoice export", task_id="f1"),
        make_task("Done", closed_days_ago=2, name="Bulk scheduling", task_id="f2"),
        make_task("in progress", name="Crew mobile app", task_id="f3"),
    ]


@pytest.fixture
def scenario_bugs(make_task):
    """One bug closed 1 day ago, one new open bug"""
    return [
        make_task("closed", closed_days_ago=1, created_days_ago=3, name="Login timeout", task_id="b1"),
        make_task("new", created_days_ago=2, name="Broken PDF footer", task_id="b2"),
    ]


# ===== Raw ClickUp Payload Fixtures =====


@pytest.fixture
def raw_closed_task(now):
    """Raw ClickUp task JSON for a closed feature"""
    return {
        "id": "86b1x2",
        "name": "Export invoices to CSV",
        "status": {"status": "done", "type": "closed"},
        "date_created": epoch_millis(now - timedelta(days=10)),
        "date_closed": epoch_millis(now - timedelta(days=2)),
        "url": "https://app.clickup.com/t/86b1x2",
    }


@pytest.fixture
def raw_open_task(now):
    """Raw ClickUp task JSON for an open bug"""
    return {
        "id": "86b1x3",
        "name": "Crash on empty estimate",
        "status": {"status": "New", "type": "open"},
        "date_created": epoch_millis(now - timedelta(days=1)),
        "date_closed": None,
        "url": "https://app.clickup.com/t/86b1x3",
    }
