"""
Tests for ClickUp REST API Response Transformers

Run with:
    pytest tests/collectors/test_clickup_transformers.py -v
"""

import logging
from datetime import timedelta

from clickup_dashboard.collectors.clickup_transformers import TaskTransformer
from clickup_dashboard.domain.tasks import Closed, Open


class TestTransformTask:
    """Tests for TaskTransformer.transform_task"""

    def test_closed_task(self, raw_closed_task, now):
        task = TaskTransformer.transform_task(raw_closed_task)

        assert task.id == "86b1x2"
        assert task.name == "Export invoices to CSV"
        assert task.status == "done"
        assert task.created_at == now - timedelta(days=10)
        assert task.closure == Closed(at=now - timedelta(days=2))
        assert task.url == "https://app.clickup.com/t/86b1x2"

    def test_open_task(self, raw_open_task):
        task = TaskTransformer.transform_task(raw_open_task)

        assert task.closure == Open()
        assert task.closed_at is None
        assert task.status == "New"

    def test_missing_fields_use_defaults(self):
        task = TaskTransformer.transform_task({"id": 42})

        assert task.id == "42"
        assert task.name == ""
        assert task.status == ""
        assert task.created_at is None
        assert task.closure == Open()
        assert task.url is None

    def test_null_status_object(self, raw_open_task):
        raw_open_task["status"] = None

        assert TaskTransformer.transform_task(raw_open_task).status == ""

    def test_malformed_closure_date_treated_as_open(self, raw_closed_task, caplog):
        raw_closed_task["date_closed"] = "yesterday"

        with caplog.at_level(logging.WARNING):
            task = TaskTransformer.transform_task(raw_closed_task)

        assert task.closure == Open()
        assert "Task timestamp parsing failed" in caplog.text

    def test_malformed_creation_date_is_none(self, raw_open_task):
        raw_open_task["date_created"] = "not-a-number"

        assert TaskTransformer.transform_task(raw_open_task).created_at is None


class TestTransformTasksResponse:
    """Tests for TaskTransformer.transform_tasks_response"""

    def test_preserves_upstream_order(self, raw_closed_task, raw_open_task):
        tasks = TaskTransformer.transform_tasks_response({"tasks": [raw_open_task, raw_closed_task]})

        assert [task.id for task in tasks] == ["86b1x3", "86b1x2"]

    def test_missing_tasks_key(self):
        assert TaskTransformer.transform_tasks_response({}) == []

    def test_null_tasks(self):
        assert TaskTransformer.transform_tasks_response({"tasks": None}) == []
