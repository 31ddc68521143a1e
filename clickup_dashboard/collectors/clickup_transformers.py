"""
ClickUp REST API Response Transformers

Converts raw ClickUp task JSON into Task domain models so the aggregator
never has to deal with duck-typed, partially missing fields.

Usage:
    from clickup_dashboard.collectors.clickup_transformers import TaskTransformer

    # REST API returns:
    rest_response = {"tasks": [{"id": "86b1x2", "name": "...", "status": {"status": "done"}, ...}]}

    tasks = TaskTransformer.transform_tasks_response(rest_response)
    # Result: [Task(id="86b1x2", ...)]
"""

from datetime import datetime
from typing import Any

from clickup_dashboard.core.logging_config import get_logger
from clickup_dashboard.domain.tasks import Closed, Open, Task
from clickup_dashboard.utils.datetime_utils import parse_epoch_millis
from clickup_dashboard.utils.error_handling import log_and_return_default

logger = get_logger(__name__)


class TaskTransformer:
    """
    Transform ClickUp task REST responses to Task domain models.

    Handles:
    - Epoch-millisecond string timestamps
    - Missing status objects
    - Missing or malformed closure dates (task treated as open)
    """

    @staticmethod
    def _parse_timestamp(raw_task: dict[str, Any], field_name: str) -> datetime | None:
        try:
            return parse_epoch_millis(raw_task.get(field_name))
        except ValueError as e:
            return log_and_return_default(
                logger,
                e,
                context={"task_id": raw_task.get("id"), "field": field_name, "value": raw_task.get(field_name)},
                default_value=None,
                error_type="Task timestamp parsing",
            )

    @staticmethod
    def transform_task(raw_task: dict[str, Any]) -> Task:
        """
        Transform a single ClickUp task to a Task.

        REST Task:
        {
            "id": "86b1x2",
            "name": "Export invoices to CSV",
            "status": {"status": "done", "type": "closed"},
            "date_created": "1769904000000",
            "date_closed": "1770595200000",
            "url": "https://app.clickup.com/t/86b1x2"
        }

        Args:
            raw_task: Raw task dict from the "tasks" array

        Returns:
            Task domain model
        """
        status_obj = raw_task.get("status") or {}
        status = status_obj.get("status") if isinstance(status_obj, dict) else None

        closed_at = TaskTransformer._parse_timestamp(raw_task, "date_closed")

        return Task(
            id=str(raw_task.get("id", "")),
            name=raw_task.get("name") or "",
            status=status or "",
            created_at=TaskTransformer._parse_timestamp(raw_task, "date_created"),
            closure=Closed(at=closed_at) if closed_at else Open(),
            url=raw_task.get("url"),
        )

    @staticmethod
    def transform_tasks_response(rest_response: dict[str, Any]) -> list[Task]:
        """
        Transform a list-tasks REST response to Task models.

        Args:
            rest_response: Raw REST API response dict ({"tasks": [...]})

        Returns:
            List of Task models in upstream order ([] if "tasks" is missing)
        """
        return [TaskTransformer.transform_task(raw_task) for raw_task in rest_response.get("tasks") or []]
