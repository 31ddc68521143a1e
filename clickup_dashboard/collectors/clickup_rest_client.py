"""
ClickUp REST API Client

Provides direct REST API access to ClickUp API v2.
Uses AsyncSecureHTTPClient for HTTP/2, SSL enforcement and timeouts.

Usage:
    from clickup_dashboard.collectors.clickup_rest_client import ClickUpRESTClient

    client = ClickUpRESTClient(api_token=config.api_token)

    features, bugs = await asyncio.gather(
        client.get_list_tasks(config.features_list_id),
        client.get_list_tasks(config.bugs_list_id),
    )

API Documentation:
    https://clickup.com/api/clickupreference/operation/GetTasks/
"""

from typing import Any
from urllib.parse import urlencode

from clickup_dashboard.async_http_client import AsyncSecureHTTPClient
from clickup_dashboard.collectors.clickup_transformers import TaskTransformer
from clickup_dashboard.core.logging_config import get_logger, log_with_context
from clickup_dashboard.core.run_metrics import get_current_tracker
from clickup_dashboard.domain.tasks import Task
from clickup_dashboard.secure_config import DEFAULT_BASE_URL

logger = get_logger(__name__)


class ClickUpAuthenticationError(ValueError):
    """Raised before any request when the API token is missing."""

    pass


class ClickUpAPIError(Exception):
    """
    Raised when ClickUp responds with a non-success status.

    Attributes:
        path: Requested API path (e.g., "/list/901/task")
        status_code: HTTP status code
        body: Raw response body, for diagnosis
    """

    def __init__(self, path: str, status_code: int, body: str):
        self.path = path
        self.status_code = status_code
        self.body = body
        super().__init__(f"ClickUp API {path} → {status_code}: {body}")


class ClickUpRESTClient:
    """
    ClickUp REST API v2 client using direct HTTP calls.

    Features:
    - Async HTTP/2 requests (lists can be fetched concurrently)
    - Personal API token authentication
    - Errors carry path, status code and response body

    No retries and no caching: each call is exactly one request.
    """

    def __init__(self, api_token: str, base_url: str = DEFAULT_BASE_URL):
        """
        Initialize ClickUp REST client.

        Args:
            api_token: ClickUp personal API token
            base_url: API base URL (default: https://api.clickup.com/api/v2)

        Raises:
            ClickUpAuthenticationError: If api_token is empty
        """
        if not api_token:
            raise ClickUpAuthenticationError("api_token is required")

        self.base_url = base_url.rstrip("/")
        self.auth_header = self._build_auth_header(api_token)

    def _build_auth_header(self, api_token: str) -> dict[str, str]:
        """
        Build authentication headers.

        ClickUp personal tokens are sent as-is in the Authorization header.

        Args:
            api_token: Personal API token

        Returns:
            Dictionary with Authorization and Accept headers
        """
        return {
            "Authorization": api_token,
            "Accept": "application/json",
        }

    def _build_url(self, path: str, **params: Any) -> str:
        """
        Build ClickUp REST API URL with query parameters.

        Args:
            path: Resource path starting with "/" (e.g., "/list/901/task")
            **params: Query parameters (None values are filtered out)

        Returns:
            Complete API URL with query string

        Example:
            _build_url("/list/901/task", include_closed="true")
            -> "https://api.clickup.com/api/v2/list/901/task?include_closed=true"
        """
        url = f"{self.base_url}{path}"

        filtered_params = {k: v for k, v in params.items() if v is not None}
        if filtered_params:
            url = f"{url}?{urlencode(filtered_params)}"

        return url

    async def _get(self, path: str, **params: Any) -> dict[str, Any]:
        """
        Execute one authenticated GET request.

        Args:
            path: Resource path
            **params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            ClickUpAPIError: On any non-2xx response
            httpx.RequestError: On network errors or timeouts
        """
        url = self._build_url(path, **params)

        tracker = get_current_tracker()
        if tracker:
            tracker.record_api_call()

        async with AsyncSecureHTTPClient() as client:
            response = await client.get(url, headers=self.auth_header)

        if not response.is_success:
            logger.error(f"ClickUp API error (HTTP {response.status_code}) for {path}: {response.text}")
            raise ClickUpAPIError(path=path, status_code=response.status_code, body=response.text)

        return response.json()  # type: ignore[no-any-return]

    async def get_list_tasks(self, list_id: str | None, **extra_params: Any) -> list[Task]:
        """
        Get all tasks in a list, including closed ones.

        REST Endpoint: GET {base}/list/{list_id}/task?include_closed=true

        Args:
            list_id: ClickUp list ID; None or "" returns [] without a request
            **extra_params: Additional query parameters (e.g., subtasks="true")

        Returns:
            Task models in the order ClickUp returned them

        Example:
            bugs = await client.get_list_tasks("901234567")
        """
        if not list_id:
            logger.debug("List ID not configured, skipping fetch")
            return []

        params: dict[str, Any] = {"include_closed": "true", **extra_params}
        data = await self._get(f"/list/{list_id}/task", **params)
        tasks = TaskTransformer.transform_tasks_response(data)

        log_with_context(
            logger, "info", f"Fetched {len(tasks)} tasks from list {list_id}", list_id=list_id, task_count=len(tasks)
        )
        return tasks
