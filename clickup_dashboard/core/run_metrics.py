"""
Run Performance Tracking Module

Provides performance and health tracking for a dashboard update run:
    - RunMetricsTracker: Tracks metrics for a single run
    - track_run_metrics(): Context manager for automatic tracking
    - get_current_tracker(): Access tracker from REST client
"""

import time
from collections.abc import Generator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any

from clickup_dashboard.core.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

# Global tracker instance for REST client access
_current_tracker: "RunMetricsTracker | None" = None


class RunMetricsTracker:
    """
    Tracks performance and health metrics for a single run.

    Attributes:
        run_name: Name of the run (e.g., "dashboard_update")
        start_time: Timestamp when tracker was started (None before start())
        execution_time_ms: Total execution time in milliseconds
        success: Whether the run completed without errors
        task_count: Number of tasks fetched across all lists
        api_call_count: Number of API requests made
        error_message: Error text if failed (None if successful)
        error_type: Exception class name if failed (None if successful)

    Example:
        >>> tracker = RunMetricsTracker("dashboard_update")
        >>> tracker.start()
        >>> tracker.record_api_call()  # Called automatically by REST client
        >>> tracker.end(success=True)
        >>> tracker.api_call_count
        1
    """

    def __init__(self, run_name: str):
        self.run_name = run_name
        self.start_time: float | None = None
        self.execution_time_ms: float = 0
        self.success: bool = False
        self.task_count: int = 0
        self.api_call_count: int = 0
        self.error_message: str | None = None
        self.error_type: str | None = None

    def start(self) -> None:
        """Start tracking execution time."""
        self.start_time = time.time()
        logger.debug(f"Started tracking: {self.run_name}")

    def end(self, success: bool, error: Exception | None = None) -> None:
        """
        End tracking and calculate execution time.

        Args:
            success: Whether the run completed successfully
            error: Exception if failed (None if successful)
        """
        if self.start_time is not None:
            self.execution_time_ms = (time.time() - self.start_time) * 1000

        self.success = success

        if error:
            self.error_message = str(error)
            self.error_type = type(error).__name__

    def record_api_call(self) -> None:
        """Record an API call. Called by the REST client for each request."""
        self.api_call_count += 1

    def to_dict(self) -> dict[str, Any]:
        """
        Convert metrics to dictionary for logging.

        Returns:
            Dictionary with all metric fields
        """
        return {
            "timestamp": datetime.now(UTC).isoformat(),
            "run_name": self.run_name,
            "execution_time_ms": round(self.execution_time_ms, 2),
            "success": self.success,
            "task_count": self.task_count,
            "api_call_count": self.api_call_count,
            "error_message": self.error_message,
            "error_type": self.error_type,
        }


def get_current_tracker() -> "RunMetricsTracker | None":
    """
    Get the currently active tracker (for REST client use).

    Returns:
        Active tracker or None if no run is being tracked
    """
    return _current_tracker


@contextmanager
def track_run_metrics(run_name: str) -> Generator["RunMetricsTracker", None, None]:
    """
    Context manager for automatic run performance tracking.

    Tracks execution time, success/failure state and API calls (via REST
    client integration). Exceptions are logged and re-raised.

    Args:
        run_name: Name of the run (e.g., "dashboard_update")

    Yields:
        RunMetricsTracker instance for manual updates (e.g., task_count)

    Example:
        >>> async def run():
        ...     with track_run_metrics("dashboard_update") as tracker:
        ...         features, bugs = await asyncio.gather(...)
        ...         tracker.task_count = len(features) + len(bugs)
    """
    global _current_tracker

    tracker = RunMetricsTracker(run_name)
    _current_tracker = tracker
    tracker.start()

    try:
        yield tracker
        tracker.end(success=True)
        log_with_context(logger, "info", "Run completed successfully", **tracker.to_dict())

    except Exception as e:
        tracker.end(success=False, error=e)
        log_with_context(logger, "error", "Run failed", **tracker.to_dict())
        raise

    finally:
        _current_tracker = None
