"""
Core Infrastructure - Logging and Run Metrics

Usage:
    from clickup_dashboard.core import get_logger, track_run_metrics

    logger = get_logger(__name__)

    with track_run_metrics("dashboard_update") as tracker:
        ...
"""

from clickup_dashboard.core.logging_config import get_logger, log_with_context, setup_logging
from clickup_dashboard.core.run_metrics import RunMetricsTracker, get_current_tracker, track_run_metrics

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "log_with_context",
    # Run metrics
    "RunMetricsTracker",
    "get_current_tracker",
    "track_run_metrics",
]
