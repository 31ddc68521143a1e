#!/usr/bin/env python3
"""
Error Handling Utility Module

Provides reusable error handling patterns with structured, contextual logging,
so item-level failures are recorded instead of silently swallowed.
"""

import logging
from typing import Any


def log_and_return_default(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    default_value: Any = None,
    error_type: str = "Operation",
) -> Any:
    """
    Log an error and return a default value (for functions that need to return something).

    Use this for expected, item-level failures that should not abort the run
    (e.g., one task with a malformed timestamp).

    Args:
        logger: Logger instance
        error: The caught exception
        context: Structured data about what failed
        default_value: Value to return on error (None, [], {}, etc.)
        error_type: Human-readable description

    Returns:
        default_value

    Example:
        try:
            closed_at = parse_epoch_millis(raw.get("date_closed"))
        except ValueError as e:
            closed_at = log_and_return_default(
                logger, e,
                context={"task_id": raw.get("id")},
                default_value=None,
                error_type="Closure date parsing"
            )
    """
    logger.warning(
        f"{error_type} failed, returning default value: {error}",
        extra={
            "error_type": error_type,
            "exception_class": error.__class__.__name__,
            "context": context,
            "default_value": str(default_value),
        },
    )
    return default_value
