"""
Data Collectors - Fetch and aggregate tasks from ClickUp

This package contains:
    - clickup_rest_client: Async REST client for the ClickUp API v2
    - clickup_transformers: Raw task JSON -> Task domain models
    - task_stats: Time-windowed delivery and bug statistics

Collectors run once per scheduled job and feed the dashboard data file.
"""

__all__ = []
