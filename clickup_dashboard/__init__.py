"""
ClickUp Dashboard Updater - Execution Layer

Fetches ClickUp tasks, aggregates delivery and bug metrics, and writes the
data file consumed by the static CEO dashboard.

Package Structure:
    - core: Infrastructure (logging, run metrics)
    - domain: Domain models (Task, StatsSnapshot, ReportDocument)
    - collectors: ClickUp REST client, transformers, aggregation
    - utils: Datetime and error handling helpers
"""

__version__ = "1.0.0"
