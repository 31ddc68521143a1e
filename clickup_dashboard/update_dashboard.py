#!/usr/bin/env python3
"""
ClickUp Dashboard Data Updater

Runs every morning on a schedule. Reads feature and bug tasks from ClickUp,
aggregates them over five trailing windows and writes data.json for the
static CEO dashboard.

Required environment (or .env):
    CLICKUP_API_TOKEN         - Personal API token (Settings -> Apps -> API Token)
    CLICKUP_TEAM_ID           - Workspace ID (shown in the ClickUp URL)
    CLICKUP_FEATURES_LIST_ID  - List ID for features / dev tasks
    CLICKUP_BUGS_LIST_ID      - List ID for bugs

Usage:
    update-dashboard
    update-dashboard --output site/data.json --log-level DEBUG
    python -m clickup_dashboard.update_dashboard
"""

import argparse
import asyncio
import sys
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from clickup_dashboard.collectors.clickup_rest_client import ClickUpRESTClient
from clickup_dashboard.collectors.task_stats import compute_stats, recent_activity
from clickup_dashboard.core.logging_config import get_logger, setup_logging
from clickup_dashboard.core.run_metrics import track_run_metrics
from clickup_dashboard.domain.stats import ReportDocument, TimeWindow
from clickup_dashboard.domain.tasks import DEFAULT_STATUSES, StatusConfig, Task
from clickup_dashboard.secure_config import ClickUpConfig, ConfigurationError, get_config
from clickup_dashboard.utils.datetime_utils import days_ago, start_of_year
from clickup_dashboard.utils_atomic_json import atomic_json_save

logger = get_logger(__name__)

# Relative to the working directory (the dashboard repo root when run by the scheduler)
DEFAULT_OUTPUT_FILE = Path("data.json")

# (name, trailing days, label) - None means year-to-date
WINDOW_DEFINITIONS: list[tuple[str, int | None, str]] = [
    ("today", 1, "Today"),
    ("7d", 7, "Last 7 days"),
    ("30d", 30, "Last 30 days"),
    ("90d", 90, "Last 90 days"),
    ("ytd", None, "Year to date"),
]
DEFAULT_WINDOW = "7d"


def build_time_windows(now: datetime) -> list[TimeWindow]:
    """
    Build the five reporting windows ending at `now`.

    Args:
        now: Reference time (timezone-aware; YTD starts at January 1st in its timezone)

    Returns:
        TimeWindows in output order: today, 7d, 30d, 90d, ytd
    """
    windows = []
    for name, days, label in WINDOW_DEFINITIONS:
        since = start_of_year(now) if days is None else days_ago(days, now)
        windows.append(TimeWindow(name=name, since=since, label=label))
    return windows


def build_report(
    features: Sequence[Task],
    bugs: Sequence[Task],
    now: datetime,
    statuses: StatusConfig = DEFAULT_STATUSES,
) -> ReportDocument:
    """
    Aggregate both task lists into the dashboard document.

    Args:
        features: Tasks from the features list
        bugs: Tasks from the bugs list
        now: Report time (drives every window cutoff and lastUpdated)
        statuses: Status classification sets

    Returns:
        ReportDocument with one StatsSnapshot per window
    """
    ranges = {window.name: compute_stats(features, bugs, window.since, statuses) for window in build_time_windows(now)}

    return ReportDocument(
        last_updated=now,
        ranges=ranges,
        recent_activity=recent_activity(features, bugs, statuses),
        default_range=DEFAULT_WINDOW,
    )


def save_report(report: ReportDocument, output_file: Path) -> None:
    """
    Write the report, replacing any previous file in full.

    Raises:
        OSError: If the file cannot be written (previous file left untouched)
    """
    atomic_json_save(report.to_dict(), str(output_file))
    logger.info(f"Dashboard data saved to: {output_file}")


def print_summary(report: ReportDocument, output_file: Path) -> None:
    """Print one line per window to stdout"""
    labels = {name: label for name, _, label in WINDOW_DEFINITIONS}

    print(f"\n[OK] {output_file.name} updated:")
    for name, snapshot in report.ranges.items():
        print(
            f"  {labels.get(name, name):<13}: "
            f"shipped={snapshot.features_shipped}  "
            f"in_progress={snapshot.in_progress}  "
            f"closed={snapshot.tasks_closed}  "
            f"open_bugs={snapshot.open_bugs}  "
            f"new_bugs={snapshot.bugs_new}  "
            f"qa_pass_rate={snapshot.qa_pass_rate}%"
        )


async def run(
    config: ClickUpConfig,
    output_file: Path = DEFAULT_OUTPUT_FILE,
    statuses: StatusConfig = DEFAULT_STATUSES,
    now: datetime | None = None,
) -> ReportDocument:
    """
    Fetch, aggregate and persist one dashboard update.

    Both lists are fetched concurrently; the first failure aborts the run
    before anything is written.

    Args:
        config: Validated ClickUp configuration
        output_file: Where to write data.json
        statuses: Status classification sets
        now: Report time (default: current local time)

    Returns:
        The ReportDocument that was written

    Raises:
        ClickUpAPIError: If ClickUp returns a non-success response
        OSError: If the output file cannot be written
    """
    with track_run_metrics("dashboard_update") as tracker:
        print("Fetching ClickUp data...")
        client = ClickUpRESTClient(api_token=config.api_token, base_url=config.base_url)

        features, bugs = await asyncio.gather(
            client.get_list_tasks(config.features_list_id),
            client.get_list_tasks(config.bugs_list_id),
        )
        tracker.task_count = len(features) + len(bugs)

        report = build_report(features, bugs, now or datetime.now().astimezone(), statuses)
        save_report(report, output_file)
        print_summary(report, output_file)
        return report


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Update the CEO dashboard data file from ClickUp")
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_FILE,
        help=f"Output JSON file (default: {DEFAULT_OUTPUT_FILE} in the current directory)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: INFO)",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit structured JSON logs")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write JSON logs to this file")
    return parser.parse_args(argv)


async def main(argv: Sequence[str] | None = None) -> int:
    """
    Command-line entry point.

    Returns:
        Exit code: 0 on success, 1 on configuration error or any failure
    """
    args = parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file, json_output=args.json_logs)

    try:
        config = get_config()
        clickup_config = config.get_clickup_config()
        statuses = config.get_status_config()
    except ConfigurationError as e:
        logger.error(f"Configuration invalid: {e}")
        print(f"[ERROR] {e}. Check GitHub Secrets or .env.", file=sys.stderr)
        return 1

    try:
        await run(clickup_config, args.output, statuses)
    except Exception as e:
        logger.error(
            f"Dashboard update failed: {e}",
            exc_info=True,
            extra={"exception_class": e.__class__.__name__, "output_file": str(args.output)},
        )
        print(f"[ERROR] Update failed: {e}", file=sys.stderr)
        return 1

    return 0


def cli() -> None:
    """Console script entry point"""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
