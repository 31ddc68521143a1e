"""
Secure Configuration Management

Provides centralized, validated configuration for the dashboard updater.
Replaces scattered os.getenv() calls with strict validation and fail-fast behavior.

Usage:
    from clickup_dashboard.secure_config import get_config

    config = get_config()
    clickup_config = config.get_clickup_config()
    statuses = config.get_status_config()

Environment:
    CLICKUP_API_TOKEN             - Personal API token (required)
    CLICKUP_TEAM_ID               - Workspace ID (required)
    CLICKUP_FEATURES_LIST_ID      - List ID for features / dev tasks (optional)
    CLICKUP_BUGS_LIST_ID          - List ID for bugs (optional)
    CLICKUP_API_BASE_URL          - API base URL (optional, HTTPS only)
    CLICKUP_DONE_STATUSES         - Comma-separated done statuses (optional)
    CLICKUP_IN_PROGRESS_STATUSES  - Comma-separated in-progress statuses (optional)

Raises:
    ConfigurationError: If configuration is missing or invalid
"""

import os
import re
from dataclasses import dataclass

from dotenv import load_dotenv

from clickup_dashboard.domain.tasks import DEFAULT_STATUSES, StatusConfig

DEFAULT_BASE_URL = "https://api.clickup.com/api/v2"


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


@dataclass(frozen=True)
class ClickUpConfig:
    """
    Validated ClickUp configuration.

    Built once at startup and passed explicitly into the REST client.
    """

    api_token: str
    team_id: str
    features_list_id: str | None = None
    bugs_list_id: str | None = None
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """
        Validate ClickUp configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.api_token or not self.team_id:
            raise ConfigurationError("Missing CLICKUP_API_TOKEN or CLICKUP_TEAM_ID")

        # Placeholder values, matched as a token prefix
        placeholders = ("your_token", "your_api_token", "example", "placeholder", "xxx", "replace_me")
        if self.api_token.lower().startswith(placeholders):
            raise ConfigurationError(
                "CLICKUP_API_TOKEN contains a placeholder value - please set a real API token"
            )

        if not self.base_url.startswith("https://"):
            raise ConfigurationError(f"CLICKUP_API_BASE_URL must use HTTPS: {self.base_url}")

        for name, list_id in (
            ("CLICKUP_FEATURES_LIST_ID", self.features_list_id),
            ("CLICKUP_BUGS_LIST_ID", self.bugs_list_id),
        ):
            if list_id and not re.match(r"^[A-Za-z0-9_\-]+$", list_id):
                raise ConfigurationError(f"{name} contains invalid characters: {list_id}")


def _parse_status_list(raw: str | None) -> frozenset[str] | None:
    """Split a comma-separated status list, or None when unset."""
    if not raw:
        return None
    statuses = frozenset(part.strip().lower() for part in raw.split(",") if part.strip())
    return statuses or None


class SecureConfig:
    """
    Centralized secure configuration manager.

    Loads and validates configuration from environment variables.
    Provides fail-fast behavior to catch configuration issues before any network call.
    """

    def __init__(self):
        """Initialize configuration (loads .env file)."""
        load_dotenv()

    def get_clickup_config(self) -> ClickUpConfig:
        """
        Get validated ClickUp configuration.

        Returns:
            ClickUpConfig: Validated configuration

        Raises:
            ConfigurationError: If configuration is missing or invalid
        """
        return ClickUpConfig(
            api_token=os.getenv("CLICKUP_API_TOKEN") or "",
            team_id=os.getenv("CLICKUP_TEAM_ID") or "",
            features_list_id=os.getenv("CLICKUP_FEATURES_LIST_ID") or None,
            bugs_list_id=os.getenv("CLICKUP_BUGS_LIST_ID") or None,
            base_url=(os.getenv("CLICKUP_API_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        )

    def get_status_config(self) -> StatusConfig:
        """
        Get status classification sets, with optional environment overrides.

        Returns:
            StatusConfig: Immutable done / in-progress status sets
        """
        done = _parse_status_list(os.getenv("CLICKUP_DONE_STATUSES"))
        in_progress = _parse_status_list(os.getenv("CLICKUP_IN_PROGRESS_STATUSES"))

        return StatusConfig(
            done=done if done is not None else DEFAULT_STATUSES.done,
            in_progress=in_progress if in_progress is not None else DEFAULT_STATUSES.in_progress,
            deferred=DEFAULT_STATUSES.deferred,
        )


# Convenience function for getting configuration
_config_instance = None


def get_config() -> SecureConfig:
    """
    Get the global configuration instance (singleton pattern).

    Returns:
        SecureConfig: The configuration manager
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = SecureConfig()
    return _config_instance
