"""
Tests for secure_config module

Tests ClickUpConfig validation and environment loading.
"""

import pytest

from clickup_dashboard.domain.tasks import DEFAULT_STATUSES
from clickup_dashboard.secure_config import ClickUpConfig, ConfigurationError, SecureConfig

CLICKUP_ENV_VARS = [
    "CLICKUP_API_TOKEN",
    "CLICKUP_TEAM_ID",
    "CLICKUP_FEATURES_LIST_ID",
    "CLICKUP_BUGS_LIST_ID",
    "CLICKUP_API_BASE_URL",
    "CLICKUP_DONE_STATUSES",
    "CLICKUP_IN_PROGRESS_STATUSES",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove ClickUp variables and disable .env loading"""
    for name in CLICKUP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("clickup_dashboard.secure_config.load_dotenv", lambda: None)
    return monkeypatch


class TestClickUpConfig:
    """Tests for ClickUpConfig validation"""

    def test_valid_config(self):
        config = ClickUpConfig(api_token="pk_12345_ABCDEF", team_id="9012345", features_list_id="901")

        assert config.bugs_list_id is None
        assert config.base_url == "https://api.clickup.com/api/v2"

    @pytest.mark.parametrize("token,team", [("", "9012345"), ("pk_12345_ABCDEF", "")])
    def test_missing_required_values(self, token, team):
        with pytest.raises(ConfigurationError, match="Missing CLICKUP_API_TOKEN or CLICKUP_TEAM_ID"):
            ClickUpConfig(api_token=token, team_id=team)

    @pytest.mark.parametrize("token", ["your_api_token_here", "XXXXXXXX", "replace_me"])
    def test_placeholder_token_rejected(self, token):
        with pytest.raises(ConfigurationError, match="placeholder"):
            ClickUpConfig(api_token=token, team_id="9012345")

    @pytest.mark.parametrize("token", ["pk_1234XXX9ABC", "pk_88_EXAMPLEDATA"])
    def test_token_containing_placeholder_text_accepted(self, token):
        assert ClickUpConfig(api_token=token, team_id="1").api_token == token

    def test_http_base_url_rejected(self):
        with pytest.raises(ConfigurationError, match="must use HTTPS"):
            ClickUpConfig(api_token="pk_1", team_id="9", base_url="http://api.clickup.com/api/v2")

    def test_invalid_list_id_rejected(self):
        with pytest.raises(ConfigurationError, match="CLICKUP_BUGS_LIST_ID contains invalid characters"):
            ClickUpConfig(api_token="pk_1", team_id="9", bugs_list_id="901/../team")


class TestSecureConfig:
    """Tests for SecureConfig environment loading"""

    def test_loads_from_environment(self, clean_env):
        clean_env.setenv("CLICKUP_API_TOKEN", "pk_12345_ABCDEF")
        clean_env.setenv("CLICKUP_TEAM_ID", "9012345")
        clean_env.setenv("CLICKUP_FEATURES_LIST_ID", "901")
        clean_env.setenv("CLICKUP_BUGS_LIST_ID", "902")

        config = SecureConfig().get_clickup_config()

        assert config.api_token == "pk_12345_ABCDEF"
        assert config.team_id == "9012345"
        assert config.features_list_id == "901"
        assert config.bugs_list_id == "902"

    def test_optional_lists_may_be_unset(self, clean_env):
        clean_env.setenv("CLICKUP_API_TOKEN", "pk_12345_ABCDEF")
        clean_env.setenv("CLICKUP_TEAM_ID", "9012345")
        clean_env.setenv("CLICKUP_BUGS_LIST_ID", "")

        config = SecureConfig().get_clickup_config()

        assert config.features_list_id is None
        assert config.bugs_list_id is None

    def test_missing_token_fails_fast(self, clean_env):
        clean_env.setenv("CLICKUP_TEAM_ID", "9012345")

        with pytest.raises(ConfigurationError):
            SecureConfig().get_clickup_config()

    def test_base_url_override(self, clean_env):
        clean_env.setenv("CLICKUP_API_TOKEN", "pk_1")
        clean_env.setenv("CLICKUP_TEAM_ID", "9")
        clean_env.setenv("CLICKUP_API_BASE_URL", "https://clickup.example.internal/api/v2/")

        assert SecureConfig().get_clickup_config().base_url == "https://clickup.example.internal/api/v2"

    def test_default_status_config(self, clean_env):
        assert SecureConfig().get_status_config() == DEFAULT_STATUSES

    def test_status_overrides(self, clean_env):
        clean_env.setenv("CLICKUP_DONE_STATUSES", "Released, Verified ,")
        clean_env.setenv("CLICKUP_IN_PROGRESS_STATUSES", "Building")

        statuses = SecureConfig().get_status_config()

        assert statuses.done == frozenset({"released", "verified"})
        assert statuses.in_progress == frozenset({"building"})
        assert statuses.deferred == "deferred"
