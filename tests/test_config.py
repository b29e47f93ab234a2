"""Unit tests for settings and the user .env writer."""

from core.config import AppSettings, get_user_config_dir, write_user_env_vars
from core.services.token_provider import SettingsTokenProvider


class TestAppSettings:
    def test_reads_prefixed_env(self, monkeypatch) -> None:
        monkeypatch.setenv("SLACK_CLI_API_TOKEN", "xoxb-env")
        monkeypatch.setenv("SLACK_CLI_HTTP_TIMEOUT_SECONDS", "3.5")

        settings = AppSettings()

        assert settings.api_token == "xoxb-env"
        assert settings.http_timeout_seconds == 3.5

    def test_token_provider_reads_settings(self) -> None:
        provider = SettingsTokenProvider(AppSettings(api_token="cfgtok"))

        assert provider.get_configured_token() == "cfgtok"

    def test_token_provider_empty_when_unset(self) -> None:
        assert SettingsTokenProvider(AppSettings(api_token="")).get_configured_token() == ""


class TestUserEnv:
    def test_config_dir_honours_xdg(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_user_config_dir() == tmp_path / "slack-cli"

    def test_write_merges_existing_values(self, tmp_path) -> None:
        env_path = tmp_path / "cfg" / ".env"
        env_path.parent.mkdir()
        env_path.write_text("# old\nSLACK_CLI_API_BASE_URL='https://old.test/api'\nOTHER=1\n", encoding="utf-8")

        written = write_user_env_vars({"SLACK_CLI_API_TOKEN": "xoxb-new"}, env_path=env_path)

        assert written == env_path
        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert lines[1:] == [
            "OTHER=1",
            "SLACK_CLI_API_BASE_URL=https://old.test/api",
            "SLACK_CLI_API_TOKEN=xoxb-new",
        ]
