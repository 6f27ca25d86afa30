"""Unit tests for configuration management."""

from devfinder.config import WidgetConfig, ColorScheme, LogFormat


class TestWidgetConfigDefaults:
    """Test default configuration values."""

    def test_default_api_base_url(self):
        config = WidgetConfig()
        assert config.api_base_url == "https://api.github.com"

    def test_default_no_timeout(self):
        config = WidgetConfig()
        assert config.http_timeout_seconds is None

    def test_default_color_scheme(self):
        config = WidgetConfig()
        assert config.color_scheme == ColorScheme.SYSTEM

    def test_default_log_format(self):
        config = WidgetConfig()
        assert config.log_format == LogFormat.CONSOLE

    def test_default_user_agent_is_set(self):
        config = WidgetConfig()
        assert config.user_agent


class TestWidgetConfigEnvVars:
    """Test configuration from environment variables."""

    def test_color_scheme_from_env(self, monkeypatch):
        monkeypatch.setenv("DEVFINDER_COLOR_SCHEME", "dark")
        config = WidgetConfig()
        assert config.color_scheme == ColorScheme.DARK

    def test_timeout_from_env(self, monkeypatch):
        monkeypatch.setenv("DEVFINDER_HTTP_TIMEOUT_SECONDS", "2.5")
        config = WidgetConfig()
        assert config.http_timeout_seconds == 2.5

    def test_api_base_url_from_env(self, monkeypatch):
        monkeypatch.setenv("DEVFINDER_API_BASE_URL", "https://ghe.example.com/api/v3")
        config = WidgetConfig()
        assert config.api_base_url == "https://ghe.example.com/api/v3"

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("DEVFINDER_LOG_LEVEL", "DEBUG")
        config = WidgetConfig()
        assert config.log_level == "DEBUG"

    def test_log_format_from_env(self, monkeypatch):
        monkeypatch.setenv("DEVFINDER_LOG_FORMAT", "json")
        config = WidgetConfig()
        assert config.log_format == LogFormat.JSON


class TestColorSchemeEnum:
    """Test ColorScheme enum values."""

    def test_color_schemes(self):
        assert ColorScheme.LIGHT.value == "light"
        assert ColorScheme.DARK.value == "dark"
        assert ColorScheme.SYSTEM.value == "system"
