"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic_settings import BaseSettings


class ColorScheme(str, Enum):
    """Preferred display color scheme."""
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class WidgetConfig(BaseSettings):
    """Configuration for the devfinder widget."""

    # GitHub API settings
    api_base_url: str = "https://api.github.com"
    user_agent: str = "devfinder/0.1"
    http_timeout_seconds: float | None = None

    # Display settings
    color_scheme: ColorScheme = ColorScheme.SYSTEM

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "DEVFINDER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
