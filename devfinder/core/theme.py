"""Light/dark display flag."""

import os

from devfinder.config import ColorScheme
from devfinder.logging import get_logger


# COLORFGBG background indices that terminals use for dark backgrounds
_DARK_BACKGROUNDS = {"0", "1", "2", "3", "4", "5", "6", "8"}


def detect_color_scheme(environ: dict[str, str] | None = None) -> ColorScheme:
    """
    Query the platform color-scheme preference.

    Reads the COLORFGBG convention ("fg;bg" or "fg;default;bg") set by most
    terminal emulators. Anything unrecognised counts as light.

    Args:
        environ: Environment mapping, uses os.environ if None

    Returns:
        ColorScheme.DARK or ColorScheme.LIGHT
    """
    environ = os.environ if environ is None else environ
    value = environ.get("COLORFGBG", "")
    if not value:
        return ColorScheme.LIGHT

    background = value.split(";")[-1].strip()
    if background in _DARK_BACKGROUNDS:
        return ColorScheme.DARK
    return ColorScheme.LIGHT


class Theme:
    """Display flag, independent of any lookup state."""

    def __init__(self, dark: bool = False):
        self._dark = dark

    @classmethod
    def from_preference(
        cls,
        preference: ColorScheme,
        environ: dict[str, str] | None = None,
    ) -> "Theme":
        """Seed from configuration, resolving SYSTEM through the platform query."""
        if preference == ColorScheme.SYSTEM:
            preference = detect_color_scheme(environ)
        return cls(dark=preference == ColorScheme.DARK)

    @property
    def dark(self) -> bool:
        return self._dark

    @property
    def mode(self) -> str:
        return "dark" if self._dark else "light"

    @property
    def toggle_label(self) -> str:
        """Label of the toggle button: names the mode it switches to."""
        return "LIGHT" if self._dark else "DARK"

    def toggle(self) -> bool:
        self._dark = not self._dark
        get_logger("theme").debug("theme_toggled", mode=self.mode)
        return self._dark
