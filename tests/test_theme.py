"""Unit tests for the display theme."""

import pytest

from devfinder.config import ColorScheme
from devfinder.core.store import ProfileStore
from devfinder.core.theme import Theme, detect_color_scheme


class TestDetectColorScheme:
    """Test the COLORFGBG query."""

    @pytest.mark.parametrize("value", ["15;0", "15;default;0", "7;8", "15;4"])
    def test_dark_backgrounds(self, value: str):
        assert detect_color_scheme({"COLORFGBG": value}) == ColorScheme.DARK

    @pytest.mark.parametrize("value", ["0;15", "0;default;15", "0;7", "garbage"])
    def test_light_backgrounds(self, value: str):
        assert detect_color_scheme({"COLORFGBG": value}) == ColorScheme.LIGHT

    def test_unset_is_light(self):
        assert detect_color_scheme({}) == ColorScheme.LIGHT


class TestThemeSeeding:
    """Test startup seeding from the preference."""

    def test_explicit_dark(self):
        assert Theme.from_preference(ColorScheme.DARK, {}).dark is True

    def test_explicit_light_ignores_platform(self):
        theme = Theme.from_preference(ColorScheme.LIGHT, {"COLORFGBG": "15;0"})
        assert theme.dark is False

    def test_system_uses_platform(self):
        theme = Theme.from_preference(ColorScheme.SYSTEM, {"COLORFGBG": "15;0"})
        assert theme.dark is True


class TestThemeToggle:
    """Test toggling."""

    def test_toggle_flips(self):
        theme = Theme(dark=False)
        assert theme.toggle() is True
        assert theme.mode == "dark"

    def test_toggle_twice_restores(self):
        for start in (True, False):
            theme = Theme(dark=start)
            theme.toggle()
            theme.toggle()
            assert theme.dark is start

    def test_toggle_label_names_target_mode(self):
        assert Theme(dark=True).toggle_label == "LIGHT"
        assert Theme(dark=False).toggle_label == "DARK"

    def test_independent_of_lookup_state(self):
        store = ProfileStore()
        theme = Theme(dark=False)
        before = store.state

        theme.toggle()
        store.begin("octocat")
        theme.toggle()

        assert theme.dark is False
        assert store.state.status == "loading"
        assert before.status == "loaded"
