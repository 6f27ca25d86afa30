"""devfinder - GitHub profile lookup widget."""

from devfinder.models.profile import Profile, DEFAULT_PROFILE
from devfinder.models.state import FailureReason, Idle, Loading, Loaded, Failed, LookupState
from devfinder.models.view import ProfileView
from devfinder.config import WidgetConfig
from devfinder.core.widget import DevFinder
from devfinder.core.transformer import build_view, format_joined_date
from devfinder.core.exporter import to_json, to_dict, save_json, load_json

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "DevFinder",
    "WidgetConfig",
    # Models
    "Profile",
    "DEFAULT_PROFILE",
    "ProfileView",
    "FailureReason",
    "Idle",
    "Loading",
    "Loaded",
    "Failed",
    "LookupState",
    # Presentation
    "build_view",
    "format_joined_date",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "load_json",
    "__version__",
]
