"""Export utilities for profiles and lookup state."""

import json
from pathlib import Path

from devfinder.core.transformer import build_view
from devfinder.models.profile import Profile
from devfinder.models.state import LookupState


def to_json(profile: Profile, indent: int = 2) -> str:
    """
    Convert Profile to JSON string.

    Args:
        profile: Profile to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return profile.model_dump_json(indent=indent)


def to_dict(profile: Profile) -> dict:
    """Convert Profile to a JSON-compatible dictionary."""
    return profile.model_dump(mode="json")


def state_to_dict(state: LookupState) -> dict:
    """
    Convert a LookupState into the payload renderers consume.

    Includes the derived display view whenever a profile is shown.
    """
    profile = state.profile
    return {
        "status": state.status,
        "error": state.error,
        "busy": state.status == "loading",
        "profile": to_dict(profile) if profile else None,
        "view": build_view(profile).model_dump(mode="json") if profile else None,
    }


def save_json(
    profile: Profile,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save Profile to JSON file.

    Args:
        profile: Profile to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(profile, indent=indent), encoding="utf-8")
    return path


def load_json(filepath: str | Path) -> Profile:
    """Load Profile from a JSON file written by save_json."""
    path = Path(filepath)
    return Profile.model_validate_json(path.read_text(encoding="utf-8"))


def dump_state(state: LookupState, indent: int = 2) -> str:
    """Serialize a LookupState payload as JSON text."""
    return json.dumps(state_to_dict(state), indent=indent)
