"""Pydantic models for devfinder."""

from devfinder.models.profile import Profile, DEFAULT_PROFILE
from devfinder.models.state import (
    FailureReason,
    Idle,
    Loading,
    Loaded,
    Failed,
    LookupState,
)
from devfinder.models.view import ContactEntry, ProfileView

__all__ = [
    "Profile",
    "DEFAULT_PROFILE",
    "FailureReason",
    "Idle",
    "Loading",
    "Loaded",
    "Failed",
    "LookupState",
    "ContactEntry",
    "ProfileView",
]
