"""Lookup state variants."""

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel

from devfinder.models.profile import Profile


class FailureReason(str, Enum):
    """Why a lookup failed."""
    NOT_FOUND = "not_found"
    OTHER = "other"


NOT_FOUND_MESSAGE = "User not found"
OTHER_ERROR_MESSAGE = "Error fetching user"


class Idle(BaseModel, frozen=True):
    """No lookup has produced anything to show."""

    status: Literal["idle"] = "idle"

    @property
    def profile(self) -> Profile | None:
        return None

    @property
    def error(self) -> str | None:
        return None


class Loading(BaseModel, frozen=True):
    """A lookup is in flight."""

    status: Literal["loading"] = "loading"
    handle: str

    @property
    def profile(self) -> Profile | None:
        return None

    @property
    def error(self) -> str | None:
        return None


class Loaded(BaseModel, frozen=True):
    """A profile is displayed."""

    status: Literal["loaded"] = "loaded"
    profile: Profile

    @property
    def error(self) -> str | None:
        return None


class Failed(BaseModel, frozen=True):
    """The most recent lookup failed."""

    status: Literal["failed"] = "failed"
    reason: FailureReason
    message: str
    handle: str | None = None

    @property
    def profile(self) -> Profile | None:
        return None

    @property
    def error(self) -> str | None:
        return self.message

    @classmethod
    def not_found(cls, handle: str | None = None) -> "Failed":
        return cls(reason=FailureReason.NOT_FOUND, message=NOT_FOUND_MESSAGE, handle=handle)

    @classmethod
    def other(cls, handle: str | None = None) -> "Failed":
        return cls(reason=FailureReason.OTHER, message=OTHER_ERROR_MESSAGE, handle=handle)


LookupState = Union[Idle, Loading, Loaded, Failed]
