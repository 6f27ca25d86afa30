"""Custom exception hierarchy for devfinder."""


class DevfinderError(Exception):
    """Base exception for all devfinder errors."""


class FetchError(DevfinderError):
    """Failed to fetch a profile."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ProfileNotFoundError(FetchError):
    """Profile does not exist."""


class ParseError(DevfinderError):
    """Failed to parse the API response."""
