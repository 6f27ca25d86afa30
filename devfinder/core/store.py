"""Profile store - the single owner of the current lookup state."""

from collections.abc import Callable

from devfinder.models.profile import Profile, DEFAULT_PROFILE
from devfinder.models.state import (
    Failed,
    FailureReason,
    Idle,
    Loaded,
    Loading,
    LookupState,
)


StateListener = Callable[[LookupState], None]


class ProfileStore:
    """
    Holds exactly one LookupState and notifies listeners on every transition.

    Example:
        store = ProfileStore()
        store.subscribe(lambda state: print(state.status))
        store.begin("torvalds")
    """

    def __init__(self, initial: LookupState | None = None):
        """
        Initialize store.

        Args:
            initial: Starting state, defaults to Loaded(DEFAULT_PROFILE)
        """
        self._state: LookupState = initial if initial is not None else Loaded(profile=DEFAULT_PROFILE)
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> LookupState:
        return self._state

    @property
    def busy(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def profile(self) -> Profile | None:
        return self._state.profile

    @property
    def error(self) -> str | None:
        return self._state.error

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def begin(self, handle: str) -> LookupState:
        """Enter Loading, dropping any displayed profile or error."""
        return self._set(Loading(handle=handle))

    def succeed(self, profile: Profile) -> LookupState:
        return self._set(Loaded(profile=profile))

    def fail(self, reason: FailureReason, handle: str | None = None) -> LookupState:
        if reason == FailureReason.NOT_FOUND:
            return self._set(Failed.not_found(handle))
        return self._set(Failed.other(handle))

    def reset(self) -> LookupState:
        return self._set(Idle())

    def _set(self, state: LookupState) -> LookupState:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
        return state
