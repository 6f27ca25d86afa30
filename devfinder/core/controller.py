"""Lookup controller - turns a submitted handle into store transitions."""

import asyncio

import httpx

from devfinder.core.fetcher import fetch_user
from devfinder.core.store import ProfileStore
from devfinder.core.transformer import transform_profile
from devfinder.exceptions import FetchError, ParseError, ProfileNotFoundError
from devfinder.logging import get_logger, printable
from devfinder.models.state import FailureReason, LookupState


class LookupController:
    """
    Issues one profile request per accepted submission.

    There is no cancellation and no request ordering: when lookups overlap,
    whichever response arrives last is the one left in the store.
    """

    def __init__(self, store: ProfileStore, client: httpx.AsyncClient):
        self._store = store
        self._client = client
        self._pending: set[asyncio.Task] = set()
        self._log = get_logger("controller")

    @property
    def busy(self) -> bool:
        return self._store.busy

    @property
    def pending(self) -> int:
        return len(self._pending)

    def submit(self, handle: str) -> asyncio.Task | None:
        """
        Fire-and-forget lookup. Must be called from a running event loop.

        Args:
            handle: Raw text from the search box

        Returns:
            The scheduled task, or None when the handle is blank
        """
        if not self._accept(handle):
            return None

        self._store.begin(handle)
        task = asyncio.get_running_loop().create_task(self._resolve(handle))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def lookup(self, handle: str) -> LookupState:
        """
        Awaitable lookup with the same semantics as submit.

        Returns:
            The state after the lookup, or the unchanged state for a blank handle
        """
        if not self._accept(handle):
            return self._store.state

        self._store.begin(handle)
        return await self._resolve(handle)

    async def drain(self) -> None:
        """Wait for every scheduled lookup to settle."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _accept(self, handle: str) -> bool:
        # whitespace only decides emptiness, the handle itself is sent untouched
        if not (handle or "").strip():
            self._log.debug("lookup_ignored", reason="blank handle")
            return False
        return True

    async def _resolve(self, handle: str) -> LookupState:
        log = self._log.bind(handle=printable(handle))
        log.info("lookup_start")

        try:
            raw = await fetch_user(self._client, handle)
            profile = transform_profile(raw)
        except ProfileNotFoundError:
            log.info("lookup_not_found")
            return self._store.fail(FailureReason.NOT_FOUND, handle)
        except (FetchError, ParseError) as e:
            log.warning("lookup_failed", error=printable(str(e)))
            return self._store.fail(FailureReason.OTHER, handle)

        log.info("lookup_complete", login=profile.handle)
        return self._store.succeed(profile)
