"""Widget root - owns config, HTTP client, store, controller and theme."""

import asyncio

import httpx

from devfinder.config import WidgetConfig
from devfinder.core.controller import LookupController
from devfinder.core.fetcher import build_client
from devfinder.core.store import ProfileStore
from devfinder.core.theme import Theme
from devfinder.core.transformer import build_view
from devfinder.logging import get_logger, configure_logging
from devfinder.models.state import LookupState
from devfinder.models.view import ProfileView


class DevFinder:
    """
    High-level profile lookup widget.

    Example:
        async with DevFinder() as finder:
            state = await finder.lookup("octocat")
            print(finder.view.name)
    """

    def __init__(
        self,
        config: WidgetConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        environ: dict[str, str] | None = None,
    ):
        """
        Initialize widget with optional configuration.

        Args:
            config: WidgetConfig instance, uses defaults if None
            transport: Optional httpx transport, used by tests
            environ: Environment used for the color-scheme query, os.environ if None
        """
        self.config = config or WidgetConfig()
        self.store = ProfileStore()
        self.theme = Theme.from_preference(self.config.color_scheme, environ)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._controller: LookupController | None = None

    async def __aenter__(self) -> "DevFinder":
        """Async context manager entry - open the HTTP client."""
        configure_logging(self.config)
        self._log = get_logger("widget")
        self._client = build_client(self.config, transport=self._transport)
        self._controller = LookupController(self.store, self._client)
        self._log.debug("widget_opened", theme=self.theme.mode)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - settle lookups and close the client."""
        if self._controller:
            await self._controller.drain()
        if self._client:
            await self._client.aclose()
        self._client = None
        self._controller = None

    @property
    def controller(self) -> LookupController:
        if self._controller is None:
            raise RuntimeError("DevFinder must be used as an async context manager")
        return self._controller

    @property
    def state(self) -> LookupState:
        return self.store.state

    @property
    def busy(self) -> bool:
        return self.store.busy

    @property
    def view(self) -> ProfileView | None:
        """Display view of the current profile, None when nothing is shown."""
        profile = self.store.profile
        return build_view(profile) if profile else None

    def submit(self, handle: str) -> asyncio.Task | None:
        return self.controller.submit(handle)

    async def lookup(self, handle: str) -> LookupState:
        return await self.controller.lookup(handle)

    def toggle_theme(self) -> bool:
        return self.theme.toggle()
