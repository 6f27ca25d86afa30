"""FastAPI rendering surface for the devfinder widget."""

from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException, Query, Request, Response, status
from pydantic import BaseModel, Field

from devfinder import DevFinder, WidgetConfig, __version__
from devfinder.core.exporter import state_to_dict
from devfinder.core.transformer import format_joined_date, parse_timestamp


class SearchRequest(BaseModel):
    """Request body for a lookup."""

    handle: str = Field(..., description="GitHub username to look up")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


class ThemeResponse(BaseModel):
    """Current display theme."""

    dark: bool = Field(..., description="True when the dark theme is active")
    mode: str = Field(..., description="'dark' or 'light'")
    toggle_label: str = Field(
        ...,
        description="Label for the toggle control: the mode it switches to.",
    )


class FormattedDateResponse(BaseModel):
    """Joined-date formatting result."""

    value: str
    formatted: str


def _finder(request: Request) -> DevFinder:
    return request.app.state.finder


def _theme_payload(finder: DevFinder) -> ThemeResponse:
    return ThemeResponse(
        dark=finder.theme.dark,
        mode=finder.theme.mode,
        toggle_label=finder.theme.toggle_label,
    )


def _state_payload(finder: DevFinder) -> dict:
    payload = state_to_dict(finder.state)
    payload["theme"] = _theme_payload(finder).model_dump()
    return payload


def create_app(finder: DevFinder | None = None) -> FastAPI:
    """
    Build the API around one widget root.

    Args:
        finder: Widget to serve, a default-configured DevFinder if None
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage widget lifecycle."""
        widget = finder or DevFinder(WidgetConfig())
        async with widget:
            app.state.finder = widget
            yield

    app = FastAPI(
        title="devfinder API",
        description="GitHub profile lookup widget",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check():
        """Check API health status."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now().isoformat(),
        )

    @app.get("/api/state", tags=["Widget"])
    async def get_state(request: Request):
        """Current lookup state, display view and theme."""
        return _state_payload(_finder(request))

    @app.post("/api/search", tags=["Widget"])
    async def search(
        body: SearchRequest,
        request: Request,
        response: Response,
        wait: bool = Query(False, description="Wait for the lookup to settle"),
    ):
        """
        Submit a handle.

        Returns immediately with the Loading state; poll /api/state for the
        outcome, or pass wait=true to get the settled state. A blank handle
        changes nothing.
        """
        finder = _finder(request)
        task = finder.submit(body.handle)
        if task is None:
            response.status_code = status.HTTP_200_OK
        elif wait:
            await task
            response.status_code = status.HTTP_200_OK
        else:
            response.status_code = status.HTTP_202_ACCEPTED
        return _state_payload(finder)

    @app.post("/api/theme/toggle", response_model=ThemeResponse, tags=["Widget"])
    async def toggle_theme(request: Request):
        """Flip between light and dark."""
        finder = _finder(request)
        finder.toggle_theme()
        return _theme_payload(finder)

    @app.get("/api/format-date", response_model=FormattedDateResponse, tags=["Widget"])
    async def format_date(
        value: str = Query(..., description="ISO 8601 timestamp, e.g. 2011-01-25T18:44:36Z"),
    ):
        """Format a timestamp the way the profile card shows it."""
        if parse_timestamp(value) is None:
            raise HTTPException(status_code=422, detail=f"Not an ISO 8601 timestamp: {value}")
        return FormattedDateResponse(value=value, formatted=format_joined_date(value))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
