"""httpx-based fetcher for GitHub user profiles."""

from typing import Any

import httpx

from devfinder.config import WidgetConfig
from devfinder.exceptions import FetchError, ProfileNotFoundError
from devfinder.logging import get_logger, printable


def build_client(
    config: WidgetConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create an AsyncClient with the headers GitHub expects.

    Args:
        config: WidgetConfig instance, uses defaults if None
        transport: Optional transport override (used by tests)

    Returns:
        Configured httpx.AsyncClient; the caller owns closing it
    """
    config = config or WidgetConfig()
    return httpx.AsyncClient(
        base_url=config.api_base_url,
        # None disables every timeout: the request waits for the network layer
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers={
            "Accept": "application/vnd.github+json",
            "User-Agent": config.user_agent,
        },
        follow_redirects=True,
        transport=transport,
    )


async def fetch_user(client: httpx.AsyncClient, handle: str) -> dict[str, Any]:
    """
    Fetch the raw GitHub user payload for a handle.

    The handle is placed in the path as given.

    Args:
        client: Client created by build_client
        handle: GitHub login

    Returns:
        Decoded JSON body

    Raises:
        ProfileNotFoundError: On HTTP 404
        FetchError: On any other non-2xx status, transport error, a handle that
            cannot be placed in a URL, or a non-JSON body
    """
    url = f"/users/{handle}"
    get_logger("fetcher").debug("fetch_request", url=printable(url))

    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        raise FetchError(f"Transport error: {e}") from e
    except (httpx.InvalidURL, UnicodeError) as e:
        # control characters and lone surrogates cannot form a request path
        raise FetchError(f"Invalid handle for a request path: {e}") from e

    status = response.status_code
    if status == 404:
        raise ProfileNotFoundError(f"User {handle} not found", status_code=status)
    if not response.is_success:
        raise FetchError(f"HTTP {status}", status_code=status)

    try:
        return response.json()
    except ValueError as e:
        raise FetchError(f"Malformed response body: {e}", status_code=status) from e
