"""Shared fixtures - a fake GitHub API served through httpx.MockTransport."""

import json
from dataclasses import dataclass, field
from pathlib import Path

import httpx
import pytest
import structlog


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_payload(name: str) -> dict:
    """Load a GitHub user payload fixture."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


@dataclass
class FakeGitHub:
    """Answers GET /users/{handle} from a canned table; unknown handles 404."""

    responses: dict[str, httpx.Response | Exception] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handle = request.url.path.rsplit("/", 1)[-1]
        outcome = self.responses.get(handle)
        if outcome is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def github() -> FakeGitHub:
    """Fake API knowing octocat, ghost-dev, a 500 and a broken body."""
    return FakeGitHub(
        responses={
            "octocat": httpx.Response(200, json=load_payload("octocat")),
            "ghost-dev": httpx.Response(200, json=load_payload("nameless")),
            "boom": httpx.Response(500, json={"message": "Server Error"}),
            "limited": httpx.Response(403, json={"message": "API rate limit exceeded"}),
            "garbled": httpx.Response(200, text="<html>not json</html>"),
            "listy": httpx.Response(200, json=[{"login": "octocat"}]),
            "offline": httpx.ConnectError("Connection refused"),
        }
    )


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Loggers bound to a closed capture stream must not leak between tests."""
    yield
    structlog.reset_defaults()
