"""Shared pytest fixtures: isolated settings and a fake Spotify backend."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import Credentials

TOKEN_HOST = "accounts.spotify.com"


class FakeSpotify:
    """Router for `httpx.MockTransport` emulating the token and catalog endpoints."""

    def __init__(
        self,
        *,
        searches: dict[str, list[dict[str, Any]]] | None = None,
        related: dict[str, list[str]] | None = None,
        token_status: int = 200,
        token_body: Any = None,
    ) -> None:
        self.searches = searches or {}
        self.related = related or {}
        self.token_status = token_status
        self.token_body = token_body if token_body is not None else {
            "access_token": "test-token",
            "token_type": "Bearer",
            "expires_in": 3600,
        }
        self.requests: list[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def catalog_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host != TOKEN_HOST]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.host == TOKEN_HOST:
            return httpx.Response(self.token_status, json=self.token_body)

        if request.headers.get("Authorization") != "Bearer test-token":
            return httpx.Response(401, json={"error": {"status": 401, "message": "Invalid access token"}})

        path = request.url.path
        if path == "/v1/search":
            name = request.url.params.get("q", "")
            items = self.searches.get(name, [])
            return httpx.Response(200, json={"artists": {"href": str(request.url), "items": items}})

        if path.startswith("/v1/artists/") and path.endswith("/related-artists"):
            artist_id = path.split("/")[3]
            names = self.related.get(artist_id)
            if names is None:
                return httpx.Response(404, json={"error": {"status": 404, "message": "non existing id"}})
            artists = [{"name": n, "id": f"id-{n}", "popularity": 50} for n in names]
            return httpx.Response(200, json={"artists": artists})

        return httpx.Response(404, json={"error": {"status": 404, "message": "Service not found"}})


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    """Settings that ignore the developer's environment and .env files."""

    for key in ("RELATED_ARTISTS_CLIENT_ID", "RELATED_ARTISTS_CLIENT_SECRET", "RELATED_ARTISTS_CREDENTIALS_FILE"):
        monkeypatch.delenv(key, raising=False)
    return AppSettings(_env_file=None, credentials_file=tmp_path / "env.json")


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(client_id="my-client", client_secret="my-secret")


@pytest.fixture
def fake_spotify() -> Callable[..., FakeSpotify]:
    return FakeSpotify


@pytest.fixture
def two_artist_backend(fake_spotify: Callable[..., FakeSpotify]) -> FakeSpotify:
    """Artist A relates to X, Y, Z; Artist B relates to Y, Z, W."""

    return fake_spotify(
        searches={
            "Artist A": [{"name": "Artist A", "id": "a1"}, {"name": "Artist A (tribute)", "id": "a2"}],
            "Artist B": [{"name": "Artist B", "id": "b1"}],
        },
        related={
            "a1": ["X", "Y", "Z"],
            "b1": ["Y", "Z", "W"],
        },
    )
