"""Operaciones de catálogo sobre la Web API de Spotify.

- `search_artist`: `GET /search?q=<name>&type=artist`.
- `related_artist`: `GET /artists/{id}/related-artists`.

Ambas heredan la semántica de fallo de `AuthenticatedClient.request`.
"""

from __future__ import annotations

from urllib.parse import quote

from adapters.spotify.auth import AuthenticatedClient
from core.domain.errors import CatalogError
from core.domain.models import RelatedResult, SearchResult
from core.domain.result import Result
from core.interfaces.catalog import ArtistCatalog


class SpotifyCatalog(ArtistCatalog):
    def __init__(self, client: AuthenticatedClient) -> None:
        self._client = client
        self._base_url = client.settings.api_base_url.rstrip("/")

    async def search_artist(self, name: str) -> Result[SearchResult, CatalogError]:
        return await self._client.request(
            f"{self._base_url}/search",
            SearchResult,
            params={"q": name, "type": "artist"},
        )

    async def related_artist(self, artist_id: str) -> Result[RelatedResult, CatalogError]:
        return await self._client.request(
            f"{self._base_url}/artists/{quote(artist_id, safe='')}/related-artists",
            RelatedResult,
        )
