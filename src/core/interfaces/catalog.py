"""Contrato del catálogo de artistas.

Por qué Protocol:
- El orquestador depende de esta abstracción, no del adaptador de Spotify.
- En tests basta un objeto con los dos métodos async.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.errors import CatalogError
from core.domain.models import RelatedResult, SearchResult
from core.domain.result import Result


@runtime_checkable
class ArtistCatalog(Protocol):
    """Operaciones mínimas sobre un catálogo musical.

    Reglas de diseño:
    - Ambos métodos son asíncronos porque hacen I/O (HTTP).
    - Nunca lanzan por fallos esperados: devuelven `Err(CatalogError)`.
    """

    async def search_artist(self, name: str) -> Result[SearchResult, CatalogError]:
        ...

    async def related_artist(self, artist_id: str) -> Result[RelatedResult, CatalogError]:
        ...
