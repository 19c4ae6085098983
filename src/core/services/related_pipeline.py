"""Orquestación del flujo "artistas relacionados".

Credenciales -> cliente autenticado -> (búsqueda + relacionados) por artista
-> intersección -> texto final.

La traversal es todo-o-nada: el primer fallo corta el pipeline y no hay
resultados parciales. Nada de aquí imprime; eso es trabajo de la CLI.
"""

from __future__ import annotations

from typing import Sequence

import httpx

from adapters.spotify import SpotifyCatalog, create_client
from core.config import AppSettings
from core.domain.errors import ArtistLookupError, CatalogError
from core.domain.models import AggregatedReport, Artist, ArtistRelations, Credentials
from core.domain.result import Err, Ok, Result
from core.interfaces.catalog import ArtistCatalog
from core.logger import logger
from core.services.aggregation import aggregate


async def find_artist(catalog: ArtistCatalog, name: str) -> Result[Artist, CatalogError]:
    """Primer match de la búsqueda o `ArtistLookupError`."""

    found = await catalog.search_artist(name)
    if isinstance(found, Err):
        return found
    items = found.value.artists.items
    if not items:
        return Err(ArtistLookupError(name))
    return Ok(items[0])


async def fetch_relations(catalog: ArtistCatalog, artist: Artist) -> Result[ArtistRelations, CatalogError]:
    related = await catalog.related_artist(artist.id)
    if isinstance(related, Err):
        return related
    return Ok(
        ArtistRelations(
            artist=artist,
            related=[item.name for item in related.value.artists],
        )
    )


async def lookup_relations(
    catalog: ArtistCatalog,
    artist_names: Sequence[str],
) -> Result[list[ArtistRelations], CatalogError]:
    """Resuelve cada nombre en orden; corta en el primer error."""

    collected: list[ArtistRelations] = []
    for name in artist_names:
        artist = await find_artist(catalog, name)
        if isinstance(artist, Err):
            return artist
        relations = await fetch_relations(catalog, artist.value)
        if isinstance(relations, Err):
            return relations
        logger.info(
            "Resolved %r -> %s (%d related)",
            name,
            artist.value.id,
            len(relations.value.related),
        )
        collected.append(relations.value)
    return Ok(collected)


def format_report(report: AggregatedReport) -> str:
    names = " & ".join(report.artists)
    return f"Artists related to {names}: \n" + "\n".join(report.related)


async def run_pipeline(
    artist_names: Sequence[str],
    *,
    credentials: Credentials,
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Result[str, CatalogError]:
    """Ejecuta el flujo completo y devuelve el texto del reporte."""

    client = await create_client(credentials, settings=settings, transport=transport)
    if isinstance(client, Err):
        return client

    relations = await lookup_relations(SpotifyCatalog(client.value), artist_names)
    if isinstance(relations, Err):
        return relations

    return Ok(format_report(aggregate(relations.value)))
