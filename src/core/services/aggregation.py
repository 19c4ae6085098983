"""Agregación de listas de artistas relacionados.

Funciones puras: mismo input, mismo output, sin efectos.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.domain.models import AggregatedReport, ArtistRelations


def dedupe(values: Iterable[str]) -> list[str]:
    """Quita duplicados conservando la primera aparición."""

    seen: set[str] = set()
    out: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        out.append(value)
    return out


def intersect_related(lists: Sequence[Sequence[str]]) -> list[str]:
    """Nombres presentes en todas las listas.

    Se parte de la concatenación de todas las listas y se intersecta con cada
    una por pertenencia, de modo que el orden es el de la primera aparición en
    la concatenación. Sin listas el resultado es vacío.
    """

    working: list[str] = [name for names in lists for name in names]
    for names in lists:
        members = set(names)
        working = dedupe(name for name in working if name in members)
    return working


def aggregate(relations: Sequence[ArtistRelations]) -> AggregatedReport:
    return AggregatedReport(
        artists=[item.artist.name for item in relations],
        related=intersect_related([item.related for item in relations]),
    )
