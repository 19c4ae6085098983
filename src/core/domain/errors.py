"""Taxonomía de errores del catálogo.

Por qué excepciones como valores:
- Se devuelven dentro de `Err(...)`, no se lanzan: el pipeline corta en el
  primer fallo y la CLI imprime `str(error)`.
- Heredar de `Exception` conserva mensaje, causa y `unwrap()` sigue siendo útil
  en tests.
"""

from __future__ import annotations

from typing import Sequence


class CatalogError(Exception):
    """Base de todos los fallos esperados del pipeline."""


class TransportError(CatalogError):
    """Fallo de red/HTTP (incluye respuestas no-2xx y cuerpos no-JSON)."""

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code

    @classmethod
    def from_exception(cls, exc: BaseException, *, status_code: int | None = None) -> "TransportError":
        message = str(exc).strip() or exc.__class__.__name__
        return cls(message, cause=exc, status_code=status_code)


class SchemaValidationError(CatalogError):
    """El payload no tiene la forma declarada.

    `paths` lista cada campo violado (clave con puntos, índices incluidos).
    """

    def __init__(self, paths: Sequence[str], reasons: Sequence[str] | None = None) -> None:
        self.paths: tuple[str, ...] = tuple(paths)
        self.reasons: tuple[str, ...] = tuple(reasons or ())
        lines = []
        for index, path in enumerate(self.paths):
            reason = self.reasons[index] if index < len(self.reasons) else ""
            lines.append(f"{path}: {reason}" if reason else path)
        super().__init__("\n".join(lines))


class ArtistLookupError(CatalogError, LookupError):
    """La búsqueda no devolvió ningún artista."""

    def __init__(self, artist_name: str) -> None:
        super().__init__(f"No matching artist found for: {artist_name}")
        self.artist_name = artist_name
