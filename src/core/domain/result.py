"""Resultado explícito `Ok | Err`.

Por qué un Result y no excepciones:
- Los fallos esperados (red, HTTP no-2xx, payload inválido, artista sin match)
  son parte del contrato de cada operación, no accidentes.
- El llamador decide cómo cortar el pipeline; nada se traga en silencio.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Valor exitoso."""

    value: T

    def is_ok(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Fallo esperado; `error` es una excepción usada como valor."""

    error: E

    def is_ok(self) -> bool:
        return False

    def map(self, fn: Callable[[object], object]) -> "Err[E]":
        return self

    def and_then(self, fn: Callable[[object], object]) -> "Err[E]":
        return self

    def unwrap(self) -> object:
        raise self.error


Result = Union[Ok[T], Err[E]]
