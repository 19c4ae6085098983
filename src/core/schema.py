"""Validación declarativa de payloads JSON.

Por qué Pydantic como motor:
- Una forma declarada (primitivas + combinadores) se convierte en un valor
  tipado o en una lista de rutas violadas, sin escribir decoders a mano.
- `TypeAdapter` acepta tanto modelos como tipos compuestos (`list[...]`).

Reglas:
- `string` y `number` son estrictos: "3600" no es un número.
- Los campos desconocidos se ignoran; el input nunca se modifica.
- Cada ruta violada aparece una vez (claves e índices unidos con puntos).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictStr, TypeAdapter, ValidationError, create_model

from core.domain.errors import SchemaValidationError
from core.domain.result import Err, Ok, Result

T = TypeVar("T")

ROOT_PATH = "<root>"

string = StrictStr
number = StrictFloat


def array_of(item: Any) -> Any:
    """Array cuyos elementos cumplen `item`."""

    return list[item]


def object_of(model_name: str, /, **fields: Any) -> type[BaseModel]:
    """Objeto con campos tipados (todos requeridos).

    `model_name` es posicional: cualquier clave (incluida `name`) es un campo.

    Ejemplo::

        artist = object_of("Artist", name=string, id=string)
        page = object_of("Page", items=array_of(artist))
    """

    definitions: dict[str, Any] = {key: (shape, ...) for key, shape in fields.items()}
    return create_model(model_name, __config__=ConfigDict(extra="ignore"), **definitions)


@lru_cache(maxsize=None)
def _adapter(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


def format_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or ROOT_PATH


def to_schema_error(exc: ValidationError) -> SchemaValidationError:
    paths: list[str] = []
    reasons: list[str] = []
    for error in exc.errors(include_url=False):
        path = format_path(tuple(error.get("loc", ())))
        if path in paths:
            continue
        paths.append(path)
        reasons.append(str(error.get("msg", "")))
    return SchemaValidationError(paths, reasons)


def validate(schema: type[T] | Any, raw: object) -> Result[T, SchemaValidationError]:
    """Valida `raw` contra `schema` y devuelve `Ok(valor)` o `Err(SchemaValidationError)`."""

    try:
        value = _adapter(schema).validate_python(raw)
    except ValidationError as exc:
        return Err(to_schema_error(exc))
    return Ok(value)
