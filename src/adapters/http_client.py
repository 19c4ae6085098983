"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y logging de todas las peticiones.
- Convierte cualquier fallo (red, timeout, no-2xx, cuerpo no-JSON) en
  `Err(TransportError)`: las funciones de aquí nunca lanzan.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

El cuerpo devuelto es JSON decodificado *sin validar*; la validación de forma
es cosa de `core.schema`.
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from core.config import AppSettings
from core.domain.errors import TransportError
from core.domain.result import Err, Ok, Result
from core.logger import logger


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def _send(
    method: str,
    url: str,
    *,
    headers: Mapping[str, str] | None,
    params: Mapping[str, str] | None = None,
    data: Mapping[str, str] | None = None,
    settings: AppSettings | None,
    transport: httpx.AsyncBaseTransport | None,
) -> Result[Any, TransportError]:
    status_code: int | None = None
    try:
        async with build_async_client(settings, transport=transport) as client:
            response = await client.request(
                method,
                url,
                headers=dict(headers or {}),
                params=dict(params) if params else None,
                data=dict(data) if data else None,
            )
            status_code = response.status_code
            logger.debug("%s %s -> HTTP %s", method, response.request.url, status_code)
            response.raise_for_status()
            return Ok(response.json())
    except httpx.HTTPStatusError as exc:
        response = exc.response
        logger.debug("%s %s rejected: HTTP %s", method, url, response.status_code)
        message = f"HTTP {response.status_code} {response.reason_phrase} for url {exc.request.url}"
        return Err(TransportError(message, cause=exc, status_code=response.status_code))
    except Exception as exc:
        logger.debug("%s %s failed: %s", method, url, exc.__class__.__name__)
        return Err(TransportError.from_exception(exc, status_code=status_code))


async def http_get(
    url: str,
    *,
    headers: Mapping[str, str] | None = None,
    params: Mapping[str, str] | None = None,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Result[Any, TransportError]:
    """GET que devuelve el JSON crudo o `TransportError`."""

    return await _send(
        "GET",
        url,
        headers=headers,
        params=params,
        settings=settings,
        transport=transport,
    )


async def http_post(
    url: str,
    *,
    data: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Result[Any, TransportError]:
    """POST con cuerpo form-urlencoded que devuelve el JSON crudo o `TransportError`."""

    return await _send(
        "POST",
        url,
        headers=headers,
        data=data,
        settings=settings,
        transport=transport,
    )
