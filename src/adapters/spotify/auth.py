"""Cliente autenticado de Spotify (flujo client_credentials).

Implementación:
- `base64("{client_id}:{client_secret}")` como `Authorization: Basic`.
- POST form-urlencoded `grant_type=client_credentials` al endpoint de token.
- La respuesta se valida contra `AccessToken` antes de usarla.

Notas:
- Un solo intento: sin reintentos ni refresh del token.
- Un fallo de red/HTTP en el intercambio sale tal cual (`TransportError`);
  un token mal formado sale como `SchemaValidationError`.
"""

from __future__ import annotations

import base64
from typing import Any, Mapping, TypeVar

import httpx

from adapters.http_client import http_get, http_post
from core.config import AppSettings
from core.domain.errors import CatalogError
from core.domain.models import AccessToken, Credentials
from core.domain.result import Err, Ok, Result
from core.logger import logger
from core.schema import validate

T = TypeVar("T")


def encode_basic_credentials(credentials: Credentials) -> str:
    raw = f"{credentials.client_id}:{credentials.client_secret.get_secret_value()}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


class AuthenticatedClient:
    """GETs autenticados con Bearer cuyo cuerpo pasa siempre por el validador."""

    def __init__(
        self,
        token: AccessToken,
        *,
        settings: AppSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._settings = settings
        self._transport = transport

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token.access_token}"}

    async def request(
        self,
        uri: str,
        schema: type[T] | Any,
        *,
        params: Mapping[str, str] | None = None,
    ) -> Result[T, CatalogError]:
        raw = await http_get(
            uri,
            headers=self._auth_headers(),
            params=params,
            settings=self._settings,
            transport=self._transport,
        )
        if isinstance(raw, Err):
            return raw
        return validate(schema, raw.value)


async def fetch_access_token(
    credentials: Credentials,
    *,
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Result[AccessToken, CatalogError]:
    logger.debug("Requesting access token from %s", settings.token_url)
    raw = await http_post(
        settings.token_url,
        data={"grant_type": "client_credentials"},
        headers={
            "Authorization": f"Basic {encode_basic_credentials(credentials)}",
            "Content-Type": "application/x-www-form-urlencoded",
        },
        settings=settings,
        transport=transport,
    )
    if isinstance(raw, Err):
        return raw
    return validate(AccessToken, raw.value)


async def create_client(
    credentials: Credentials,
    *,
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Result[AuthenticatedClient, CatalogError]:
    """Intercambia credenciales por un token y devuelve el cliente autenticado."""

    token = await fetch_access_token(credentials, settings=settings, transport=transport)
    if isinstance(token, Err):
        return token
    return Ok(AuthenticatedClient(token.value, settings=settings, transport=transport))
