"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Cada modelo es a la vez el tipo y el esquema de validación del payload
  remoto: un cuerpo que no encaja nunca llega a la lógica del dominio.
- Los campos usan tipos estrictos (`StrictStr`, `StrictFloat`) para no
  coaccionar silenciosamente datos mal formados.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr, StrictFloat, StrictStr
from pydantic.config import ConfigDict


class Credentials(BaseModel):
    """Par client id / secret para el flujo `client_credentials`.

    Acepta tanto `client_id` como la clave JSON `clientId` (idem secret).
    El secreto es `SecretStr`: su repr nunca muestra el valor.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    client_id: StrictStr = Field(
        ...,
        alias="clientId",
        description="Client ID de la aplicación registrada.",
    )
    client_secret: SecretStr = Field(
        ...,
        alias="clientSecret",
        description="Client secret de la aplicación registrada.",
    )

    def is_configured(self) -> bool:
        return bool(self.client_id) and bool(self.client_secret.get_secret_value())


class AccessToken(BaseModel):
    """Respuesta del endpoint de token (vive solo durante una ejecución)."""

    model_config = ConfigDict(extra="ignore")

    access_token: StrictStr
    token_type: StrictStr
    expires_in: StrictFloat


class Artist(BaseModel):
    """Artista del catálogo. La identidad es `id`; `name` es solo display."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    id: StrictStr


class ArtistPage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[Artist]


class SearchResult(BaseModel):
    """Respuesta de `GET /search?type=artist`."""

    model_config = ConfigDict(extra="ignore")

    artists: ArtistPage


class RelatedResult(BaseModel):
    """Respuesta de `GET /artists/{id}/related-artists`."""

    model_config = ConfigDict(extra="ignore")

    artists: list[Artist]


class ArtistRelations(BaseModel):
    """Artista resuelto para un input junto con los nombres relacionados."""

    artist: Artist
    related: list[str] = Field(default_factory=list)


class AggregatedReport(BaseModel):
    """Resultado final: artistas consultados y la intersección de relacionados."""

    artists: list[str] = Field(
        default_factory=list,
        description="Nombres de los artistas resueltos, en orden de input.",
    )
    related: list[str] = Field(
        default_factory=list,
        description="Nombres comunes a todas las listas, sin duplicados.",
    )
