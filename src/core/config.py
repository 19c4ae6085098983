"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/Spotify) lean config de forma consistente.
- Las credenciales salen de aquí como un `Credentials` explícito que se pasa
  por parámetro; el resto del código no lee ficheros ni entorno.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from dotenv import set_key
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import SchemaValidationError
from core.domain.models import Credentials
from core.domain.result import Err, Ok, Result
from core.logger import logger
from core.schema import validate

APP_NAME = "related-artists"


def get_user_config_dir() -> Path:
    """Directorio de config del usuario (XDG en Linux, AppData en Windows...)."""

    return Path(typer.get_app_dir(APP_NAME))


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Añade o reemplaza claves en el .env del usuario; el resto se conserva."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in values.items():
        set_key(str(env_path), key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="RELATED_ARTISTS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    client_id: str | None = Field(
        default=None,
        description="Client ID de Spotify (flujo client_credentials).",
    )
    client_secret: SecretStr | None = Field(
        default=None,
        description="Client secret de Spotify. Nunca se loguea.",
    )
    credentials_file: Path = Field(
        default=Path("env.json"),
        description="JSON local con `clientId`/`clientSecret` si no hay variables de entorno.",
    )

    api_base_url: str = Field(
        default="https://api.spotify.com/v1",
        min_length=8,
        description="Base URL de la Web API.",
    )
    token_url: str = Field(
        default="https://accounts.spotify.com/api/token",
        min_length=8,
        description="Endpoint de intercambio de credenciales.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="related-artists/0.1",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de log en consola (DEBUG, INFO, WARNING...).",
    )
    log_file: Path | None = Field(
        default=None,
        description="Fichero de log rotativo opcional (nivel DEBUG).",
    )


def load_credentials(settings: AppSettings) -> Result[Credentials, SchemaValidationError]:
    """Resuelve las credenciales: entorno/.env primero, luego el JSON local.

    Si no hay nada configurado devuelve credenciales vacías: el intercambio de
    token fallará y ese es el error que verá el usuario.
    """

    if settings.client_id and settings.client_secret is not None:
        return Ok(
            Credentials(
                client_id=settings.client_id,
                client_secret=settings.client_secret,
            )
        )

    path = settings.credentials_file
    if not path.is_file():
        logger.warning("No credentials configured (env vars or %s)", path)
        return Ok(Credentials(client_id="", client_secret=SecretStr("")))

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        return Err(SchemaValidationError([str(path)], [f"invalid JSON: {exc.msg}"]))
    except UnicodeDecodeError:
        return Err(SchemaValidationError([str(path)], ["not a UTF-8 text file"]))
    except OSError as exc:
        return Err(SchemaValidationError([str(path)], [f"unreadable: {exc.strerror or exc.__class__.__name__}"]))
    return validate(Credentials, raw)
