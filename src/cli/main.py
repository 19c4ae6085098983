"""CLI principal (Typer).

Uso (instalado, o con `python -m cli.main` desde `src/`):
    related-artists "Artist A" "Artist B"

Contrato de salida:
- Éxito: el reporte en stdout.
- Fallo: un único mensaje de una línea en stderr.
- El código de salida es 0 en ambos casos.
"""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console

from core.config import AppSettings, load_credentials
from core.domain.result import Err
from core.logger import setup_logger
from core.schema import to_schema_error
from core.services.related_pipeline import run_pipeline

app = typer.Typer(
    add_completion=False,
    help="Find the artists related to every given artist.",
)

_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)


def _report_error(error: BaseException) -> None:
    lines = [line.strip() for line in str(error).splitlines() if line.strip()]
    _err_console.out("; ".join(lines) or error.__class__.__name__, highlight=False)


@app.command()
def related(
    artists: list[str] = typer.Argument(..., help="One or more artist names to search for."),
) -> None:
    """Print the artists related to all of ARTISTS."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _report_error(to_schema_error(exc))
        return
    setup_logger(settings.log_level, settings.log_file)

    credentials = load_credentials(settings)
    if isinstance(credentials, Err):
        _report_error(credentials.error)
        return

    result = asyncio.run(
        run_pipeline(artists, credentials=credentials.value, settings=settings)
    )
    if isinstance(result, Err):
        _report_error(result.error)
        return
    _console.out(result.value, highlight=False)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
