"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.spotify.auth import fetch_access_token
from core.config import AppSettings, load_credentials, write_user_env_vars
from core.domain.models import Credentials
from core.domain.result import Err

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_token(
    credentials: Credentials,
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[bool, str]:
    token = await fetch_access_token(credentials, settings=settings, transport=transport)
    if isinstance(token, Err):
        return False, str(token.error).splitlines()[0]
    return True, f"{token.value.token_type} token, expires in {int(token.value.expires_in)}s"


def build_checks_table(settings: AppSettings) -> Table:
    """Run the checks and collect them in a Rich table. Secrets are never shown."""

    table = Table(title="related-artists Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Token URL", "OK", settings.token_url)

    credentials = load_credentials(settings)
    if isinstance(credentials, Err):
        table.add_row("Credentials", "FAIL", str(credentials.error).splitlines()[0])
        return table
    if not credentials.value.is_configured():
        table.add_row("Credentials", "MISSING", "Run `related-artists-doctor setup-credentials`")
        return table
    table.add_row("Credentials", "OK", "Client id and secret configured")

    ok_token, detail_token = asyncio.run(_check_token(credentials.value, settings))
    table.add_row("Token exchange", "OK" if ok_token else "FAIL", detail_token)
    return table


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    _console.print(build_checks_table(AppSettings()))


@app.command(name="setup-credentials")
def setup_credentials() -> None:
    """Interactive credentials setup (stores config in the user config .env)."""

    client_id = typer.prompt("Client ID").strip()
    client_secret = typer.prompt("Client secret", hide_input=True, confirmation_prompt=False).strip()

    if not client_id or not client_secret:
        raise typer.BadParameter("client id and client secret are required")

    env_path = write_user_env_vars(
        {
            "RELATED_ARTISTS_CLIENT_ID": client_id,
            "RELATED_ARTISTS_CLIENT_SECRET": client_secret,
        }
    )

    _console.print(f"[green]Saved credentials to:[/green] {env_path}")
