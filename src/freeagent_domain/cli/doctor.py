"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from freeagent_domain.core.config import FreeAgentSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(help="Environment diagnostics and configuration checks.")

_console = Console()


def _credential_status(value: str | None) -> str:
    return "OK" if (value or "").strip() else "MISSING"


@app.callback(invoke_without_command=True)
def run(ctx: typer.Context) -> None:
    """Show the effective settings and whether OAuth2 credentials are set."""

    if ctx.invoked_subcommand is not None:
        return

    settings = FreeAgentSettings()

    table = Table(title="freeagent-domain Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    environment = "sandbox" if settings.use_sandbox else "production"
    if settings.api_base_url_override is not None:
        environment = "override"
    table.add_row("API base URL", "OK", f"{settings.api_base_url} ({environment})")
    table.add_row("Token endpoint", "OK", settings.token_endpoint)

    # Secrets are never printed, only their presence.
    table.add_row("Client id", _credential_status(settings.client_id), "FREEAGENT_CLIENT_ID")
    table.add_row("Client secret", _credential_status(settings.client_secret), "FREEAGENT_CLIENT_SECRET")
    table.add_row("Refresh token", _credential_status(settings.refresh_token), "FREEAGENT_REFRESH_TOKEN")

    table.add_row("Log level", "OK", settings.log_level.upper())
    table.add_row("User config", "OK" if get_user_env_file().exists() else "ABSENT", str(get_user_env_file()))

    _console.print(table)

    missing = settings.missing_credentials()
    if missing:
        _console.print(
            "\n[yellow]Note:[/yellow] the models work without credentials; "
            "an HTTP client would fail with:\n- " + "\n- ".join(missing)
        )


@app.command(name="setup")
def setup() -> None:
    """Interactive credentials setup (stores config in the user config .env)."""

    use_sandbox = typer.confirm("Use the FreeAgent sandbox?", default=True)
    client_id = typer.prompt("OAuth client id").strip()
    client_secret = typer.prompt("OAuth client secret", hide_input=True).strip()
    refresh_token = typer.prompt("Refresh token", hide_input=True).strip()

    if not client_id or not client_secret:
        raise typer.BadParameter("client id and client secret are required")

    env_path = write_user_env_vars(
        {
            "FREEAGENT_USE_SANDBOX": "true" if use_sandbox else "false",
            "FREEAGENT_CLIENT_ID": client_id,
            "FREEAGENT_CLIENT_SECRET": client_secret,
            "FREEAGENT_REFRESH_TOKEN": refresh_token,
        }
    )

    _console.print(f"[green]Saved FreeAgent config to:[/green] {env_path}")
