"""CLI principal (Typer).

Por qué una CLI en un paquete de modelos:
- Permite validar respuestas guardadas de la API sin escribir código.
- Sirve de diagnóstico rápido de configuración (`doctor`).
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import structlog
import typer
from rich.console import Console

from freeagent_domain.adapters.json_codec import dumps, loads
from freeagent_domain.adapters.json_exporter import export_record_json
from freeagent_domain.cli import doctor
from freeagent_domain.cli.ui_components import (
    build_envelope_table,
    build_envelopes_table,
    build_error_panel,
    print_banner,
)
from freeagent_domain.core.config import FreeAgentSettings
from freeagent_domain.core.dates import format_date
from freeagent_domain.core.domain.roots import ENVELOPES, envelope_named
from freeagent_domain.core.errors import PayloadDecodeError

app = typer.Typer(no_args_is_help=True, help="FreeAgent API v2 domain models: validation and tooling.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def configure_logging(level_name: str) -> int:
    """Configure stdlib logging + structlog at `level_name`; return the numeric level."""

    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {level_name}")
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))
    return level


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override FREEAGENT_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Herramientas para los modelos de la API de FreeAgent."""

    configure_logging(log_level or FreeAgentSettings().log_level)


@app.command()
def validate(
    envelope: str = typer.Argument(..., help="Root record name, e.g. ContactsRoot or invoice_root."),
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Saved JSON response."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the normalized JSON here."),
    as_json: bool = typer.Option(False, "--json", help="Print the normalized JSON instead of a table."),
) -> None:
    """Decode PATH with the ENVELOPE root record and report the result."""

    try:
        model = envelope_named(envelope)
    except KeyError:
        raise typer.BadParameter(
            f"Unknown envelope {envelope!r}; run `freeagent-domain envelopes` for the list.",
            param_hint="ENVELOPE",
        ) from None

    try:
        record = loads(model, path.read_bytes())
    except PayloadDecodeError as exc:
        _console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc

    settings = FreeAgentSettings()
    if as_json:
        typer.echo(dumps(record, indent=settings.json_indent))
    else:
        _console.print(build_envelope_table(record))

    if output is not None:
        written = export_record_json(record=record, output_path=output, indent=settings.json_indent)
        _console.print(f"[green]Saved:[/green] {written}")


@app.command()
def envelopes(
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    """List every root record and the JSON keys it wraps."""

    if banner:
        print_banner(_console)
    _console.print(build_envelopes_table(ENVELOPES))


@app.command(name="date")
def date_command(
    value: str = typer.Argument(..., help="Calendar date in ISO form (YYYY-MM-DD)."),
) -> None:
    """Print VALUE the way request bodies carry it."""

    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"Not an ISO date: {value!r}", param_hint="VALUE") from None
    typer.echo(format_date(parsed))


def run() -> None:
    app()
