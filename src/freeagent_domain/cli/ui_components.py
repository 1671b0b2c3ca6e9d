"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from freeagent_domain.core.domain.base import Envelope, FreeAgentModel
from freeagent_domain.core.errors import PayloadDecodeError


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("freeagent-domain", style="bold cyan")
    subtitle = Text("FreeAgent API v2 • Modelos • Wire format", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _summarize(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, tuple):
        return f"{len(value)} record(s)"
    if isinstance(value, FreeAgentModel):
        url = getattr(value, "url", None)
        return f"{type(value).__name__} {url}" if url else type(value).__name__
    return str(value)


def build_envelope_table(envelope: Envelope) -> Table:
    """Tabla con el contenido de un envelope decodificado (clave -> resumen)."""

    cls = type(envelope)
    table = Table(title=cls.__name__)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Type", style="magenta")
    table.add_column("Content", style="white")
    for name in cls.model_fields:
        value = getattr(envelope, name)
        kind = type(value[0]).__name__ if isinstance(value, tuple) and value else type(value).__name__
        table.add_row(cls.wire_key(name), kind, _summarize(value))
    return table


def build_envelopes_table(envelopes: dict[str, type[Envelope]]) -> Table:
    table = Table(title="Root records")
    table.add_column("Envelope", style="cyan", no_wrap=True)
    table.add_column("Wire keys", style="white")
    for name, cls in envelopes.items():
        table.add_row(name, ", ".join(cls.wire_keys()))
    return table


def build_error_panel(error: PayloadDecodeError) -> Panel:
    """Panel con las incidencias de decodificación (campo, tipo, mensaje)."""

    body = Text()
    body.append(error.message.strip() + "\n", style="bold")
    for issue in error.issues:
        body.append(f"\n- {issue.path or '<root>'}", style="cyan")
        body.append(f" [{issue.kind}] ", style="dim")
        body.append(issue.message)
    return Panel(body, title=Text(type(error).__name__, style="bold red"), border_style="red")
