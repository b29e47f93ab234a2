"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas y glifos en todos los comandos API.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from rich.markup import escape
from rich.table import Table

SUCCESS_GLYPH = "[green]✔[/green]"
ERROR_GLYPH = "[red]✘[/red]"


def success_line(message: str) -> str:
    return f"{SUCCESS_GLYPH} {message}"


def error_line(message: str) -> str:
    return f"{ERROR_GLYPH} {message}"


def comment(value: object) -> str:
    """Resalta un valor (equivalente al estilo 'comment' de otras consolas)."""

    return f"[yellow]{escape(str(value))}[/yellow]"


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    return escape(str(value))


def build_options_table(options: Mapping[str, Any], title: str | None = None) -> Table:
    """Tabla clave/valor con las opciones de una llamada."""

    table = Table(title=title)
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key in sorted(options):
        table.add_row(escape(key), _cell(options[key]))
    return table


def build_rows_table(
    headers: Sequence[str],
    rows: Iterable[Sequence[Any]],
    title: str | None = None,
) -> Table:
    """Tabla genérica; la primera columna se marca como identificador."""

    table = Table(title=title)
    for index, header in enumerate(headers):
        if index == 0:
            table.add_column(header, style="cyan", no_wrap=True)
        else:
            table.add_column(header, style="white")
    for row in rows:
        table.add_row(*(_cell(value) for value in row))
    return table


def build_record_table(record: Mapping[str, Any], keys: Sequence[str], title: str | None = None) -> Table:
    """Tabla vertical con un subconjunto de claves de un objeto de la API."""

    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key in keys:
        if key in record:
            table.add_row(key, _cell(record[key]))
    return table
