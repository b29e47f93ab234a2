"""Salida de consola con nivel de verbosidad.

Por qué un objeto propio:
- Los comandos escriben líneas con markup Rich y consultan la verbosidad
  sin saber si la consola es real o un buffer de test.
"""

from __future__ import annotations

from rich.console import Console, RenderableType

from core.domain.verbosity import Verbosity


class CommandOutput:
    """Envuelve una `rich.console.Console` junto con la verbosidad activa."""

    def __init__(self, console: Console | None = None, verbosity: Verbosity = Verbosity.NORMAL) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    def is_quiet(self) -> bool:
        return self.verbosity <= Verbosity.QUIET

    def is_verbose(self) -> bool:
        return self.verbosity > Verbosity.NORMAL

    def writeln(self, message: RenderableType = "") -> None:
        if self.is_quiet():
            return
        self.console.print(message)
