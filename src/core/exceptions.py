"""Excepciones de la aplicación.

Reglas:
- Solo los fallos locales o de red son excepciones.
- Un `ok: false` de Slack NO es una excepción: lo gestiona el comando
  (código de salida 1).
"""

from __future__ import annotations


class SlackCliError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class UnknownMethodError(SlackCliError):
    """Raised when the method factory does not know an alias."""

    def __init__(self, alias: str) -> None:
        self.alias = alias
        super().__init__(f"Unknown API method: {alias!r}", code="METHOD_UNKNOWN")


class TransportError(SlackCliError):
    """Raised when a request could not be sent or its response not parsed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message, code="TRANSPORT_ERROR")
