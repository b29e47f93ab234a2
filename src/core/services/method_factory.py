"""Registro y factory de métodos de la Web API.

Por qué aquí:
- Este módulo es dueño de la lista de métodos remotos que conoce la CLI.
- La factory convierte un alias + opciones de consola en un `ApiMethod`,
  normalizando los valores al formato de texto que espera la API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from core.domain.models import ApiMethod
from core.exceptions import UnknownMethodError
from core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ApiMethodDefinition:
    """Static description of one remote method."""

    alias: str
    description: str = ""
    http_method: str = "POST"


DEFAULT_METHODS: tuple[ApiMethodDefinition, ...] = (
    ApiMethodDefinition("api.test", "Checks API calling code."),
    ApiMethodDefinition("auth.test", "Checks authentication & identity."),
    ApiMethodDefinition("conversations.list", "Lists all channels in a Slack team."),
    ApiMethodDefinition("conversations.info", "Retrieve information about a conversation."),
    ApiMethodDefinition("conversations.history", "Fetches a conversation's history of messages."),
    ApiMethodDefinition("chat.postMessage", "Sends a message to a channel."),
    ApiMethodDefinition("chat.update", "Updates a message."),
    ApiMethodDefinition("chat.delete", "Deletes a message."),
    ApiMethodDefinition("users.list", "Lists all users in a Slack team."),
    ApiMethodDefinition("users.info", "Gets information about a user."),
)


def _stringify(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ApiMethodFactory:
    """Crea `ApiMethod` para aliases registrados.

    Reglas:
    - Opciones con valor `None` se descartan (no se envían).
    - Un token vacío se conserva: falla después, en el lado remoto.
    """

    def __init__(self, definitions: Iterable[ApiMethodDefinition] = DEFAULT_METHODS) -> None:
        self._definitions: dict[str, ApiMethodDefinition] = {d.alias: d for d in definitions}

    def has(self, alias: str) -> bool:
        return alias in self._definitions

    def aliases(self) -> list[str]:
        return sorted(self._definitions)

    def definition(self, alias: str) -> ApiMethodDefinition:
        try:
            return self._definitions[alias]
        except KeyError:
            raise UnknownMethodError(alias) from None

    def create(self, alias: str, options: Mapping[str, object]) -> ApiMethod:
        definition = self.definition(alias)
        normalized = {
            str(key): _stringify(value)
            for key, value in options.items()
            if value is not None
        }
        logger.debug("api_method_created", alias=alias, option_keys=sorted(normalized))
        return ApiMethod(alias=alias, options=normalized, http_method=definition.http_method)
