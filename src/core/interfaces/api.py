"""Contratos de los colaboradores de un comando API.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El comando recibe estos colaboradores por constructor; cualquier objeto
  con la forma adecuada (real o fake) es intercambiable.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from core.domain.models import ApiMethod, ApiRequest, ApiResponse


@runtime_checkable
class TokenProvider(Protocol):
    """Fuente del token configurado a nivel de proceso."""

    def get_configured_token(self) -> str:
        ...


@runtime_checkable
class MethodFactory(Protocol):
    """Construye descriptores de método a partir de un alias."""

    def create(self, alias: str, options: Mapping[str, object]) -> ApiMethod:
        """Debe lanzar `UnknownMethodError` si el alias no existe."""

        ...


@runtime_checkable
class MethodTransport(Protocol):
    """Envía descriptores a la API remota.

    Reglas de diseño:
    - `send` es síncrono: una petición por invocación.
    - Fallos de red/protocolo se lanzan como `TransportError`.
    """

    def prepare(self, method: ApiMethod) -> ApiRequest:
        ...

    def get_request(self) -> ApiRequest:
        ...

    def send(self, method: ApiMethod) -> ApiResponse:
        ...
