"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a httpx ni a la CLI.
- Las respuestas de la API son inmutables una vez recibidas (`frozen`).

Nota:
- Estos modelos describen *qué* es una llamada a la API, no *cómo* se envía.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ApiMethod(BaseModel):
    """Descriptor de una llamada: alias del método remoto + opciones resueltas.

    Por qué existe:
    - Se construye de cero en cada invocación (factory) y lo consume una sola
      vez el transporte o el dry-run.
    """

    alias: str = Field(
        ...,
        min_length=1,
        description="Nombre del método remoto (p.ej. 'chat.postMessage').",
    )
    options: dict[str, str] = Field(
        default_factory=dict,
        description="Opciones enviadas con la llamada (incluye `token`).",
    )
    http_method: str = Field(
        default="POST",
        description="Verbo HTTP con el que se envía la llamada.",
    )

    def get_alias(self) -> str:
        return self.alias

    def get_options(self) -> dict[str, str]:
        return dict(self.options)


class ApiRequest(BaseModel):
    """Petición HTTP preparada por el transporte (lo que muestra el dry-run)."""

    model_config = ConfigDict(frozen=True)

    method: str = Field(default="POST", description="Verbo HTTP.")
    url: str = Field(..., min_length=1, description="URL del método remoto, sin query.")
    params: dict[str, str] = Field(default_factory=dict)

    def get_url(self, include_params: bool = True) -> str:
        """Devuelve la URL; con `include_params` añade la query url-encoded."""

        if not include_params or not self.params:
            return self.url
        return f"{self.url}?{urlencode(self.params)}"


class ApiResponse(BaseModel):
    """Resultado de una llamada remota: éxito con payload o mensaje de error.

    Slack siempre responde un objeto JSON con `ok`; el resto de claves depende
    del método y se conserva íntegro en `data`.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool = Field(..., description="Si la API reportó éxito.")
    error: str | None = Field(default=None, description="Código de error remoto (p.ej. 'channel_not_found').")
    warning: str | None = Field(default=None, description="Aviso remoto opcional.")
    data: dict[str, Any] = Field(default_factory=dict, description="Payload completo tal cual llegó.")

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ApiResponse":
        error = payload.get("error")
        warning = payload.get("warning")
        return cls(
            ok=payload["ok"],
            error=str(error) if error is not None else None,
            warning=str(warning) if warning is not None else None,
            data=dict(payload),
        )

    def is_ok(self) -> bool:
        return self.ok

    def get_error(self) -> str:
        return self.error or "unknown_error"

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)
