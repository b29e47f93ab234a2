"""Transporte HTTP hacia la Web API de Slack.

Responsabilidades:
- Preparar la petición de un `ApiMethod` (`<api_base_url>/<alias>`).
- Enviarla con httpx y convertir el JSON en `ApiResponse`.

Fallos de red, status no-2xx o cuerpos que no son un objeto JSON con `ok`
booleano se lanzan como `TransportError`. No hay reintentos.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import ApiMethod, ApiRequest, ApiResponse
from core.exceptions import TransportError
from core.logging import get_logger

logger = get_logger(__name__)


def _parse_payload(response: httpx.Response) -> dict[str, Any]:
    try:
        payload = response.json()
    except ValueError as exc:
        raise TransportError(
            "Slack returned a response that is not valid JSON",
            status_code=response.status_code,
        ) from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("ok"), bool):
        raise TransportError(
            "Slack returned a malformed response (missing boolean 'ok')",
            status_code=response.status_code,
        )
    return payload


class HttpMethodTransport:
    """Envía métodos de la API con un `httpx.Client`.

    Si se inyecta `client`, su ciclo de vida es del llamador; si no, se crea
    uno por envío y se cierra al terminar.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._request: ApiRequest | None = None

    @property
    def base_url(self) -> str:
        return self._settings.api_base_url.rstrip("/")

    def prepare(self, method: ApiMethod) -> ApiRequest:
        self._request = ApiRequest(
            method=method.http_method,
            url=f"{self.base_url}/{method.get_alias()}",
            params=method.get_options(),
        )
        logger.debug("api_request_prepared", alias=method.get_alias(), url=self._request.url)
        return self._request

    def get_request(self) -> ApiRequest:
        if self._request is None:
            raise TransportError("No request has been prepared yet")
        return self._request

    def send(self, method: ApiMethod) -> ApiResponse:
        request = self.prepare(method)
        logger.info("api_request_sent", alias=method.get_alias(), http_method=request.method)

        try:
            if self._client is not None:
                response = self._issue(self._client, request)
            else:
                with build_client(self._settings) as client:
                    response = self._issue(client, request)
        except httpx.HTTPError as exc:
            logger.error("api_transport_failed", alias=method.get_alias(), error=str(exc))
            raise TransportError(f"Could not reach Slack: {exc}") from exc

        if not response.is_success:
            logger.error("api_transport_failed", alias=method.get_alias(), status_code=response.status_code)
            raise TransportError(
                f"Slack responded with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        api_response = ApiResponse.from_payload(_parse_payload(response))
        logger.info("api_response_received", alias=method.get_alias(), ok=api_response.is_ok())
        if not api_response.is_ok():
            logger.info("api_remote_error", alias=method.get_alias(), error=api_response.get_error())
        return api_response

    @staticmethod
    def _issue(client: httpx.Client, request: ApiRequest) -> httpx.Response:
        if request.method.upper() == "GET":
            return client.get(request.url, params=request.params)
        return client.request(request.method, request.url, data=request.params)
