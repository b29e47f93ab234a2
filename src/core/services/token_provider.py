"""Token configurado a nivel de proceso."""

from __future__ import annotations

from core.config import AppSettings


class SettingsTokenProvider:
    """Lee `api_token` de `AppSettings`, cargado una vez al arrancar."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def get_configured_token(self) -> str:
        return self._settings.api_token or ""
