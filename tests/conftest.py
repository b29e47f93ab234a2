"""
Shared pytest fixtures.

Fakes for the command collaborators (token provider, method factory,
transport) plus a buffered `CommandOutput`, so no test touches the network.
"""

import io
from typing import Any, Mapping

import pytest
from rich.console import Console

from cli.output import CommandOutput
from core.domain.models import ApiMethod, ApiRequest, ApiResponse
from core.domain.verbosity import Verbosity
from core.logging import setup_logging
from core.services.method_factory import ApiMethodFactory


class FakeTokenProvider:
    def __init__(self, token: str = "cfgtok") -> None:
        self.token = token
        self.calls = 0

    def get_configured_token(self) -> str:
        self.calls += 1
        return self.token


class RecordingFactory:
    """Real factory that remembers every `create` call."""

    def __init__(self) -> None:
        self._factory = ApiMethodFactory()
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def create(self, alias: str, options: Mapping[str, object]) -> ApiMethod:
        self.calls.append((alias, dict(options)))
        return self._factory.create(alias, options)


class FakeTransport:
    """Transport double returning a canned payload."""

    def __init__(self, payload: dict[str, Any] | None = None) -> None:
        self.payload = payload if payload is not None else {"ok": True}
        self.sent: list[ApiMethod] = []
        self.prepared: list[ApiMethod] = []
        self._request: ApiRequest | None = None

    def prepare(self, method: ApiMethod) -> ApiRequest:
        self.prepared.append(method)
        self._request = ApiRequest(
            url=f"https://slack.test/api/{method.get_alias()}",
            params=method.get_options(),
        )
        return self._request

    def get_request(self) -> ApiRequest:
        assert self._request is not None
        return self._request

    def send(self, method: ApiMethod) -> ApiResponse:
        self.sent.append(method)
        self.prepare(method)
        return ApiResponse.from_payload(self.payload)


class BufferedOutput(CommandOutput):
    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL) -> None:
        self.buffer = io.StringIO()
        super().__init__(Console(file=self.buffer, width=200, color_system=None), verbosity)

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture(autouse=True)
def _configure_logging():
    setup_logging(Verbosity.NORMAL)
    yield


@pytest.fixture
def token_provider() -> FakeTokenProvider:
    return FakeTokenProvider()


@pytest.fixture
def factory() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def output() -> BufferedOutput:
    return BufferedOutput()


@pytest.fixture
def verbose_output() -> BufferedOutput:
    return BufferedOutput(Verbosity.VERBOSE)
