"""Unit tests for domain models and verbosity levels."""

import pydantic
import pytest

from core.domain.models import ApiRequest, ApiResponse
from core.domain.verbosity import Verbosity


class TestApiResponse:
    def test_from_payload_success(self) -> None:
        response = ApiResponse.from_payload({"ok": True, "user": "ana", "warning": "superfluous_charset"})

        assert response.is_ok()
        assert response.error is None
        assert response.warning == "superfluous_charset"
        assert response.get("user") == "ana"
        assert response.get("missing", "default") == "default"

    def test_from_payload_error(self) -> None:
        response = ApiResponse.from_payload({"ok": False, "error": "channel_not_found"})

        assert not response.is_ok()
        assert response.get_error() == "channel_not_found"

    def test_error_without_code(self) -> None:
        assert ApiResponse(ok=False).get_error() == "unknown_error"

    def test_is_immutable(self) -> None:
        response = ApiResponse.from_payload({"ok": True})

        with pytest.raises(pydantic.ValidationError):
            response.ok = False  # type: ignore[misc]


class TestApiRequest:
    def test_url_without_params(self) -> None:
        request = ApiRequest(url="https://slack.com/api/chat.postMessage", params={"text": "a b"})

        assert request.get_url(False) == "https://slack.com/api/chat.postMessage"
        assert request.get_url(True) == "https://slack.com/api/chat.postMessage?text=a+b"

    def test_url_with_no_params_has_no_query(self) -> None:
        assert ApiRequest(url="https://slack.com/api/api.test").get_url(True) == "https://slack.com/api/api.test"


class TestVerbosity:
    @pytest.mark.parametrize(
        "verbose,quiet,expected",
        [
            (0, False, Verbosity.NORMAL),
            (1, False, Verbosity.VERBOSE),
            (2, False, Verbosity.VERY_VERBOSE),
            (3, False, Verbosity.DEBUG),
            (7, False, Verbosity.DEBUG),
            (2, True, Verbosity.QUIET),
        ],
    )
    def test_from_flags(self, verbose: int, quiet: bool, expected: Verbosity) -> None:
        assert Verbosity.from_flags(verbose, quiet) is expected
