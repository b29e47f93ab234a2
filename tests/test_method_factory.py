"""Unit tests for the method registry/factory."""

import pytest

from core.exceptions import UnknownMethodError
from core.services.method_factory import DEFAULT_METHODS, ApiMethodDefinition, ApiMethodFactory


class TestApiMethodFactory:
    def test_create_known_alias(self) -> None:
        method = ApiMethodFactory().create("chat.postMessage", {"token": "t", "channel": "C1"})

        assert method.get_alias() == "chat.postMessage"
        assert method.get_options() == {"token": "t", "channel": "C1"}
        assert method.http_method == "POST"

    def test_unknown_alias_raises(self) -> None:
        with pytest.raises(UnknownMethodError) as excinfo:
            ApiMethodFactory().create("users.bogus", {"token": "t"})

        assert excinfo.value.alias == "users.bogus"
        assert excinfo.value.code == "METHOD_UNKNOWN"

    def test_option_values_are_normalized(self) -> None:
        method = ApiMethodFactory().create(
            "conversations.list",
            {"token": "", "exclude_archived": True, "limit": 20, "cursor": None},
        )

        assert method.get_options() == {"token": "", "exclude_archived": "true", "limit": "20"}

    def test_false_flag_is_sent(self) -> None:
        method = ApiMethodFactory().create("chat.postMessage", {"as_user": False})

        assert method.get_options() == {"as_user": "false"}

    def test_custom_registry(self) -> None:
        factory = ApiMethodFactory([ApiMethodDefinition("team.info", http_method="GET")])

        assert factory.has("team.info")
        assert not factory.has("users.list")
        assert factory.create("team.info", {}).http_method == "GET"

    def test_default_aliases_listed(self) -> None:
        aliases = ApiMethodFactory().aliases()

        assert aliases == sorted(d.alias for d in DEFAULT_METHODS)
        assert "users.list" in aliases

    def test_each_create_returns_fresh_descriptor(self) -> None:
        factory = ApiMethodFactory()
        options = {"token": "t"}

        first = factory.create("auth.test", options)
        second = factory.create("auth.test", options)

        assert first is not second
        first.options["token"] = "changed"
        assert second.get_options() == {"token": "t"}
