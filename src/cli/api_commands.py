"""Subcomandos concretos, uno por método de la Web API.

Cada clase aporta:
- sus argumentos/opciones extra (`configure`)
- el mapeo de esos argumentos a opciones del método (`input_to_options`)
- la presentación del payload de éxito (`response_to_output`)
"""

from __future__ import annotations

from typing import Any, Mapping

import click

from cli.api_command import ApiCommand
from cli.output import CommandOutput
from cli.ui_components import build_record_table, build_rows_table, comment
from core.domain.models import ApiResponse


def _limit_option() -> click.Option:
    return click.Option(
        ["--limit"],
        type=click.IntRange(min=1),
        default=None,
        help="Maximum number of items to return.",
    )


def _channel_argument() -> click.Argument:
    return click.Argument(["channel"], type=str)


class ApiTestCommand(ApiCommand):
    name = "api:test"
    method_slug = "api.test"
    description = "Checks API calling code."

    def configure(self) -> list[click.Parameter]:
        return super().configure() + [
            click.Option(["--error"], type=str, default=None, help="Error response to return."),
            click.Option(
                ["--arg", "args"],
                multiple=True,
                metavar="KEY=VALUE",
                help="Extra argument echoed back by the API (repeatable).",
            ),
        ]

    def input_to_options(self, inputs: Mapping[str, Any], options: dict[str, Any]) -> dict[str, Any]:
        for raw in inputs.get("args") or ():
            if "=" not in raw:
                raise click.BadParameter(f"expected KEY=VALUE, got {raw!r}", param_hint="--arg")
            key, value = raw.split("=", 1)
            options[key.strip()] = value
        if inputs.get("error"):
            options["error"] = inputs["error"]
        return options

    def response_to_output(self, response: ApiResponse, output: CommandOutput) -> None:
        args = response.get("args") or {}
        if args:
            output.writeln(build_record_table(args, sorted(args), title="Arguments echoed"))


class AuthTestCommand(ApiCommand):
    name = "auth:test"
    method_slug = "auth.test"
    description = "Checks authentication & identity."

    def response_to_output(self, response: ApiResponse, output: CommandOutput) -> None:
        output.writeln(
            build_record_table(response.data, ["url", "team", "user", "team_id", "user_id", "bot_id"])
        )


class ChannelsListCommand(ApiCommand):
    name = "channels:list"
    method_slug = "conversations.list"
    description = "Lists all channels in a Slack team."

    def configure(self) -> list[click.Parameter]:
        return super().configure() + [
            click.Option(
                ["--exclude-archived"],
                is_flag=True,
                default=False,
                help="Don't return archived channels.",
            ),
            _limit_option(),
        ]

    def input_to_options(self, inputs: Mapping[str, Any], options: dict[str, Any]) -> dict[str, Any]:
        options["exclude_archived"] = inputs.get("exclude_archived") or None
        options["limit"] = inputs.get("limit")
        return options

    def response_to_output(self, response: ApiResponse, output: CommandOutput) -> None:
        channels = response.get("channels") or []
        rows = [
            (c.get("id"), c.get("name"), c.get("num_members"), c.get("is_archived", False))
            for c in channels
        ]
        output.writeln(build_rows_table(["ID", "Name", "Members", "Archived"], rows, title="Channels"))


class ChannelsInfoCommand(ApiCommand):
    name = "channels:info"
    method_slug = "conversations.info"
    description = "Retrieve information about a conversation."

    def configure(self) -> list[click.Parameter]:
        return super().configure() + [_channel_argument()]

    def input_to_options(self, inputs: Mapping[str, Any], options: dict[str, Any]) -> dict[str, Any]:
        options["channel"] = inputs.get("channel")
        return options

    def response_to_output(self, response: ApiResponse, output: CommandOutput) -> None:
        channel = dict(response.get("channel") or {})
        for nested in ("topic", "purpose"):
            if isinstance(channel.get(nested), dict):
                channel[nested] = channel[nested].get("value", "")
        output.writeln(
            build_record_table(
                channel,
                ["id", "name", "created", "creator", "is_archived", "num_members", "topic", "purpose"],
            )
        )


class ChannelsHistoryCommand(ApiCommand):
    name = "channels:history"
    method_slug = "conversations.history"
    description = "Fetches a conversation's history of messages."

    def configure(self) -> list[click.Parameter]:
        return super().configure() + [
            _channel_argument(),
            click.Option(["--latest"], type=str, default=None, help="End of time range of messages."),
            click.Option(["--oldest"], type=str, default=None, help="Start of time range of messages."),
            _limit_option(),
        ]

    def input_to_options(self, inputs: Mapping[str, Any], options: dict[str, Any]) -> dict[str, Any]:
        for key in ("channel", "latest", "oldest", "limit"):
            options[key] = inputs.get(key)
        return options

    def response_to_output(self, response: ApiResponse, output: CommandOutput) -> None:
        messages = response.get("messages") or []
        rows = [(m.get("ts"), m.get("user") or m.get("username"), m.get("text")) for m in messages]
        output.writeln(build_rows_table(["Timestamp", "User", "Text"], rows, title="Messages"))
        if response.get("has_more"):
            output.writeln("[dim]More messages available; narrow the range with --latest/--oldest.[/dim]")


class ChatPostMessageCommand(ApiCommand):
    name = "chat:post-message"
    method_slug = "chat.postMessage"
    description = "Sends a message to a channel."

    def configure(self) -> list[click.Parameter]:
        return super().configure() + [
            _channel_argument(),
            click.Argument(["text"], type=str),
            click.Option(["--username"], type=str, default=None, help="Name of the bot posting the message."),
            click.Option(["--icon-emoji"], type=str, default=None, help="Emoji to use as the message icon."),
            click.Option(
                ["--as-user"],
                is_flag=True,
                default=False,
                help="Post the message as the authed user instead of as a bot.",
            ),
        ]

    def input_to_options(self, inputs: Mapping[str, Any], options: dict[str, Any]) -> dict[str, Any]:
        options["channel"] = inputs.get("channel")
        options["text"] = inputs.get("text")
        options["username"] = inputs.get("username")
        options["icon_emoji"] = inputs.get("icon_emoji")
        options["as_user"] = inputs.get("as_user") or None
        return options

    def response_to_output(self, response: ApiResponse, output: CommandOutput) -> None:
        output.writeln(
            f"Message posted to {comment(response.get('channel'))} with timestamp {comment(response.get('ts'))}"
        )


class ChatUpdateCommand(ApiCommand):
    name = "chat:update"
    method_slug = "chat.update"
    description = "Updates a message."

    def configure(self) -> list[click.Parameter]:
        return super().configure() + [
            _channel_argument(),
            click.Argument(["ts"], type=str),
            click.Argument(["text"], type=str),
        ]

    def input_to_options(self, inputs: Mapping[str, Any], options: dict[str, Any]) -> dict[str, Any]:
        for key in ("channel", "ts", "text"):
            options[key] = inputs.get(key)
        return options

    def response_to_output(self, response: ApiResponse, output: CommandOutput) -> None:
        output.writeln(f"Message {comment(response.get('ts'))} updated: {response.get('text', '')}")


class ChatDeleteCommand(ApiCommand):
    name = "chat:delete"
    method_slug = "chat.delete"
    description = "Deletes a message."

    def configure(self) -> list[click.Parameter]:
        return super().configure() + [_channel_argument(), click.Argument(["ts"], type=str)]

    def input_to_options(self, inputs: Mapping[str, Any], options: dict[str, Any]) -> dict[str, Any]:
        options["channel"] = inputs.get("channel")
        options["ts"] = inputs.get("ts")
        return options

    def response_to_output(self, response: ApiResponse, output: CommandOutput) -> None:
        output.writeln(f"Message {comment(response.get('ts'))} deleted from {comment(response.get('channel'))}")


class UsersListCommand(ApiCommand):
    name = "users:list"
    method_slug = "users.list"
    description = "Lists all users in a Slack team."

    def configure(self) -> list[click.Parameter]:
        return super().configure() + [_limit_option()]

    def input_to_options(self, inputs: Mapping[str, Any], options: dict[str, Any]) -> dict[str, Any]:
        options["limit"] = inputs.get("limit")
        return options

    def response_to_output(self, response: ApiResponse, output: CommandOutput) -> None:
        members = response.get("members") or []
        rows = [(m.get("id"), m.get("name"), m.get("real_name"), m.get("deleted", False)) for m in members]
        output.writeln(build_rows_table(["ID", "Name", "Real name", "Deleted"], rows, title="Users"))


class UsersInfoCommand(ApiCommand):
    name = "users:info"
    method_slug = "users.info"
    description = "Gets information about a user."

    def configure(self) -> list[click.Parameter]:
        return super().configure() + [click.Argument(["user"], type=str)]

    def input_to_options(self, inputs: Mapping[str, Any], options: dict[str, Any]) -> dict[str, Any]:
        options["user"] = inputs.get("user")
        return options

    def response_to_output(self, response: ApiResponse, output: CommandOutput) -> None:
        user = response.get("user") or {}
        output.writeln(
            build_record_table(user, ["id", "name", "real_name", "tz", "is_admin", "is_bot", "deleted"])
        )


ALL_COMMANDS: tuple[type[ApiCommand], ...] = (
    ApiTestCommand,
    AuthTestCommand,
    ChannelsListCommand,
    ChannelsInfoCommand,
    ChannelsHistoryCommand,
    ChatPostMessageCommand,
    ChatUpdateCommand,
    ChatDeleteCommand,
    UsersListCommand,
    UsersInfoCommand,
)
