"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.transport import HttpMethodTransport
from core.config import AppSettings, write_user_env_vars
from core.exceptions import TransportError
from core.services.method_factory import ApiMethodFactory
from core.services.token_provider import SettingsTokenProvider

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: AppSettings, transport: HttpMethodTransport | None = None) -> tuple[bool, str]:
    """Call `api.test` (no auth needed) to confirm the API is reachable."""

    transport = transport or HttpMethodTransport(settings)
    method = ApiMethodFactory().create("api.test", {})
    try:
        response = transport.send(method)
    except TransportError as exc:
        return False, exc.message
    if response.is_ok():
        return True, transport.get_request().get_url(False)
    return False, response.get_error()


def _check_auth(settings: AppSettings, transport: HttpMethodTransport | None = None) -> tuple[bool, str]:
    transport = transport or HttpMethodTransport(settings)
    token = SettingsTokenProvider(settings).get_configured_token()
    method = ApiMethodFactory().create("auth.test", {"token": token})
    try:
        response = transport.send(method)
    except TransportError as exc:
        return False, exc.message
    if response.is_ok():
        return True, f"{response.get('user')} @ {response.get('team')}"
    return False, response.get_error()


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="slack-cli Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    has_token = bool(settings.api_token)
    table.add_row("API token", "OK" if has_token else "MISSING", "Configured" if has_token else "Pass --token on each call")
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    ok_api, detail_api = _check_api(settings)
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    if has_token and ok_api:
        ok_auth, detail_auth = _check_auth(settings)
        table.add_row("Authentication", "OK" if ok_auth else "FAIL", detail_auth)

    _console.print(table)

    if not has_token:
        _console.print("\n[yellow]Note:[/yellow] run `slack-cli doctor setup-token` to store a default token.")


@app.command(name="setup-token")
def setup_token() -> None:
    """Interactive token setup (stores config in the user config .env)."""

    settings = AppSettings()

    token = typer.prompt("Slack API token", hide_input=True, confirmation_prompt=False).strip()
    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()

    if not token:
        raise typer.BadParameter("token is required")
    if not base_url:
        raise typer.BadParameter("base_url is required")

    env_path = write_user_env_vars(
        {
            "SLACK_CLI_API_TOKEN": token,
            "SLACK_CLI_API_BASE_URL": base_url,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
