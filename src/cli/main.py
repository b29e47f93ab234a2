"""Entry point de la CLI (grupo click + sub-app Typer `doctor`).

Por qué un grupo click en la raíz:
- Los comandos API se construyen desde clases (`ApiCommand`) como
  `click.Command`; el grupo raíz es del mismo click, sin mezclar copias.
- Aquí se cablean sus colaboradores y las opciones globales de verbosidad,
  una sola vez al arrancar.
"""

from __future__ import annotations

import click
import typer
from rich.console import Console

from adapters.transport import HttpMethodTransport
from cli import doctor
from cli.api_commands import ALL_COMMANDS
from cli.output import CommandOutput
from core.config import AppSettings
from core.domain.verbosity import Verbosity
from core.interfaces.api import MethodFactory, MethodTransport, TokenProvider
from core.logging import setup_logging
from core.services.method_factory import ApiMethodFactory
from core.services.token_provider import SettingsTokenProvider


def _doctor_command() -> click.Command:
    command = typer.main.get_command(doctor.app)
    if not isinstance(command, click.Command):
        raise TypeError(
            f"typer returned {type(command).__name__}, which is not a click.Command; "
            "install a typer release that builds on the installed click"
        )
    return command


def build_cli(
    settings: AppSettings | None = None,
    *,
    token_provider: TokenProvider | None = None,
    method_factory: MethodFactory | None = None,
    transport: MethodTransport | None = None,
) -> click.Group:
    """Crea el grupo click raíz con `doctor` y todos los comandos API."""

    settings = settings or AppSettings()
    token_provider = token_provider or SettingsTokenProvider(settings)
    method_factory = method_factory or ApiMethodFactory()
    transport = transport or HttpMethodTransport(settings)

    @click.group(
        name="slack-cli",
        help="Call Slack Web API methods from the command line.",
        context_settings={"help_option_names": ["-h", "--help"]},
    )
    @click.option(
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v shows options sent, -vv info logs, -vvv debug logs).",
    )
    @click.option("--quiet", "-q", is_flag=True, default=False, help="Do not print any output.")
    @click.pass_context
    def group(ctx: click.Context, verbose: int, quiet: bool) -> None:
        verbosity = Verbosity.from_flags(verbose, quiet)
        setup_logging(verbosity, settings.log_format)
        ctx.obj = CommandOutput(Console(), verbosity)

    group.add_command(_doctor_command(), name="doctor")
    for command_cls in ALL_COMMANDS:
        command = command_cls(token_provider, method_factory, transport)
        group.add_command(command.to_click_command())
    return group


def run() -> None:
    cli = build_cli()
    cli(prog_name="slack-cli")
