"""Comando base para los métodos de la Web API.

Flujo de una invocación (siempre lineal):
    input CLI -> opciones -> token -> factory -> transporte (o dry-run) -> salida

Por qué una clase base y no funciones sueltas:
- Todos los subcomandos comparten `--token`, `--dry-run`, el texto de ayuda
  y el formato del resultado; cada subclase solo aporta sus argumentos,
  el mapeo a opciones y cómo presentar el payload de éxito.
- Los colaboradores (token, factory, transporte) llegan por constructor, así
  que los tests inyectan dobles sin tocar la red.
"""

from __future__ import annotations

import abc
from typing import Any, ClassVar, Mapping

import click

from cli.output import CommandOutput
from cli.ui_components import build_options_table, comment, error_line, success_line
from core.domain.models import ApiMethod, ApiResponse
from core.interfaces.api import MethodFactory, MethodTransport, TokenProvider
from core.logging import get_logger

logger = get_logger(__name__)

DOCS_URL = "https://api.slack.com/methods/{slug}"


class ApiCommand(abc.ABC):
    """Adaptador entre una invocación de consola y un método remoto."""

    name: ClassVar[str]
    method_slug: ClassVar[str]
    description: ClassVar[str] = ""

    def __init__(
        self,
        token_provider: TokenProvider,
        method_factory: MethodFactory,
        transport: MethodTransport,
    ) -> None:
        self._token_provider = token_provider
        self._method_factory = method_factory
        self._transport = transport

    # -- registro ---------------------------------------------------------

    def configure(self) -> list[click.Parameter]:
        """Parámetros de consola; las subclases extienden esta lista."""

        return [
            click.Option(
                ["--token", "-t"],
                type=str,
                default=None,
                help="A token to authenticate with, can be left empty to use the currently configured token.",
            ),
            click.Option(
                ["--dry-run"],
                is_flag=True,
                default=False,
                help="Build the request and show it without sending it.",
            ),
        ]

    @classmethod
    def help_text(cls) -> str:
        return (
            f"{cls.description}\n\n"
            "These API commands all follow Slack's API documentation as closely as possible. "
            "You can get detailed usage information about the current command with the URL below:\n\n"
            f"{DOCS_URL.format(slug=cls.method_slug)}"
        )

    def to_click_command(self) -> click.Command:
        """Construye el `click.Command` una sola vez, al arrancar la CLI."""

        @click.pass_context
        def callback(ctx: click.Context, **inputs: Any) -> None:
            output = ctx.find_object(CommandOutput) or CommandOutput()
            ctx.exit(self.execute(inputs, output))

        return click.Command(
            name=self.name,
            callback=callback,
            params=self.configure(),
            help=self.help_text(),
            short_help=self.description or None,
        )

    # -- ejecución --------------------------------------------------------

    def execute(self, inputs: Mapping[str, Any], output: CommandOutput) -> int:
        alias = self.get_method_alias()
        logger.debug("api_command_invoked", command=self.name, alias=alias, dry_run=bool(inputs.get("dry_run")))
        options = self.input_to_options(inputs, {})
        options = {**options, "token": inputs.get("token") or self.get_configured_token()}

        method = self.get_method_factory().create(alias, options)
        transport = self.get_method_transport()

        if inputs.get("dry_run"):
            return self.report_dry(transport, method, output)

        response = transport.send(method)
        return self.report(method, response, output)

    def report_dry(self, transport: MethodTransport, method: ApiMethod, output: CommandOutput) -> int:
        transport.prepare(method)
        url = transport.get_request().get_url(False)
        output.writeln(success_line(f"Dry-run completed for method: {comment(method.get_alias())}"))
        output.writeln(f"Would've used the following base URL: {comment(url)}")
        output.writeln("Would've used the following options:")
        output.writeln(build_options_table(method.get_options()))
        return 0

    def report(self, method: ApiMethod, response: ApiResponse, output: CommandOutput) -> int:
        if response.is_ok():
            output.writeln(success_line(f"Successfully executed API method {comment(method.get_alias())}"))
            self.response_to_output(response, output)
            exit_code = 0
        else:
            output.writeln(error_line(f"Slack did not respond correctly: {comment(response.get_error())}"))
            exit_code = 1

        if output.is_verbose():
            output.writeln("[yellow]Options sent:[/yellow]")
            output.writeln(build_options_table(method.get_options()))

        return exit_code

    @abc.abstractmethod
    def response_to_output(self, response: ApiResponse, output: CommandOutput) -> None:
        """Presenta el payload de éxito propio de cada método."""

    # -- colaboradores ----------------------------------------------------

    def get_configured_token(self) -> str:
        """Token definido en la configuración de la aplicación."""

        return self._token_provider.get_configured_token()

    def get_method_transport(self) -> MethodTransport:
        return self._transport

    def get_method_factory(self) -> MethodFactory:
        return self._method_factory

    def get_method_alias(self) -> str:
        return self.method_slug

    def input_to_options(self, inputs: Mapping[str, Any], options: dict[str, Any]) -> dict[str, Any]:
        """Convierte argumentos de consola en opciones del método remoto.

        Por defecto no añade nada; las subclases lo sobrescriben.
        """

        return options
