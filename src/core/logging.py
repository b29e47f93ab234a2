"""Logging centralizado (structlog sobre `logging`).

Por qué stderr:
- stdout queda reservado para la salida de los comandos (tablas, glifos),
  así se puede redirigir sin mezclar logs.

Uso:
    from core.logging import get_logger, setup_logging

    setup_logging(Verbosity.DEBUG)
    logger = get_logger(__name__)
    logger.debug("api_request_sent", alias="chat.postMessage")
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from core.domain.verbosity import Verbosity


def _level_for(verbosity: Verbosity) -> int:
    if verbosity <= Verbosity.QUIET:
        return logging.ERROR
    if verbosity >= Verbosity.DEBUG:
        return logging.DEBUG
    if verbosity >= Verbosity.VERY_VERBOSE:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbosity: Verbosity = Verbosity.NORMAL,
    format_type: str = "console",
) -> None:
    """Configura structlog y el root logger según la verbosidad.

    Se puede llamar varias veces: los handlers previos se reemplazan.
    """

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if format_type == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(_level_for(verbosity))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Devuelve un logger structlog para `name` (típicamente `__name__`)."""

    return structlog.get_logger(name)
