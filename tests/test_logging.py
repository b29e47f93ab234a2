"""Unit tests for the logging setup."""

import logging

import pytest

from core.domain.verbosity import Verbosity
from core.logging import setup_logging


@pytest.mark.parametrize(
    "verbosity,level",
    [
        (Verbosity.QUIET, logging.ERROR),
        (Verbosity.NORMAL, logging.WARNING),
        (Verbosity.VERBOSE, logging.WARNING),
        (Verbosity.VERY_VERBOSE, logging.INFO),
        (Verbosity.DEBUG, logging.DEBUG),
    ],
)
def test_root_level_follows_verbosity(verbosity: Verbosity, level: int) -> None:
    setup_logging(verbosity)

    assert logging.getLogger().level == level


def test_setup_replaces_previous_handlers() -> None:
    setup_logging(Verbosity.NORMAL)
    setup_logging(Verbosity.DEBUG, "json")

    assert len(logging.getLogger().handlers) == 1
