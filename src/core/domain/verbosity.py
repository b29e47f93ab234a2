"""Verbosity levels for console output.

This module centralizes the output levels understood by every command.
Keeping it in the domain layer allows the CLI, the command adapter and the
logging setup to share a single source of truth without circular imports.
"""

from __future__ import annotations

from enum import IntEnum


class Verbosity(IntEnum):
    """Ordered output levels, from silent to debug."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    VERY_VERBOSE = 3
    DEBUG = 4

    @classmethod
    def from_flags(cls, verbose: int = 0, quiet: bool = False) -> "Verbosity":
        """Derive a level from the `-v` count and the `-q` flag.

        `-q` wins over any number of `-v`; counts above three are clamped.
        """

        if quiet:
            return cls.QUIET
        return cls(min(cls.NORMAL + max(verbose, 0), cls.DEBUG))
