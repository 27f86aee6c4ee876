"""CLI argument parsers and validators."""

from __future__ import annotations

import logging
from typing import Optional

from ..core.models import STDIO
from ..errors import ConfigurationError, OutputError


def parse_log_level(value: str) -> int:
    """Parse a logging level name (e.g. INFO, debug)."""
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"invalid log level '{value}'")
    return level


def parse_outputs(values: Optional[list[str]]) -> list[str]:
    """Default to a single stdout destination when no --out is given."""
    if not values:
        return [STDIO]
    for value in values:
        if not value:
            raise OutputError("can't open output file '': empty path")
    return list(values)
