"""Generation pipeline: read template, collect variables, render."""

from __future__ import annotations

import logging
from typing import IO, Sequence

from ..errors import CollectionError, GenerationError, InputError, RenderError
from ..volumes import collector
from .interpreters import Interpreter

logger = logging.getLogger(__name__)


def read_source(stream: IO[str], source_name: str) -> str:
    """Read the whole template from a stream.

    Args:
        stream: Template input
        source_name: Template name used in error messages

    Returns:
        Template source text
    """
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"can't read input '{source_name}': {e}") from e


def generate(
    interpreter: Interpreter,
    stream: IO[str],
    volumes: Sequence[str],
    *,
    source_name: str = "<input>",
) -> str:
    """Render the template read from a stream with variables from volumes.

    Args:
        interpreter: Interpreter evaluating the template
        stream: Template input, read in full
        volumes: Volume files or flat directories
        source_name: Template name used in error messages

    Returns:
        Rendered text
    """
    source = read_source(stream, source_name)
    logger.debug(f"Read {len(source)} character(s) from {source_name}")

    try:
        variables = collector.collect(volumes)
    except CollectionError as e:
        raise GenerationError(f"can't collect variables: {e}") from e

    try:
        return interpreter.render(source, variables, name=source_name)
    except RenderError as e:
        raise GenerationError(f"can't render template: {e}") from e
