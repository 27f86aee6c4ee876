"""File I/O operations for rendering."""

from __future__ import annotations

import logging
import sys
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import IO, Iterator, Sequence

from ..core.models import STDIO
from ..errors import InputError, OutputError

logger = logging.getLogger(__name__)


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def describe(path: str) -> str:
    """Human readable name of an input/output destination."""
    return path if path != STDIO else "<stdio>"


@contextmanager
def open_input(path: str) -> Iterator[IO[str]]:
    """Open the template input, '-' meaning stdin.

    Stdin is never closed.
    """
    if path == STDIO:
        yield sys.stdin
        return

    try:
        handle = open(path, "r", encoding="utf-8")
    except OSError as e:
        raise InputError(f"can't open input file '{path}': {e}") from e
    with handle:
        yield handle


@contextmanager
def open_output(path: str) -> Iterator[IO[str]]:
    """Open an output destination for writing, '-' meaning stdout.

    The file is created (with its parent directories) or truncated. Stdout is
    never closed.
    """
    if path == STDIO:
        yield sys.stdout
        return

    try:
        target = Path(path)
        ensure_parent(target)
        handle = open(target, "w", encoding="utf-8")
    except OSError as e:
        raise OutputError(f"can't open output file '{path}': {e}") from e
    try:
        yield handle
    finally:
        # Data left buffered by a failed write is flushed again on close.
        try:
            handle.close()
        except OSError as e:
            raise OutputError(f"can't close output file '{path}': {e}") from e


def open_outputs(
    paths: Sequence[str], stack: ExitStack
) -> list[tuple[str, IO[str]]]:
    """Open every output destination on the given exit stack.

    Args:
        paths: Output paths, in order
        stack: Exit stack owning the opened handles

    Returns:
        List of (path, handle) pairs
    """
    return [(path, stack.enter_context(open_output(path))) for path in paths]


def write_all(content: str, outputs: Sequence[tuple[str, IO[str]]]) -> list[str]:
    """Write identical content to every output.

    A failing destination does not prevent writing to the following ones.

    Args:
        content: Rendered text
        outputs: (path, handle) pairs returned by open_outputs

    Returns:
        Paths whose write failed
    """
    failed: list[str] = []
    for path, handle in outputs:
        try:
            handle.write(content)
            handle.flush()
        except OSError as e:
            logger.error(f"Failed to write {describe(path)}: {e}")
            failed.append(path)
        else:
            logger.debug(f"Wrote {len(content)} character(s) to {describe(path)}")
    return failed
