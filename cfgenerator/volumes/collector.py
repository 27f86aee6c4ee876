"""Variable collection from mounted volume files and directories."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from ..errors import CollectionError

logger = logging.getLogger(__name__)


def read_variable(path: Path) -> str:
    """Read the full content of a variable file.

    Args:
        path: Regular file to read

    Returns:
        Decoded file content
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CollectionError(f"can't decode volume file '{path}': {e}") from e
    except OSError as e:
        raise CollectionError(f"can't read volume file '{path}': {e}") from e


def _directory_files(directory: Path) -> list[Path]:
    """List regular files directly inside a directory, sorted by name."""
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise CollectionError(f"can't list volume directory '{directory}': {e}") from e

    files = []
    for entry in entries:
        if entry.is_file():
            files.append(entry)
        else:
            logger.debug(f"Skipping non-regular entry: {entry}")
    return files


def _store(variables: dict[str, str], name: str, value: str, origin: Path) -> None:
    if name in variables:
        logger.debug(f"Variable {name!r} overridden by {origin}")
    variables[name] = value


def collect(paths: Iterable[str | os.PathLike[str]]) -> Mapping[str, str]:
    """Collect variables from a list of volume paths.

    Each regular file becomes one variable named after its base name. A
    directory contributes its direct regular files; sub-directories are
    ignored. Later paths override earlier ones on name collisions.

    Args:
        paths: Volume files or flat directories, in priority order

    Returns:
        Read-only mapping of variable name to content
    """
    variables: dict[str, str] = {}

    for raw_path in paths:
        path = Path(raw_path)
        try:
            mode = path.stat().st_mode
        except OSError as e:
            raise CollectionError(f"can't access volume '{raw_path}': {e}") from e

        if stat.S_ISREG(mode):
            _store(variables, path.name, read_variable(path), path)
        elif stat.S_ISDIR(mode):
            for entry in _directory_files(path):
                _store(variables, entry.name, read_variable(entry), entry)
        else:
            raise CollectionError(
                f"volume '{raw_path}' is neither a regular file nor a directory"
            )

    logger.debug(f"Collected {len(variables)} variable(s)")
    return MappingProxyType(variables)
