"""Exceptions raised while generating configuration files."""

from __future__ import annotations


class CfgeneratorError(Exception):
    """Base class for every failure reported by cfgenerator."""


class ConfigurationError(CfgeneratorError):
    """Raised when the run configuration is invalid (e.g. unknown interpreter)."""


class InputError(CfgeneratorError):
    """Raised when the input template cannot be opened or read."""


class OutputError(CfgeneratorError):
    """Raised when an output destination cannot be opened or written."""


class CollectionError(CfgeneratorError):
    """Raised when a volume path cannot be loaded."""


class RenderError(CfgeneratorError):
    """Raised when a template fails to evaluate."""


class GenerationError(CfgeneratorError):
    """Raised when the generation pipeline aborts."""
