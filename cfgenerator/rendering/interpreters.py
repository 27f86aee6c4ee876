"""Template interpreters and their registry."""

from __future__ import annotations

import enum
import logging
from types import MappingProxyType
from typing import Mapping

import _jsonnet
from jinja2 import Environment, StrictUndefined, TemplateError

from ..errors import ConfigurationError, RenderError

logger = logging.getLogger(__name__)

_PLAIN_ENV = Environment(
    undefined=StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)
# Templates only see the collected variables.
_PLAIN_ENV.globals.clear()


def render_plain(source: str, variables: Mapping[str, str], name: str) -> str:
    """Render a Jinja2 template with the variables as its only context.

    Args:
        source: Template text
        variables: Collected variables
        name: Template name used in error messages

    Returns:
        Rendered text
    """
    try:
        template = _PLAIN_ENV.from_string(source)
        return template.render(variables)
    except TemplateError as e:
        raise RenderError(f"plain template '{name}': {e}") from e


def render_jsonnet(source: str, variables: Mapping[str, str], name: str) -> str:
    """Evaluate a JSONNET program with the variables bound as extVars.

    Args:
        source: JSONNET program
        variables: Collected variables
        name: Program name used in error messages

    Returns:
        Manifested JSON text
    """
    try:
        return _jsonnet.evaluate_snippet(name, source, ext_vars=dict(variables))
    except RuntimeError as e:
        raise RenderError(f"jsonnet program '{name}': {e}") from e


class Interpreter(str, enum.Enum):
    """Supported template interpreters."""

    PLAIN = "plain"
    JSONNET = "jsonnet"

    def render(
        self, source: str, variables: Mapping[str, str], *, name: str = "<input>"
    ) -> str:
        logger.debug(f"Rendering {name} with {self.value} ({len(variables)} variable(s))")
        if self is Interpreter.PLAIN:
            return render_plain(source, variables, name)
        return render_jsonnet(source, variables, name)


REGISTRY: Mapping[str, Interpreter] = MappingProxyType(
    {interpreter.value: interpreter for interpreter in Interpreter}
)


def get_interpreter(
    name: str, registry: Mapping[str, Interpreter] = REGISTRY
) -> Interpreter | None:
    """Look up an interpreter by its case-sensitive name."""
    return registry.get(name)


def resolve_interpreter(
    name: str, registry: Mapping[str, Interpreter] = REGISTRY
) -> Interpreter:
    interpreter = get_interpreter(name, registry)
    if interpreter is None:
        raise ConfigurationError(f"unsupported interpreter '{name}'")
    return interpreter
