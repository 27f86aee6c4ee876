"""Main CLI application."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.models import RenderConfig
from ..errors import CfgeneratorError, OutputError
from ..rendering import engine
from ..rendering.interpreters import resolve_interpreter
from ..rendering.io import describe, open_input, open_outputs, write_all
from ..settings import get_settings
from .parsers import parse_log_level, parse_outputs

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cfgenerator",
    help="Render plain-text or JSONNET configuration from mounted volumes.",
    add_completion=False,
)


def build_config(
    interpreter_name: str,
    input_path: str,
    output_paths: list[str],
    volumes: list[str],
) -> RenderConfig:
    """Resolve CLI values into a run configuration.

    The interpreter is resolved first so an unknown name fails before any
    file is touched.
    """
    interpreter = resolve_interpreter(interpreter_name)
    return RenderConfig(
        interpreter=interpreter,
        input_path=input_path,
        output_paths=output_paths,
        volumes=volumes,
    )


def run(config: RenderConfig) -> None:
    """Generate the content once and write it to every output."""
    with open_input(config.input_path) as stream:
        content = engine.generate(
            config.interpreter,
            stream,
            config.volumes,
            source_name=describe(config.input_path),
        )

    failed: list[str] = []
    try:
        with ExitStack() as stack:
            outputs = open_outputs(config.output_paths, stack)
            failed = write_all(content, outputs)
    except OutputError as e:
        if not failed:
            raise
        logger.debug(str(e))

    if failed:
        names = ", ".join(f"'{describe(path)}'" for path in failed)
        raise OutputError(f"can't write output(s): {names}")

    logger.debug(f"Wrote {len(config.output_paths)} output(s)")


@app.command()
def generate(
    volumes: Annotated[
        Optional[list[str]],
        typer.Argument(
            help="Files or flat directories to load as variables.",
            metavar="[VOLUME-PATHS]...",
            show_default=False,
        ),
    ] = None,
    interpreter: Annotated[
        Optional[str],
        typer.Option(
            "--interpreter",
            help="Template interpreter: plain (Jinja2) or jsonnet (default: jsonnet).",
            metavar="plain|jsonnet",
        ),
    ] = None,
    input_path: Annotated[
        Optional[str],
        typer.Option(
            "--in",
            help="Template path, '-' for STDIN (default: -).",
            metavar="PATH|-",
        ),
    ] = None,
    output_paths: Annotated[
        Optional[list[str]],
        typer.Option(
            "--out",
            help="Output path, '-' for STDOUT (default: -). Repeatable.",
            metavar="PATH|-",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render a template with variables read from volume files.

    Every regular file of the VOLUME-PATHS becomes a variable named after the
    file, holding the file content. Directories are not traversed
    recursively. When two files share a name, the last one wins.

    With jsonnet the variables are JSONNET external variables
    (std.extVar('NAME')); with plain they form the Jinja2 context
    ({{ NAME }}). Plain templates use Jinja2 syntax, not Go templates:
    write {{ NAME }} rather than {{.NAME}}.

    Example: cfgenerator --in app.jsonnet --out config.json --out - /data/configmap /data/secrets
    """
    settings = get_settings()

    try:
        # Configure logging
        logging.basicConfig(
            level=logging.DEBUG if verbose else parse_log_level(settings.log_level),
            format="[%(levelname)s] %(message)s",
        )

        logger.debug("Starting cfgenerator")

        config = build_config(
            interpreter if interpreter is not None else settings.interpreter,
            input_path if input_path is not None else settings.input,
            parse_outputs(output_paths),
            list(volumes or []),
        )
        logger.debug(
            f"Config: {config.interpreter.value}, {len(config.volumes)} volume(s), "
            f"{len(config.output_paths)} output(s)"
        )
        run(config)
    except CfgeneratorError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
