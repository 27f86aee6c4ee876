"""cfgenerator - Volume-driven configuration renderer.

Renders plain-text (Jinja2) or JSONNET templates with variables loaded from
mounted files and directories.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
