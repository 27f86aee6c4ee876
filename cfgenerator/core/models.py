"""Domain models for a generation run."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..rendering.interpreters import Interpreter

STDIO = "-"


class RenderConfig(BaseModel):
    """Configuration for a single generation run."""

    model_config = ConfigDict(frozen=True)

    interpreter: Interpreter = Field(..., description="Template interpreter")
    input_path: str = Field(default=STDIO, description="Template path or '-'")
    output_paths: list[str] = Field(
        default_factory=lambda: [STDIO],
        min_length=1,
        description="Output paths, '-' meaning stdout",
    )
    volumes: list[str] = Field(
        default_factory=list, description="Volume files or flat directories"
    )
