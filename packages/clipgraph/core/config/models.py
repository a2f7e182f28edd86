"""Configuration models for clipgraph."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stderr when unset)")


class AppConfig(BaseModel):
    """Application configuration for a graph build.

    Example:
        >>> config = AppConfig(animations_dir="assets/anims", json_indent=2)
        >>> config.output_path is None  # print to stdout
        True
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    animations_dir: str = Field(
        default="animations", description="Folder walked for animation files"
    )
    output_path: str | None = Field(
        default=None, description="JSON output file (stdout when unset)"
    )
    json_indent: int | None = Field(
        default=None, ge=0, description="Indent for JSON output (compact when unset)"
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("clipgraph.yaml")
