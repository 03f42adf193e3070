"""Configuration management for the phonecode pipeline."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class InputConfig(BaseModel):
    """Configuration for the input files."""

    words_file: Optional[Path] = None
    numbers_file: Optional[Path] = None
    encoding: str = "utf-8"

    @field_validator("words_file", "numbers_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_file: Optional[Path] = None  # None writes to stdout
    separator: str = Field(default=": ", description="Text between the number and its words")

    @field_validator("output_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class ProcessingConfig(BaseModel):
    """Configuration for processing options."""

    workers: int = Field(default=1, ge=1)
    show_progress: bool = False


class Config(BaseModel):
    """Main configuration for the phonecode pipeline."""

    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False)
