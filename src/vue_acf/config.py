"""Run configuration for a single parse invocation."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_SOURCE_DIR = Path(".")
DEFAULT_DEST_DIR = "./acf-json"
DEFAULT_EXTENSION = ".vue"


class ParseConfig(BaseModel):
    """Where to read one component from and where to write its field group."""

    component: str = Field(min_length=1, description="Component name, also the source file stem.")
    source_dir: Path = Field(default=DEFAULT_SOURCE_DIR, description="Directory containing the component source.")
    dest_dir: Path = Field(default=Path(DEFAULT_DEST_DIR), description="Directory the field-group JSON is written to.")
    extension: str = Field(default=DEFAULT_EXTENSION, description="Component source file extension.")

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("component")
    @classmethod
    def validate_component(cls, v: str) -> str:
        """Reject names that would escape ``source_dir``."""
        if "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"Component name {v!r} must be a bare name, not a path.")
        return v

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"Extension {v!r} must start with a dot, e.g. '.vue'.")
        return v

    @property
    def source_path(self) -> Path:
        return self.source_dir / f"{self.component}{self.extension}"
