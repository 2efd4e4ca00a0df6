from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


def clean_header_value(raw: str) -> str:
    """Drop line terminators and collapse whitespace in a header value."""
    return " ".join(raw.replace("\r", "").replace("\n", "").split())


class PluginHeader(BaseModel):
    """Header fields read from a single PHP file. None means the label is absent."""

    model_config = ConfigDict(frozen=True)
    name: str | None = None
    version: str | None = None


class DetectedPlugin(BaseModel):
    """Everything the detector derives about a plugin."""

    model_config = ConfigDict(frozen=True)
    name: str
    slug: str
    main_file: Path
    version: str

    @field_validator("name", "slug", "version")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        value = clean_header_value(value)
        if not value:
            raise ValueError("must not be empty")
        return value
