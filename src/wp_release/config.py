"""
Simulator configuration.

Resolved once from the environment (PROJECT_ROOT, ZIP_PATH, ASSETS_DIRECTORY,
STAGING_DIR) and passed explicitly to simulate_deployment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ASSETS_DIRECTORY = "__assets__"


class SimulatorSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore", case_sensitive=False)

    project_root: Path = Field(default_factory=Path.cwd)
    zip_path: Path | None = None  # relative to project_root
    assets_directory: str = DEFAULT_ASSETS_DIRECTORY
    staging_dir: Path | None = None  # parent of per-run staging roots

    @field_validator("zip_path", "staging_dir", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("assets_directory", mode="before")
    @classmethod
    def _blank_is_default(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return DEFAULT_ASSETS_DIRECTORY
        return value

    @property
    def assets_source(self) -> Path:
        return self.project_root / self.assets_directory
