"""
Host settings loaded from ``sdui.toml``.

Example sdui.toml:

    [render]
    assets_dir = "assets"   # enables asset existence checks for images
    state = "memory"        # "ephemeral" (default) | "memory"

    [logging]
    level = "DEBUG"

The ``SDUI_LOG_LEVEL`` environment variable overrides ``[logging] level``.
"""

from __future__ import annotations

import logging
import os
import tomllib
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sdui.core.errors import ManifestError

LOG_LEVEL_ENV_VAR = "SDUI_LOG_LEVEL"
DEFAULT_MANIFEST_NAME = "sdui.toml"


class StateMode(StrEnum):
    """Which state store the host gives the interpreter."""

    EPHEMERAL = "ephemeral"  # Re-seed from the document on every build
    MEMORY = "memory"  # Keep values across rebuilds


class RenderConfig(BaseModel):
    """Render settings."""

    model_config = ConfigDict(extra="ignore")

    assets_dir: Path | None = Field(default=None, description="Directory for asset images")
    state: StateMode = Field(default=StateMode.EPHEMERAL, description="State store mode")


class LoggingConfig(BaseModel):
    """Logging settings."""

    model_config = ConfigDict(extra="ignore")

    level: str = Field(default="WARNING", description="Root log level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level


class SduiManifest(BaseModel):
    """Complete host configuration."""

    model_config = ConfigDict(extra="ignore")

    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def log_level(self) -> str:
        """Effective log level, honoring the environment override."""
        env_level = os.getenv(LOG_LEVEL_ENV_VAR)
        if env_level and isinstance(logging.getLevelName(env_level.upper()), int):
            return env_level.upper()
        return self.logging.level


def load_manifest(path: Path | None = None) -> SduiManifest:
    """
    Load host settings.

    Args:
        path: Explicit manifest path. If omitted, ``./sdui.toml`` is used
            when present, otherwise defaults apply.

    Returns:
        Parsed manifest; relative ``assets_dir`` is resolved against the
        manifest's directory.

    Raises:
        ManifestError: If an explicit file is missing, or the file is not
            valid TOML or has invalid values.
    """
    if path is None:
        path = Path.cwd() / DEFAULT_MANIFEST_NAME
        if not path.is_file():
            return SduiManifest()
    elif not path.is_file():
        raise ManifestError("manifest file not found", path)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"invalid TOML: {e}", path) from e

    try:
        manifest = SduiManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"invalid settings: {e}", path) from e

    assets_dir = manifest.render.assets_dir
    if assets_dir is not None and not assets_dir.is_absolute():
        manifest.render.assets_dir = path.parent / assets_dir
    return manifest
