"""
Project configuration loaded from ``blokgen.toml``.

    [storyblok]
    space_id = 12345
    component_group = "storyblok_component_group.default.uuid"

    [commercetools]
    project_key = "var.ct_project_key"
    endpoint = "https://api.europe-west1.gcp.commercetools.com"
    client_id = "var.ct_client_id"
    client_secret = "var.ct_client_secret"
    locale = "en"
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigError
from .integration import CommercetoolsConfig, to_config_value
from .ir import ConfigValue

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = "blokgen.toml"


class StoryblokConfig(BaseModel):
    """Target space settings."""

    space_id: int | None = Field(default=None, ge=0)
    component_group: str | None = None

    @property
    def component_group_uuid(self) -> ConfigValue | None:
        """Component group as a literal UUID or a Terraform reference."""
        if not self.component_group:
            return None
        return to_config_value(self.component_group, "storyblok_component_group.")


class Manifest(BaseModel):
    """Top-level blokgen configuration."""

    storyblok: StoryblokConfig = Field(default_factory=StoryblokConfig)
    commercetools: CommercetoolsConfig | None = None


def load_manifest(path: Path) -> Manifest:
    """
    Load configuration from a blokgen.toml file.

    Args:
        path: Path to the manifest

    Returns:
        Manifest with values from file, or defaults when the file is missing

    Raises:
        ConfigError: If the file is not valid TOML or has invalid values
    """
    if not path.exists():
        logger.debug("No manifest at %s, using defaults", path)
        return Manifest()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    return parse_manifest(data, source=str(path))


def parse_manifest(data: dict[str, Any], source: str = DEFAULT_MANIFEST) -> Manifest:
    """Validate a manifest dict."""
    try:
        return Manifest.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration in {source}: {e}") from e
