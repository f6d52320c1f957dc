"""
blokgen - Storyblok component configuration from annotated GraphQL schemas.

Maps object types carrying ``@storyblok`` and fields carrying
``@storyblokField`` to ``storyblok_component`` resources for Terraform.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

# Re-export commonly used types for convenience
from .core import ir
from .core.assembler import build_component, build_components
from .core.errors import (
    BlokgenError,
    ConfigError,
    DuplicateFieldError,
    MissingIntegrationConfigError,
    SchemaLoadError,
    UnsupportedTypeError,
)

try:
    __version__ = _metadata_version("blokgen")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ir",
    "build_component",
    "build_components",
    "BlokgenError",
    "ConfigError",
    "DuplicateFieldError",
    "MissingIntegrationConfigError",
    "SchemaLoadError",
    "UnsupportedTypeError",
]
