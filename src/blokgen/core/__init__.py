"""Core blokgen functionality: IR, directive lookup, field classification, grouping, component assembly."""

from . import ir
from .assembler import build_component, build_components, build_schema
from .classifier import classify
from .directives import DirectiveName, FieldArg, TypeArg, resolve
from .errors import (
    BlokgenError,
    ConfigError,
    DuplicateFieldError,
    ErrorContext,
    MissingIntegrationConfigError,
    SchemaLoadError,
    UnsupportedTypeError,
)
from .grouping import build_groups
from .integration import CommercetoolsConfig, category_options, connection_options, to_config_value
from .manifest import Manifest, load_manifest

__all__ = [
    "ir",
    # Errors
    "BlokgenError",
    "ConfigError",
    "DuplicateFieldError",
    "ErrorContext",
    "MissingIntegrationConfigError",
    "SchemaLoadError",
    "UnsupportedTypeError",
    # Directives
    "DirectiveName",
    "FieldArg",
    "TypeArg",
    "resolve",
    # Mapping
    "build_component",
    "build_components",
    "build_groups",
    "build_schema",
    "classify",
    # Integration
    "CommercetoolsConfig",
    "category_options",
    "connection_options",
    "to_config_value",
    # Configuration
    "Manifest",
    "load_manifest",
]
