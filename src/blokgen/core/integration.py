"""
Commercetools connection settings for custom field plugins.

Values that start with a Terraform variable or local prefix are embedded as
references (``var.ct_client_secret``), everything else as quoted literals.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .ir import ConfigValue, CustomOption, LiteralValue, ReferenceValue

REFERENCE_PREFIXES = ("var.", "local.")


class CommercetoolsConfig(BaseModel):
    """Connection settings for the commercetools plugins."""

    project_key: str
    endpoint: str
    client_id: str
    client_secret: str
    locale: str

    model_config = ConfigDict(frozen=True)


def to_config_value(value: str, *prefixes: str) -> ConfigValue:
    """
    Classify a configured string as a literal or a Terraform reference.

    Args:
        value: Configured string
        *prefixes: Extra reference prefixes besides ``var.`` and ``local.``

    Returns:
        ReferenceValue when ``value`` starts with a reference prefix, else LiteralValue
    """
    if value.startswith(REFERENCE_PREFIXES + prefixes):
        return ReferenceValue(expression=value)
    return LiteralValue(value=value)


def _option(name: str, value: str) -> CustomOption:
    return CustomOption(name=name, value=to_config_value(value))


def connection_options(config: CommercetoolsConfig) -> list[CustomOption]:
    """Options for the ``sb-commercetools`` product picker."""
    return [
        _option("endpoint", config.endpoint),
        _option("clientId", config.client_id),
        _option("clientSecret", config.client_secret),
        _option("locale", config.locale),
    ]


def category_options(config: CommercetoolsConfig) -> list[CustomOption]:
    """Options for the ``ct-category`` picker."""
    return [
        _option("projectKey", config.project_key),
        _option("clientId", config.client_id),
        _option("clientSecret", config.client_secret),
    ]
