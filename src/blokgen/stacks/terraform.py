"""
Terraform output for blokgen.

Renders components as ``storyblok_component`` resources in Terraform's JSON
syntax. Literal strings are escaped so Terraform does not evaluate them;
references become ``${...}`` interpolations.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..core.errors import BlokgenError
from ..core.ir import Component, LiteralValue, ReferenceValue

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "storyblok_component"


def escape_template(text: str) -> str:
    """Escape template sequences so Terraform reads ``text`` as a literal."""
    return text.replace("${", "$${").replace("%{", "%%{")


def render_value(value: Any) -> Any:
    """Render IR values into Terraform JSON values; only references are interpolated."""
    if isinstance(value, LiteralValue):
        return escape_template(value.value)
    if isinstance(value, str):
        return escape_template(value)
    if isinstance(value, ReferenceValue):
        return f"${{{value.expression}}}"
    if isinstance(value, dict):
        return {k: render_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [render_value(v) for v in value]
    return value


class TerraformStack:
    """
    Terraform JSON stack for Storyblok components.

    Creates one file with:
    - One ``storyblok_component`` resource per component, labelled by name
    """

    def render(self, components: list[Component]) -> dict[str, Any]:
        """
        Build the Terraform JSON document.

        Args:
            components: Components to render

        Returns:
            Document of the form ``{"resource": {"storyblok_component": {...}}}``
        """
        resources: dict[str, Any] = {}
        for component in components:
            if component.name in resources:
                raise BlokgenError(f"Duplicate component name {component.name}")
            resources[component.name] = render_value(component.to_wire())
        return {"resource": {RESOURCE_TYPE: resources}}

    def dumps(self, components: list[Component]) -> str:
        return json.dumps(self.render(components), indent=2) + "\n"

    def generate(self, components: list[Component], output_path: Path) -> None:
        """
        Write the Terraform JSON file.

        Args:
            components: Components to render
            output_path: Target file, usually ``components.tf.json``

        Raises:
            BlokgenError: If the file cannot be written
        """
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.dumps(components), encoding="utf-8")
        except OSError as e:
            raise BlokgenError(f"Failed to write Terraform configuration: {e}") from e
        logger.info("Wrote %d components to %s", len(components), output_path)
