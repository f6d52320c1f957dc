"""
Output stacks for blokgen.

Stacks turn built components into provisioning configuration.
"""

from .terraform import TerraformStack, render_value

__all__ = ["TerraformStack", "render_value"]
