"""CLI command implementations for the furniture application.

This package contains subcommands for the furniture CLI, including:
- validate: Check constraint tables for coherence
- templates: Browse column templates
"""

from furniture.cli.commands.templates import templates_app
from furniture.cli.commands.validate import validate_command

__all__ = ["validate_command", "templates_app"]
