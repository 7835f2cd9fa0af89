"""Built-in terminal commands."""

from __future__ import annotations

from ascii_oracle.core.registry import CommandRegistry

from .art import register_art_commands
from .general import register_general_commands
from .science import register_science_commands
from .search import register_search_command
from .solve import register_solve_command


def build_registry() -> CommandRegistry:
    """Create a registry holding every built-in command."""

    registry = CommandRegistry()
    register_general_commands(registry)
    register_art_commands(registry)
    register_solve_command(registry)
    register_science_commands(registry)
    register_search_command(registry)
    return registry


__all__ = ["build_registry"]
