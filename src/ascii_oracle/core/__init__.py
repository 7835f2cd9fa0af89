"""Command pipeline: tokenizer, parser, registry, and dispatcher."""

from .commands import ParsedCommand, get_suggestions, parse_command, tokenize
from .dispatcher import CommandContext, CommandDispatcher, CommandServices
from .registry import CommandDescriptor, CommandRegistry
from .types import CommandResult, HologramSpec, HologramSurface, PowerUp

__all__ = [
    "CommandContext",
    "CommandDescriptor",
    "CommandDispatcher",
    "CommandRegistry",
    "CommandResult",
    "CommandServices",
    "HologramSpec",
    "HologramSurface",
    "ParsedCommand",
    "PowerUp",
    "get_suggestions",
    "parse_command",
    "tokenize",
]
