"""ASCII Oracle - a retro terminal for ASCII art, 3D shapes, and math."""

from .core.commands import ParsedCommand, parse_command, tokenize
from .core.dispatcher import CommandDispatcher
from .core.types import CommandResult

__version__ = "1.0.0"

__all__ = ["CommandDispatcher", "CommandResult", "ParsedCommand", "parse_command", "tokenize"]
