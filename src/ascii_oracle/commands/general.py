"""Help, screen, and informational commands."""

from __future__ import annotations

from collections.abc import Mapping

from ascii_oracle import __version__
from ascii_oracle.core.commands import FlagValue
from ascii_oracle.core.dispatcher import CommandContext
from ascii_oracle.core.registry import CommandRegistry
from ascii_oracle.core.types import CommandResult, InfoResult

ABOUT_BANNER = (
    "╔═══════════════════════════════════════╗",
    f"║{f'ASCII ORACLE v{__version__}'.center(39)}║",
    "╠═══════════════════════════════════════╣",
    "║  A retro terminal for ASCII art,      ║",
    "║  3D visualization, and math/science   ║",
    "║                                       ║",
    "║  Type help to see what it can do.     ║",
    "╚═══════════════════════════════════════╝",
)


def register_general_commands(registry: CommandRegistry) -> None:
    @registry.register(
        name="help",
        short_description="Show help",
        usage="help [command]",
        detail="Without a command, lists every command. With one, shows its usage and examples.",
    )
    def help_command(args: tuple[str, ...], _flags: Mapping[str, FlagValue], ctx: CommandContext) -> CommandResult:
        if args:
            topic = args[0].lower()
            if not ctx.registry.has(topic):
                return InfoResult(output=f"No help available for: {topic}")
            return InfoResult(output=ctx.registry.detail(topic))

        return InfoResult(
            output=(
                "ASCII ORACLE - Available Commands",
                "",
                *ctx.registry.compact_rows(),
                "",
                'Type "help <command>" for more details.',
            )
        )

    @registry.register(name="clear", short_description="Clear the screen")
    def clear(_args: tuple[str, ...], _flags: Mapping[str, FlagValue], _ctx: CommandContext) -> CommandResult:
        return InfoResult(clear_screen=True)

    @registry.register(name="exit", short_description="Leave 3D hologram mode")
    def exit_command(_args: tuple[str, ...], _flags: Mapping[str, FlagValue], _ctx: CommandContext) -> CommandResult:
        return InfoResult(output="Exited 3D mode", exit_hologram=True)

    @registry.register(name="about", short_description="About this app")
    def about(_args: tuple[str, ...], _flags: Mapping[str, FlagValue], _ctx: CommandContext) -> CommandResult:
        return InfoResult(output=ABOUT_BANNER)

    @registry.register(name="version", short_description="Show version")
    def version(_args: tuple[str, ...], _flags: Mapping[str, FlagValue], _ctx: CommandContext) -> CommandResult:
        return InfoResult(output=f"ASCII Oracle v{__version__}")
