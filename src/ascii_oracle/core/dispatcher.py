"""Routing and command execution."""

from __future__ import annotations

import time
from dataclasses import dataclass

from loguru import logger

from ascii_oracle.art import ArtRepository
from ascii_oracle.core.commands import ParsedCommand, parse_command
from ascii_oracle.core.registry import CommandRegistry
from ascii_oracle.core.types import CommandResult, ErrorResult, HologramSurface, InfoResult
from ascii_oracle.errors import CollaboratorUnavailableError
from ascii_oracle.services import ComputationEngine, SearchBridge


@dataclass(frozen=True)
class CommandServices:
    """External collaborators shared by every command invocation."""

    art: ArtRepository
    search: SearchBridge
    computation: ComputationEngine | None = None


@dataclass(frozen=True)
class CommandContext:
    """What a handler may reach beyond its own arguments."""

    services: CommandServices
    surface: HologramSurface
    registry: CommandRegistry


class CommandDispatcher:
    """Validate command names and route them to registered handlers."""

    def __init__(self, registry: CommandRegistry, services: CommandServices) -> None:
        self._registry = registry
        self._services = services

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def is_valid_command(self, name: str) -> bool:
        return self._registry.has(name)

    async def execute(self, parsed: ParsedCommand, surface: HologramSurface) -> CommandResult:
        if parsed.is_empty:
            return InfoResult(output="")

        descriptor = self._registry.get(parsed.command)
        if descriptor is None:
            logger.debug("command.unknown name={}", parsed.command)
            return ErrorResult(output=(f"Unknown command: {parsed.command}", 'Type "help" for available commands.'))

        context = CommandContext(services=self._services, surface=surface, registry=self._registry)
        try:
            return await descriptor.run(parsed.args, parsed.flags, context)
        except CollaboratorUnavailableError as exc:
            return ErrorResult(output=str(exc))
        except Exception as exc:
            logger.warning("command.failed name={} error={!r}", descriptor.name, exc)
            return ErrorResult(output=f"Command {descriptor.name} failed: {exc!s}")

    async def run_line(self, line: str, surface: HologramSurface) -> CommandResult:
        start = time.monotonic()
        parsed = parse_command(line)
        result = await self.execute(parsed, surface)
        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.debug(
            "command.done raw={!r} kind={} success={} elapsed_ms={}",
            parsed.raw,
            result.kind,
            result.success,
            elapsed_ms,
        )
        return result
