"""Registry of terminal commands."""

from __future__ import annotations

import builtins
import inspect
import json
import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from loguru import logger

from ascii_oracle.core.commands import FlagValue
from ascii_oracle.core.types import CommandResult

if TYPE_CHECKING:
    from ascii_oracle.core.dispatcher import CommandContext

Handler = Callable[
    [tuple[str, ...], Mapping[str, FlagValue], "CommandContext"],
    CommandResult | Awaitable[CommandResult],
]


def _shorten_text(text: str, width: int = 30, placeholder: str = "...") -> str:
    if len(text) <= width:
        return text
    available = width - len(placeholder)
    if available <= 0:
        return placeholder
    return text[:available] + placeholder


@dataclass(frozen=True)
class CommandDescriptor:
    """Command metadata and runtime handle."""

    name: str
    short_description: str
    detail: str
    usage: str
    handler: Handler

    async def run(
        self,
        args: tuple[str, ...],
        flags: Mapping[str, FlagValue],
        context: CommandContext,
    ) -> CommandResult:
        result = self.handler(args, flags, context)
        if inspect.isawaitable(result):
            result = await result
        return result


class CommandRegistry:
    """Closed set of commands recognised by the dispatcher."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandDescriptor] = {}

    def register(
        self,
        *,
        name: str,
        short_description: str,
        detail: str = "",
        usage: str = "",
    ) -> Callable[[Handler], Handler]:
        key = name.lower()

        def decorator(handler: Handler) -> Handler:
            if key in self._commands:
                raise ValueError(f"Duplicate command name: {key}")
            self._commands[key] = CommandDescriptor(
                name=key,
                short_description=short_description,
                detail=detail,
                usage=usage or key,
                handler=self._wrap_handler(key, handler),
            )
            return handler

        return decorator

    def has(self, name: str) -> bool:
        return name.lower() in self._commands

    def get(self, name: str) -> CommandDescriptor | None:
        return self._commands.get(name.lower())

    def names(self) -> builtins.list[str]:
        return list(self._commands)

    def descriptors(self) -> builtins.list[CommandDescriptor]:
        return list(self._commands.values())

    def compact_rows(self) -> builtins.list[str]:
        width = max((len(item.usage) for item in self.descriptors()), default=0)
        return [f"  {item.usage.ljust(width)}  {item.short_description}" for item in self.descriptors()]

    def detail(self, name: str) -> str:
        descriptor = self.get(name)
        if descriptor is None:
            raise KeyError(name)

        lines = [f"{descriptor.name.upper()} - {descriptor.short_description}", "", f"Usage: {descriptor.usage}"]
        if descriptor.detail:
            lines.extend(["", descriptor.detail])
        return "\n".join(lines)

    def _log_call(self, name: str, args: tuple[str, ...], flags: Mapping[str, FlagValue]) -> None:
        params = [_shorten_text(json.dumps(arg, ensure_ascii=False)) for arg in args]
        params.extend(f"{key}={_shorten_text(json.dumps(value, ensure_ascii=False))}" for key, value in flags.items())
        logger.info("command.call.start name={} {{ {} }}", name, ", ".join(params))

    def _wrap_handler(self, name: str, handler: Handler) -> Handler:
        async def _handler(
            args: tuple[str, ...],
            flags: Mapping[str, FlagValue],
            context: CommandContext,
        ) -> CommandResult:
            self._log_call(name, args, flags)
            start = time.monotonic()
            try:
                result: Any = handler(args, flags, context)
                if inspect.isawaitable(result):
                    result = await result
                return result
            except Exception:
                logger.exception("command.call.error name={}", name)
                raise
            finally:
                duration = time.monotonic() - start
                logger.info("command.call.end name={} duration={:.3f}ms", name, duration * 1000)

        return _handler
