"""Host-side terminal session state."""

from __future__ import annotations

import asyncio
from collections import deque

from loguru import logger

from ascii_oracle.art import ArtRepository
from ascii_oracle.commands import build_registry
from ascii_oracle.config import Settings
from ascii_oracle.core.dispatcher import CommandDispatcher, CommandServices
from ascii_oracle.core.types import CommandResult, HologramSpec, PowerUp, UploadKind
from ascii_oracle.services import FallbackSearchBridge, HttpComputationEngine, HttpSearchBridge, LocalSearchBridge

HISTORY_LIMIT = 100


class TerminalSession:
    """One terminal's mode flags and command history.

    The session is the hologram surface handed to the dispatcher. Commands run
    one at a time: a line submitted while another is still awaiting a
    collaborator waits its turn, so results arrive in submission order.
    """

    def __init__(self, dispatcher: CommandDispatcher) -> None:
        self._dispatcher = dispatcher
        self._lock = asyncio.Lock()
        self.history: deque[str] = deque(maxlen=HISTORY_LIMIT)
        self.hologram_mode = False
        self.hologram: HologramSpec | None = None
        self.power_up: PowerUp | None = None
        self.pending_upload: UploadKind | None = None
        self.clear_requests = 0

    @property
    def dispatcher(self) -> CommandDispatcher:
        return self._dispatcher

    def enter_hologram(self, spec: HologramSpec) -> None:
        self.hologram = spec
        self.hologram_mode = True
        logger.debug("session.hologram.enter type={} text={!r}", spec.type, spec.text)

    def exit_hologram(self) -> None:
        if self.hologram_mode:
            logger.debug("session.hologram.exit")
        self.hologram = None
        self.hologram_mode = False

    def apply(self, result: CommandResult) -> None:
        """Apply the host-side effects a result requests."""
        if result.clear_screen:
            self.clear_requests += 1
        if result.exit_hologram:
            self.exit_hologram()
        if result.power_up is not None:
            self.power_up = result.power_up
        if result.trigger_upload is not None:
            self.pending_upload = result.trigger_upload

    async def submit(self, line: str) -> CommandResult:
        async with self._lock:
            if line.strip():
                self.history.append(line.strip())
            result = await self._dispatcher.run_line(line, self)
            self.apply(result)
            return result


def build_services(settings: Settings) -> CommandServices:
    art = ArtRepository()
    local = LocalSearchBridge(art)
    if settings.api_base is None:
        return CommandServices(art=art, search=local)

    timeout = settings.request_timeout_seconds
    return CommandServices(
        art=art,
        search=FallbackSearchBridge(HttpSearchBridge(settings.api_base, timeout_seconds=timeout), local),
        computation=HttpComputationEngine(settings.api_base, timeout_seconds=timeout),
    )


def create_session(settings: Settings) -> TerminalSession:
    dispatcher = CommandDispatcher(build_registry(), build_services(settings))
    return TerminalSession(dispatcher)
