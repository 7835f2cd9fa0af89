"""Command result types shared by the dispatcher and the host."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol

OutputKind = Literal["info", "success", "error", "warning", "ascii", "math"]
UploadKind = Literal["image", "video"]
Output = str | tuple[str, ...] | None

UPLOAD_KINDS: tuple[UploadKind, ...] = ("image", "video")


@dataclass(frozen=True)
class PowerUp:
    """Celebratory notification requested by a command."""

    type: str
    message: str


@dataclass(frozen=True)
class HologramSpec:
    """Shape and caption for the 3D surface."""

    type: str
    text: str


class HologramSurface(Protocol):
    """Host capability for commands that must switch into 3D mode synchronously."""

    def enter_hologram(self, spec: HologramSpec) -> None: ...


@dataclass(frozen=True, kw_only=True)
class _ResultBase:
    output: Output = None
    clear_screen: bool = False
    power_up: PowerUp | None = None
    trigger_upload: UploadKind | None = None
    exit_hologram: bool = False

    def lines(self) -> list[str]:
        if self.output is None:
            return []
        if isinstance(self.output, str):
            return self.output.split("\n") if self.output else []
        return list(self.output)

    @property
    def text(self) -> str:
        return "\n".join(self.lines())


@dataclass(frozen=True, kw_only=True)
class InfoResult(_ResultBase):
    kind: Literal["info"] = field(default="info", init=False)
    success: bool = field(default=True, init=False)


@dataclass(frozen=True, kw_only=True)
class SuccessResult(_ResultBase):
    kind: Literal["success"] = field(default="success", init=False)
    success: bool = field(default=True, init=False)


@dataclass(frozen=True, kw_only=True)
class WarningResult(_ResultBase):
    kind: Literal["warning"] = field(default="warning", init=False)
    success: bool = field(default=True, init=False)


@dataclass(frozen=True, kw_only=True)
class ErrorResult(_ResultBase):
    kind: Literal["error"] = field(default="error", init=False)
    success: bool = field(default=False, init=False)


@dataclass(frozen=True, kw_only=True)
class AsciiResult(_ResultBase):
    art_name: str | None = None
    kind: Literal["ascii"] = field(default="ascii", init=False)
    success: bool = field(default=True, init=False)


@dataclass(frozen=True, kw_only=True)
class MathResult(_ResultBase):
    value: str | None = None
    kind: Literal["math"] = field(default="math", init=False)
    success: bool = field(default=True, init=False)


CommandResult = InfoResult | SuccessResult | WarningResult | ErrorResult | AsciiResult | MathResult


def usage_error(usage: str, *hints: str) -> ErrorResult:
    """Build the error returned when a known command gets bad arguments."""

    return ErrorResult(output=(f"Usage: {usage}", *hints))
