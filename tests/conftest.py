from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from ascii_oracle.art import ArtRepository
from ascii_oracle.commands import build_registry
from ascii_oracle.core.dispatcher import CommandDispatcher, CommandServices
from ascii_oracle.core.types import HologramSpec
from ascii_oracle.services import LocalSearchBridge


@dataclass
class FakeSurface:
    entered: list[HologramSpec] = field(default_factory=list)

    def enter_hologram(self, spec: HologramSpec) -> None:
        self.entered.append(spec)


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def art() -> ArtRepository:
    return ArtRepository()


@pytest.fixture
def dispatcher(art: ArtRepository) -> CommandDispatcher:
    return CommandDispatcher(build_registry(), CommandServices(art=art, search=LocalSearchBridge(art)))
