"""Built-in pixel art library."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

_LIBRARY: dict[str, tuple[str, ...]] = {
    "mario": (
        "    ████████    ",
        "   ██████████   ",
        "   ███  █  █    ",
        "  ██ █ ███ ██   ",
        "  ██ █ ███ ██   ",
        "  ██████████    ",
        "    ████████    ",
        "   ██████████   ",
        "  ████████████  ",
        " ██ ████████ ██ ",
        " ██ ████████ ██ ",
        " ██ ██    ██ ██ ",
        "    ██    ██    ",
        "   ████  ████   ",
        "  ██████████████",
    ),
    "mushroom": (
        "      ████████      ",
        "    ██████████████    ",
        "  ████  ████  ████  ",
        " ████  ██████  ████ ",
        " ██████████████████ ",
        "██████████████████████",
        "██████████████████████",
        " ████████████████████ ",
        "  ██████████████████  ",
        "    ████████████    ",
        "      ████████      ",
    ),
    "star": (
        "        ██        ",
        "       ████       ",
        "      ██████      ",
        "     ████████     ",
        "████████████████████",
        " ██████████████████ ",
        "  ████████████████  ",
        "   ██████████████   ",
        "  ████████████████  ",
        " ██████  ██  ██████ ",
        "██████    ██    ██████",
    ),
    "coin": (
        "    ██████████    ",
        "  ██          ██  ",
        " ██    ████    ██ ",
        "██    ██████    ██",
        "██    ██  ██    ██",
        "██    ██████    ██",
        "██    ██  ██    ██",
        "██    ██████    ██",
        " ██    ████    ██ ",
        "  ██          ██  ",
        "    ██████████    ",
    ),
    "ghost": (
        "    ██████████    ",
        "  ██          ██  ",
        " ██  ██    ██  ██ ",
        " ██  ██    ██  ██ ",
        "██              ██",
        "██              ██",
        "██   ██████████   ██",
        "██              ██",
        "████████████████████",
        "██  ██  ██  ██  ██",
    ),
    "pipe": (
        "████████████████████",
        "██                ██",
        "████████████████████",
        "  ██            ██  ",
        "  ██            ██  ",
        "  ██            ██  ",
        "  ██            ██  ",
        "  ██            ██  ",
        "  ██            ██  ",
        "  ████████████████  ",
    ),
    "heart": (
        "  ████    ████  ",
        " ██████  ██████ ",
        "████████████████",
        "████████████████",
        "████████████████",
        " ██████████████ ",
        "  ████████████  ",
        "    ████████    ",
        "      ████      ",
        "       ██       ",
    ),
    "fire": (
        "      ██      ",
        "     ████     ",
        "    ██████    ",
        "   ████████   ",
        "  ██████████  ",
        "  ██  ████  ██  ",
        " ████ ████ ████ ",
        " ██████████████ ",
        "  ████████████  ",
        "   ██████████   ",
        "    ████████    ",
    ),
    "sword": (
        "          ██",
        "        ████",
        "      ████  ",
        "    ████    ",
        "  ████      ",
        "████        ",
        "██          ",
        "████        ",
        "  ██        ",
    ),
    "shield": (
        "████████████████████",
        "██                ██",
        "██  ████████████  ██",
        "██  ██        ██  ██",
        "██  ██  ████  ██  ██",
        "██  ██  ████  ██  ██",
        " ██ ██        ██ ██ ",
        " ██ ████████████ ██ ",
        "  ██            ██  ",
        "   ██          ██   ",
        "    ████████████    ",
        "      ████████      ",
    ),
    "rocket": (
        "      ██      ",
        "    ██████    ",
        "   ████████   ",
        "  ██████████  ",
        "  ██████████  ",
        "  ██████████  ",
        " ████████████ ",
        " ██ ██████ ██ ",
        "██  ██████  ██",
        "    ██  ██    ",
        "   ██    ██   ",
        "  ██      ██  ",
    ),
    "alien": (
        "    ████████████    ",
        "  ██            ██  ",
        " ██  ██      ██  ██ ",
        " ██  ██      ██  ██ ",
        "██    ████████    ██",
        "██  ██        ██  ██",
        "██  ██  ████  ██  ██",
        " ██    ████    ██ ",
        "  ████████████████  ",
        "    ██  ██  ██    ",
    ),
    "pacman": (
        "    ████████    ",
        "  ████████████  ",
        " ██████████████ ",
        "████████████    ",
        "██████████      ",
        "████████        ",
        "██████████      ",
        "████████████    ",
        " ██████████████ ",
        "  ████████████  ",
        "    ████████    ",
    ),
    "invader": (
        "    ██      ██    ",
        "      ██  ██      ",
        "    ██████████    ",
        "  ████  ████  ████  ",
        "████████████████████",
        "██  ██████████  ██",
        "██  ██      ██  ██",
        "      ████████      ",
    ),
    "tree": (
        "        ██        ",
        "       ████       ",
        "      ██████      ",
        "     ████████     ",
        "    ██████████    ",
        "   ████████████   ",
        "  ██████████████  ",
        " ████████████████ ",
        "██████████████████",
        "        ██        ",
        "        ██        ",
        "       ████       ",
    ),
    "cat": (
        "  ██          ██  ",
        " ████        ████ ",
        "██████████████████",
        "██  ██    ██  ██",
        "██  ██    ██  ██",
        "██████████████████",
        "██    ████    ██",
        "██      ██      ██",
        "  ██████████████  ",
        "    ██      ██    ",
    ),
    "dog": (
        "████              ",
        "██████            ",
        "████████████████████",
        "██  ██        ██  ██",
        "██  ██        ██  ██",
        "██████████████████████",
        "██                  ██",
        "██    ██████████    ██",
        "  ████        ████  ",
        "    ██        ██    ",
    ),
    "skull": (
        "    ████████████    ",
        "  ██            ██  ",
        " ██  ████  ████  ██ ",
        " ██  ████  ████  ██ ",
        "██                ██",
        "██      ████      ██",
        " ██              ██ ",
        "  ██  ██  ██  ██  ",
        "   ██████████████   ",
    ),
    "crown": (
        "██      ██      ██",
        "████  ██████  ████",
        "████████████████████",
        " ██████████████████ ",
        "  ████████████████  ",
        "   ██████████████   ",
    ),
    "diamond": (
        "        ██        ",
        "      ██████      ",
        "    ██████████    ",
        "  ██████████████  ",
        "████████████████████",
        "  ██████████████  ",
        "    ██████████    ",
        "      ██████      ",
        "        ██        ",
    ),
}

ART_LIBRARY: Mapping[str, tuple[str, ...]] = MappingProxyType(_LIBRARY)


class ArtRepository:
    """Case-insensitive lookup over an art library."""

    def __init__(self, library: Mapping[str, tuple[str, ...]] = ART_LIBRARY) -> None:
        self._library = {name.lower(): tuple(lines) for name, lines in library.items()}

    def lookup_art(self, name: str) -> tuple[str, ...] | None:
        return self._library.get(name.strip().lower())

    def list_art_names(self) -> list[str]:
        return list(self._library)

    def search(self, query: str) -> list[str]:
        term = query.strip().lower()
        if not term:
            return []
        return [name for name in self._library if term in name]
