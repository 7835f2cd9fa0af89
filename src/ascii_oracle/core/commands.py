"""Command parsing helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

QUOTE_CHARS = ('"', "'")
FlagValue = str | bool

SUGGESTIONS: tuple[str, ...] = (
    "help",
    "draw cat",
    "draw heart",
    "draw mario",
    "draw --list",
    "upload image",
    "upload video",
    "hologram cube",
    "hologram sphere",
    "hologram dna",
    'hologram text "HELLO"',
    "solve 2+2",
    "solve sqrt(16)",
    "solve 2^10",
    "physics projectile 20 45",
    "physics freefall 100",
    "chemistry element Fe",
    "chemistry molar H2O",
    "search dragon",
    "clear",
    "exit",
    "about",
    "version",
)


@dataclass(frozen=True)
class ParsedCommand:
    """One parsed terminal line."""

    command: str
    args: tuple[str, ...] = ()
    flags: Mapping[str, FlagValue] = field(default_factory=lambda: MappingProxyType({}))
    raw: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.command


def tokenize(text: str) -> list[str]:
    """Split a line on spaces, keeping quoted spans together.

    Quote characters are consumed. A quote of the other kind inside a quoted
    span is literal, and an unterminated quote swallows the rest of the line.
    """

    tokens: list[str] = []
    current: list[str] = []
    quote_char = ""

    for char in text:
        if not quote_char and char in QUOTE_CHARS:
            quote_char = char
        elif quote_char and char == quote_char:
            quote_char = ""
        elif not quote_char and char == " ":
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens


def _is_flag_like(token: str) -> bool:
    return token.startswith("-")


def parse_command(text: str) -> ParsedCommand:
    """Parse a terminal line into command name, positional args and flags."""

    raw = text.strip()
    tokens = tokenize(raw)
    if not tokens:
        return ParsedCommand(command="", raw=raw)

    args: list[str] = []
    flags: dict[str, FlagValue] = {}
    idx = 1
    while idx < len(tokens):
        token = tokens[idx]
        has_value = idx + 1 < len(tokens) and not _is_flag_like(tokens[idx + 1])

        if token.startswith("--"):
            key = token[2:]
            if "=" in key:
                name, value = key.split("=", 1)
                flags[name] = value
                idx += 1
                continue

            if has_value:
                flags[key] = tokens[idx + 1]
                idx += 2
                continue

            flags[key] = True
            idx += 1
            continue

        # Only "-x" is a short flag; "-abc" and "-12" stay positional.
        if token.startswith("-") and len(token) == 2:
            key = token[1:]
            if has_value:
                flags[key] = tokens[idx + 1]
                idx += 2
                continue

            flags[key] = True
            idx += 1
            continue

        args.append(token)
        idx += 1

    return ParsedCommand(
        command=tokens[0].lower(),
        args=tuple(args),
        flags=MappingProxyType(flags),
        raw=raw,
    )


def get_suggestions(partial: str) -> list[str]:
    """Return example command lines starting with the given text."""

    prefix = partial.lower()
    return [line for line in SUGGESTIONS if line.lower().startswith(prefix)]
