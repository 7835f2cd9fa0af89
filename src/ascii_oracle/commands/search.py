"""Art search command."""

from __future__ import annotations

from collections.abc import Mapping

from ascii_oracle.core.commands import FlagValue
from ascii_oracle.core.dispatcher import CommandContext
from ascii_oracle.core.registry import CommandRegistry
from ascii_oracle.core.types import CommandResult, ErrorResult, InfoResult, WarningResult, usage_error
from ascii_oracle.errors import CollaboratorUnavailableError
from ascii_oracle.services import SearchResponse

MAX_RESPONSE_LINES = 15
MAX_MATCHES = 5
MAX_SOURCES = 3


def format_search(response: SearchResponse) -> tuple[str, ...]:
    """Render a successful search answer as terminal lines."""

    lines: list[str] = [f'Search: "{response.query}"', ""]
    if response.message:
        lines.extend([response.message, ""])
    if response.ai_powered:
        lines.extend(["AI-Powered Search Results", ""])

    if response.ascii_art:
        lines.append("=== Generated ASCII Art ===")
        lines.extend(response.ascii_art.split("\n"))
        lines.extend(["===========================", ""])

    if response.response:
        body = response.response.split("\n")
        lines.extend(body[:MAX_RESPONSE_LINES])
        if len(body) > MAX_RESPONSE_LINES:
            lines.append("... (truncated)")
        lines.append("")

    if response.results:
        lines.append("Local matches:")
        lines.extend(f"  {index}. {hit.label}" for index, hit in enumerate(response.results[:MAX_MATCHES], start=1))
        if response.results[0].name:
            lines.extend(["", f'Use "draw {response.results[0].name}" to display'])
        lines.append("")

    if response.sources:
        lines.append("Sources:")
        lines.extend(f"  - {source.title}" for source in response.sources[:MAX_SOURCES])

    while lines and not lines[-1]:
        lines.pop()
    return tuple(lines)


def register_search_command(registry: CommandRegistry) -> None:
    @registry.register(
        name="search",
        short_description="Search ASCII art",
        usage="search <query>",
        detail="\n".join(
            [
                "Asks the search service first and falls back to the local art library.",
                "",
                "Examples:",
                "  search dragon",
                "  search space ship",
            ]
        ),
    )
    async def search(args: tuple[str, ...], _flags: Mapping[str, FlagValue], ctx: CommandContext) -> CommandResult:
        if not args:
            return usage_error("search <query>", "Example: search dragon")

        query = " ".join(args)
        response = await ctx.services.search.search(query)
        if response.offline:
            offline = CollaboratorUnavailableError("Search", response.error or "")
            return ErrorResult(
                output=(f'No results for "{query}".', str(offline), 'Try "draw --list" for local art.')
            )
        if not response.success:
            return WarningResult(output=(f'No results for "{query}".', 'Try "draw --list" for local art.'))
        return InfoResult(output=format_search(response))
