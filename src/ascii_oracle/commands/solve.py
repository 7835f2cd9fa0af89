"""Arithmetic solver command."""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from ascii_oracle import mathexpr
from ascii_oracle.core.commands import FlagValue
from ascii_oracle.core.dispatcher import CommandContext
from ascii_oracle.core.registry import CommandRegistry
from ascii_oracle.core.types import CommandResult, ErrorResult, MathResult, usage_error
from ascii_oracle.errors import ExpressionError


async def _solve_remote(ctx: CommandContext, expression: str) -> str | None:
    engine = ctx.services.computation
    if engine is None:
        return None
    answer = await engine.evaluate(expression)
    if not answer.success or answer.result is None:
        logger.info("solve.fallback expression={!r} reason={}", expression, answer.error)
        return None
    return answer.result


def register_solve_command(registry: CommandRegistry) -> None:
    @registry.register(
        name="solve",
        short_description="Math calculations",
        usage="solve <expression>",
        detail="\n".join(
            [
                "Supports + - * / ^ and parentheses, sqrt sin cos tan log ln abs pow, and the constants pi and e.",
                "",
                "Examples:",
                "  solve 2+2",
                "  solve sqrt(16)",
                "  solve 2^10",
            ]
        ),
    )
    async def solve(args: tuple[str, ...], flags: Mapping[str, FlagValue], ctx: CommandContext) -> CommandResult:
        if flags:
            # A leading "-5" parses as flag "5" and drops out of args.
            return usage_error("solve <expression>", 'Quote expressions with negative numbers: solve "-5 + 3"')
        if not args:
            return usage_error("solve <expression>", "Example: solve 2+2")

        expression = " ".join(args)
        value = await _solve_remote(ctx, expression)
        if value is None:
            try:
                value = mathexpr.format_number(mathexpr.evaluate(expression))
            except ExpressionError as exc:
                return ErrorResult(output=(f"Could not evaluate: {expression}", str(exc)))

        return MathResult(output=f"{expression} = {value}", value=value)
