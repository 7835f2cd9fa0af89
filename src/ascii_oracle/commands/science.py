"""Physics and chemistry commands."""

from __future__ import annotations

from collections.abc import Mapping

from ascii_oracle.core.commands import FlagValue
from ascii_oracle.core.dispatcher import CommandContext
from ascii_oracle.core.registry import CommandRegistry
from ascii_oracle.core.types import CommandResult, ErrorResult, InfoResult, SuccessResult, usage_error
from ascii_oracle.errors import FormulaError
from ascii_oracle.science import FORMULAS, PERIODIC_TABLE, STANDARD_GRAVITY, compute, lookup_element, molar_mass


def _physics_directory() -> tuple[str, ...]:
    lines = ["PHYSICS Calculator", ""]
    categories: dict[str, list[str]] = {}
    for key, formula in FORMULAS.items():
        categories.setdefault(formula.category, []).append(f"  physics {key} {formula.usage}".rstrip())
    for category, rows in categories.items():
        lines.append(f"{category.title()}:")
        lines.extend(rows)
        lines.append("")
    lines.append(f"Use --gravity <g> to override g = {STANDARD_GRAVITY} m/s².")
    lines.append("Example: physics projectile 20 45")
    return tuple(lines)


def _gravity_flag(flags: Mapping[str, FlagValue]) -> float | str:
    raw = flags.get("gravity", flags.get("g"))
    if raw is None:
        return STANDARD_GRAVITY
    if raw is True:
        return "Usage: --gravity <g>"
    try:
        return float(raw)
    except ValueError:
        return f"Invalid gravity: {raw}"


CHEMISTRY_DIRECTORY = (
    "CHEMISTRY Tools",
    "",
    "Available commands:",
    "  chemistry element <symbol>   Element info",
    "  chemistry molar <formula>    Molar mass",
    "",
    "Example: chemistry element Fe",
)


def register_science_commands(registry: CommandRegistry) -> None:
    @registry.register(
        name="physics",
        short_description="Physics calculations",
        usage="physics <formula> <args...> [--gravity G]",
        detail="\n".join(
            [
                'Type "physics" on its own to list every formula.',
                "",
                "Examples:",
                "  physics force 10 5",
                "  physics projectile 20 45",
                "  physics freefall 100 --gravity 1.62",
            ]
        ),
    )
    def physics(args: tuple[str, ...], flags: Mapping[str, FlagValue], _ctx: CommandContext) -> CommandResult:
        if not args:
            return InfoResult(output=_physics_directory())

        key = args[0].lower()
        formula = FORMULAS.get(key)
        if formula is None:
            return ErrorResult(
                output=(f"Unknown physics calculation: {key}", f"Available: {', '.join(FORMULAS)}")
            )

        gravity = _gravity_flag(flags)
        if isinstance(gravity, str):
            return ErrorResult(output=gravity)

        try:
            line = compute(key, args[1:], gravity=gravity)
        except FormulaError as exc:
            return ErrorResult(output=str(exc))
        return SuccessResult(output=(formula.name, formula.formula, "", line))

    @registry.register(
        name="chemistry",
        short_description="Chemistry tools",
        usage="chemistry <element|molar> <value>",
        detail="\n".join(
            [
                "Examples:",
                "  chemistry element Fe",
                "  chemistry molar H2O",
                "  chemistry molar C6H12O6",
            ]
        ),
    )
    def chemistry(args: tuple[str, ...], _flags: Mapping[str, FlagValue], _ctx: CommandContext) -> CommandResult:
        if not args:
            return InfoResult(output=CHEMISTRY_DIRECTORY)

        sub_command = args[0].lower()
        if sub_command == "element":
            if len(args) < 2:
                return usage_error("chemistry element <symbol>", "Example: chemistry element Fe")
            element = lookup_element(args[1])
            if element is None:
                sample = ", ".join(item.symbol for item in PERIODIC_TABLE.values())
                return ErrorResult(output=(f'Element "{args[1]}" not in database.', f"Known symbols: {sample}"))
            return SuccessResult(
                output=(
                    f"{element.name} ({element.symbol})",
                    f"Atomic number: {element.atomic_number}",
                    f"Atomic mass: {element.atomic_mass}",
                    f"Category: {element.category}",
                )
            )

        if sub_command == "molar":
            if len(args) < 2:
                return usage_error("chemistry molar <formula>", "Example: chemistry molar H2O")
            formula = args[1]
            try:
                mass = molar_mass(formula)
            except FormulaError as exc:
                return ErrorResult(output=str(exc))
            return SuccessResult(output=f"Molar mass of {formula} = {mass:.3f} g/mol")

        return ErrorResult(output='Invalid chemistry command. Type "chemistry" for help.')
