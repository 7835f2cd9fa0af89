"""Physics formula directory and periodic table."""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ascii_oracle.errors import FormulaError, UnknownElementError

STANDARD_GRAVITY = 9.81
GRAVITATIONAL_CONSTANT = 6.674e-11


@dataclass(frozen=True)
class Formula:
    """A closed-form physics calculation."""

    name: str
    formula: str
    arguments: tuple[str, ...]
    calc: Callable[[Sequence[float], float], str]
    optional: int = 0
    category: str = "mechanics"

    @property
    def required(self) -> int:
        return len(self.arguments) - self.optional

    @property
    def usage(self) -> str:
        parts = [f"<{arg}>" for arg in self.arguments[: self.required]]
        parts.extend(f"[{arg}]" for arg in self.arguments[self.required :])
        return " ".join(parts)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        raise FormulaError("Division by zero")
    return numerator / denominator


def _finite(value: float) -> float:
    if not math.isfinite(value):
        raise FormulaError("Result is not a finite number")
    return value


def _projectile(values: Sequence[float], g: float) -> str:
    velocity, angle = values
    theta = math.radians(angle)
    distance = _finite(velocity * velocity * math.sin(2 * theta) / g)
    max_height = _finite((velocity * math.sin(theta)) ** 2 / (2 * g))
    flight_time = _finite(2 * velocity * math.sin(theta) / g)
    return f"Range: {distance:.2f}m | Max Height: {max_height:.2f}m | Time: {flight_time:.2f}s"


def _freefall(values: Sequence[float], g: float) -> str:
    (height,) = values
    if height < 0:
        raise FormulaError("Height must not be negative")
    velocity = math.sqrt(2 * g * height)
    fall_time = math.sqrt(2 * height / g)
    return f"Final velocity: {_finite(velocity):.2f} m/s | Time: {_finite(fall_time):.2f} s"


def _work(values: Sequence[float], _g: float) -> str:
    force, distance, *rest = values
    angle = rest[0] if rest else 0.0
    return f"Work = {_finite(force * distance * math.cos(math.radians(angle))):.2f} J"


def _gravity(values: Sequence[float], _g: float) -> str:
    m1, m2, r = values
    return f"Force = {_finite(_ratio(GRAVITATIONAL_CONSTANT * m1 * m2, r * r)):.3e} N"


def _escape(values: Sequence[float], _g: float) -> str:
    mass, radius = values
    ratio = _ratio(2 * GRAVITATIONAL_CONSTANT * mass, radius)
    if ratio < 0:
        raise FormulaError("Mass and radius must have the same sign")
    return f"Escape velocity = {_finite(math.sqrt(ratio)):.2f} m/s"


def _pendulum(values: Sequence[float], g: float) -> str:
    (length,) = values
    if length < 0:
        raise FormulaError("Length must not be negative")
    return f"Period = {_finite(2 * math.pi * math.sqrt(length / g)):.3f} s"


FORMULAS: dict[str, Formula] = {
    "velocity": Formula(
        "Velocity", "v = d / t", ("distance", "time"),
        lambda v, _g: f"Velocity = {_finite(_ratio(v[0], v[1])):.2f} m/s",
    ),
    "acceleration": Formula(
        "Acceleration", "a = (v - u) / t", ("final", "initial", "time"),
        lambda v, _g: f"Acceleration = {_finite(_ratio(v[0] - v[1], v[2])):.2f} m/s²",
    ),
    "force": Formula(
        "Force (Newton's 2nd Law)", "F = m × a", ("mass", "acceleration"),
        lambda v, _g: f"Force = {_finite(v[0] * v[1]):.2f} N",
    ),
    "momentum": Formula(
        "Momentum", "p = m × v", ("mass", "velocity"),
        lambda v, _g: f"Momentum = {_finite(v[0] * v[1]):.2f} kg·m/s",
    ),
    "projectile": Formula(
        "Projectile Motion", "R = v²sin(2θ)/g, H = v²sin²(θ)/2g", ("velocity", "angle"), _projectile,
    ),
    "freefall": Formula("Free Fall", "v = √(2gh), t = √(2h/g)", ("height",), _freefall),
    "centripetal": Formula(
        "Centripetal Force", "F = mv²/r", ("mass", "velocity", "radius"),
        lambda v, _g: f"Centripetal Force = {_finite(_ratio(v[0] * v[1] * v[1], v[2])):.2f} N",
    ),
    "pendulum": Formula("Pendulum Period", "T = 2π√(L/g)", ("length",), _pendulum),
    "kinetic": Formula(
        "Kinetic Energy", "KE = ½mv²", ("mass", "velocity"),
        lambda v, _g: f"Kinetic Energy = {_finite(0.5 * v[0] * v[1] * v[1]):.2f} J",
        category="energy",
    ),
    "potential": Formula(
        "Potential Energy", "PE = mgh", ("mass", "height"),
        lambda v, g: f"Potential Energy = {_finite(v[0] * g * v[1]):.2f} J",
        category="energy",
    ),
    "work": Formula("Work", "W = F × d × cos(θ)", ("force", "distance", "angle"), _work, optional=1, category="energy"),
    "power": Formula(
        "Power", "P = W / t", ("work", "time"),
        lambda v, _g: f"Power = {_finite(_ratio(v[0], v[1])):.2f} W",
        category="energy",
    ),
    "frequency": Formula(
        "Wave Frequency", "f = v / λ", ("velocity", "wavelength"),
        lambda v, _g: f"Frequency = {_finite(_ratio(v[0], v[1])):.2f} Hz",
        category="waves & electricity",
    ),
    "ohm": Formula(
        "Ohm's Law", "V = I × R", ("current", "resistance"),
        lambda v, _g: f"Voltage = {_finite(v[0] * v[1]):.2f} V",
        category="waves & electricity",
    ),
    "gravity": Formula(
        "Gravitational Force", "F = G(m₁m₂)/r²", ("m1", "m2", "distance"), _gravity, category="gravitation",
    ),
    "escape": Formula("Escape Velocity", "v = √(2GM/r)", ("mass", "radius"), _escape, category="gravitation"),
}


def _parse_numbers(key: str, raw_args: Sequence[str]) -> list[float]:
    values: list[float] = []
    for raw in raw_args:
        try:
            value = float(raw)
        except ValueError:
            raise FormulaError(f"Invalid number for {key}: {raw}") from None
        if not math.isfinite(value):
            raise FormulaError(f"Invalid number for {key}: {raw}")
        values.append(value)
    return values


def compute(key: str, raw_args: Sequence[str], gravity: float = STANDARD_GRAVITY) -> str:
    """Run one formula over user-supplied numeric arguments.

    Extra arguments beyond the formula's parameters are ignored.

    Raises:
        FormulaError: If the formula is unknown, arguments are missing or
            not numeric, or the calculation is undefined for the inputs.
    """

    formula = FORMULAS.get(key.lower())
    if formula is None:
        raise FormulaError(f"Unknown physics calculation: {key}")
    if gravity <= 0 or not math.isfinite(gravity):
        raise FormulaError("Gravity must be a positive number")

    values = _parse_numbers(key, raw_args[: len(formula.arguments)])
    if len(values) < formula.required:
        raise FormulaError(f"Usage: physics {key.lower()} {formula.usage}")

    try:
        result = formula.calc(values, gravity)
    except (ValueError, ZeroDivisionError, OverflowError) as exc:
        raise FormulaError(f"Could not compute {key}: {exc!s}") from exc
    return result


@dataclass(frozen=True)
class Element:
    """One periodic table entry."""

    symbol: str
    name: str
    atomic_number: int
    atomic_mass: float
    category: str


_ELEMENTS = (
    Element("H", "Hydrogen", 1, 1.008, "Nonmetal"),
    Element("He", "Helium", 2, 4.003, "Noble Gas"),
    Element("Li", "Lithium", 3, 6.941, "Alkali Metal"),
    Element("Be", "Beryllium", 4, 9.012, "Alkaline Earth"),
    Element("B", "Boron", 5, 10.81, "Metalloid"),
    Element("C", "Carbon", 6, 12.011, "Nonmetal"),
    Element("N", "Nitrogen", 7, 14.007, "Nonmetal"),
    Element("O", "Oxygen", 8, 15.999, "Nonmetal"),
    Element("F", "Fluorine", 9, 18.998, "Halogen"),
    Element("Ne", "Neon", 10, 20.18, "Noble Gas"),
    Element("Na", "Sodium", 11, 22.99, "Alkali Metal"),
    Element("Mg", "Magnesium", 12, 24.305, "Alkaline Earth"),
    Element("Al", "Aluminum", 13, 26.982, "Post-transition"),
    Element("Si", "Silicon", 14, 28.086, "Metalloid"),
    Element("P", "Phosphorus", 15, 30.974, "Nonmetal"),
    Element("S", "Sulfur", 16, 32.065, "Nonmetal"),
    Element("Cl", "Chlorine", 17, 35.453, "Halogen"),
    Element("Ar", "Argon", 18, 39.948, "Noble Gas"),
    Element("K", "Potassium", 19, 39.098, "Alkali Metal"),
    Element("Ca", "Calcium", 20, 40.078, "Alkaline Earth"),
    Element("Fe", "Iron", 26, 55.845, "Transition Metal"),
    Element("Cu", "Copper", 29, 63.546, "Transition Metal"),
    Element("Zn", "Zinc", 30, 65.38, "Transition Metal"),
    Element("Ag", "Silver", 47, 107.868, "Transition Metal"),
    Element("Au", "Gold", 79, 196.967, "Transition Metal"),
    Element("Pb", "Lead", 82, 207.2, "Post-transition"),
    Element("U", "Uranium", 92, 238.029, "Actinide"),
)

PERIODIC_TABLE: dict[str, Element] = {element.symbol.lower(): element for element in _ELEMENTS}

_FORMULA_RE = re.compile(r"(?:[A-Z][a-z]?\d*)+")
_ELEMENT_RE = re.compile(r"([A-Z][a-z]?)(\d*)")


def lookup_element(symbol: str) -> Element | None:
    return PERIODIC_TABLE.get(symbol.strip().lower())


def parse_formula(text: str) -> list[tuple[str, int]]:
    """Split a flat chemical formula such as ``C6H12O6`` into (symbol, count) pairs.

    Raises:
        FormulaError: If the text is not a sequence of element symbols and counts.
        UnknownElementError: If a symbol is not in the periodic table.
    """

    formula = text.strip()
    if not _FORMULA_RE.fullmatch(formula):
        raise FormulaError(f"Could not parse formula: {text}")

    parts: list[tuple[str, int]] = []
    for match in _ELEMENT_RE.finditer(formula):
        symbol, digits = match.groups()
        if lookup_element(symbol) is None:
            raise UnknownElementError(symbol)
        count = int(digits) if digits else 1
        if count == 0:
            raise FormulaError(f"Could not parse formula: {text}")
        parts.append((symbol, count))
    return parts


def molar_mass(text: str) -> float:
    return sum(PERIODIC_TABLE[symbol.lower()].atomic_mass * count for symbol, count in parse_formula(text))
