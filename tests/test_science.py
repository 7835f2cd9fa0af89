import pytest

from ascii_oracle.errors import FormulaError, UnknownElementError
from ascii_oracle.science import FORMULAS, compute, lookup_element, molar_mass, parse_formula


def test_projectile_uses_standard_gravity() -> None:
    assert compute("projectile", ["20", "45"]) == "Range: 40.77m | Max Height: 10.19m | Time: 2.88s"


def test_gravity_override_changes_result() -> None:
    earth = compute("freefall", ["100"])
    moon = compute("freefall", ["100"], gravity=1.62)
    assert earth != moon
    assert moon.startswith("Final velocity: 18.00 m/s")


@pytest.mark.parametrize(
    ("key", "args", "expected"),
    [
        ("force", ["10", "5"], "Force = 50.00 N"),
        ("velocity", ["100", "10"], "Velocity = 10.00 m/s"),
        ("kinetic", ["10", "5"], "Kinetic Energy = 125.00 J"),
        ("ohm", ["2", "5"], "Voltage = 10.00 V"),
        ("work", ["10", "2"], "Work = 20.00 J"),
        ("work", ["10", "2", "60"], "Work = 10.00 J"),
        ("pendulum", ["1"], "Period = 2.006 s"),
    ],
)
def test_compute(key: str, args: list[str], expected: str) -> None:
    assert compute(key, args) == expected


def test_compute_is_case_insensitive_and_ignores_extra_args() -> None:
    assert compute("FORCE", ["2", "3", "99"]) == "Force = 6.00 N"


def test_compute_rejects_unknown_formula() -> None:
    with pytest.raises(FormulaError, match="Unknown physics calculation: warp"):
        compute("warp", ["1"])


def test_compute_reports_usage_for_missing_args() -> None:
    with pytest.raises(FormulaError, match="Usage: physics projectile <velocity> <angle>"):
        compute("projectile", ["20"])


@pytest.mark.parametrize("raw", ["abc", "nan", "inf"])
def test_compute_rejects_invalid_numbers(raw: str) -> None:
    with pytest.raises(FormulaError, match="Invalid number"):
        compute("force", [raw, "2"])


def test_compute_rejects_division_by_zero() -> None:
    with pytest.raises(FormulaError, match="Division by zero"):
        compute("velocity", ["10", "0"])


def test_compute_rejects_bad_gravity() -> None:
    with pytest.raises(FormulaError):
        compute("freefall", ["10"], gravity=0)


def test_every_formula_has_usage() -> None:
    for key, formula in FORMULAS.items():
        assert formula.required >= 1, key
        assert formula.usage


def test_lookup_element_is_case_insensitive() -> None:
    element = lookup_element("fE")
    assert element is not None
    assert element.name == "Iron"
    assert element.atomic_number == 26
    assert lookup_element("Xx") is None


def test_parse_formula_defaults_count_to_one() -> None:
    assert parse_formula("H2O") == [("H", 2), ("O", 1)]
    assert parse_formula("C6H12O6") == [("C", 6), ("H", 12), ("O", 6)]


def test_parse_formula_names_unknown_symbol() -> None:
    with pytest.raises(UnknownElementError) as exc_info:
        parse_formula("XyO2")
    assert exc_info.value.symbol == "Xy"
    assert "Xy" in str(exc_info.value)


@pytest.mark.parametrize("text", ["", "h2o", "H2O!", "2H", "H0"])
def test_parse_formula_rejects_malformed(text: str) -> None:
    with pytest.raises(FormulaError):
        parse_formula(text)


def test_molar_mass_of_water() -> None:
    assert molar_mass("H2O") == pytest.approx(2 * 1.008 + 15.999)


@pytest.mark.parametrize(
    ("key", "args"),
    [
        ("projectile", ["1e155", "0"]),
        ("force", ["1e308", "1e308"]),
        ("kinetic", ["1e300", "1e300"]),
    ],
)
def test_compute_rejects_non_finite_results(key: str, args: list[str]) -> None:
    with pytest.raises(FormulaError):
        compute(key, args)
