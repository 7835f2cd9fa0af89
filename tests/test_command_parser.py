import pytest

from ascii_oracle.core.commands import get_suggestions, parse_command, tokenize


@pytest.mark.parametrize("text", ["", " ", "    ", "  \t  "])
def test_whitespace_only_input_is_empty(text: str) -> None:
    parsed = parse_command(text)
    assert parsed.command == ""
    assert parsed.args == ()
    assert dict(parsed.flags) == {}
    assert parsed.is_empty


def test_tokenize_keeps_quoted_span_together() -> None:
    assert tokenize('draw "my cat" --width=10') == ["draw", "my cat", "--width=10"]


def test_tokenize_unterminated_quote_takes_rest_of_line() -> None:
    assert tokenize('say "hello') == ["say", "hello"]
    assert tokenize("say 'hello world") == ["say", "hello world"]


def test_tokenize_other_quote_inside_span_is_literal() -> None:
    assert tokenize("""echo "it's fine" 'say "hi"'""") == ["echo", "it's fine", 'say "hi"']


def test_tokenize_collapses_runs_of_spaces() -> None:
    assert tokenize("  draw    cat  ") == ["draw", "cat"]


def test_tokenize_quotes_join_adjacent_text() -> None:
    assert tokenize('ab"c d"e') == ["abc de"]


def test_command_is_lower_cased_but_args_are_not() -> None:
    parsed = parse_command("DRAW Mario")
    assert parsed.command == "draw"
    assert parsed.args == ("Mario",)


def test_long_flag_without_value_is_true() -> None:
    parsed = parse_command("physics force --unit")
    assert parsed.flags["unit"] is True
    assert parsed.args == ("force",)


def test_long_flag_absorbs_next_token() -> None:
    parsed = parse_command("physics force --unit kg")
    assert parsed.flags["unit"] == "kg"
    assert parsed.args == ("force",)


def test_long_flag_with_equals_splits_once() -> None:
    parsed = parse_command("run --expr=a=b next")
    assert parsed.flags["expr"] == "a=b"
    assert parsed.args == ("next",)


def test_short_flag_absorbs_value() -> None:
    assert parse_command("draw -w 80").flags["w"] == "80"


def test_short_flag_does_not_swallow_next_flag() -> None:
    parsed = parse_command("draw -w --other")
    assert parsed.flags["w"] is True
    assert parsed.flags["other"] is True


def test_adjacent_boolean_long_flags() -> None:
    parsed = parse_command("x --verbose --debug")
    assert dict(parsed.flags) == {"verbose": True, "debug": True}


def test_longer_single_dash_tokens_stay_positional() -> None:
    parsed = parse_command("solve -12 -width")
    assert parsed.args == ("-12", "-width")
    assert dict(parsed.flags) == {}


def test_last_repeated_flag_wins() -> None:
    assert parse_command("x --n 1 --n 2").flags["n"] == "2"


def test_flags_are_read_only() -> None:
    parsed = parse_command("draw --list")
    with pytest.raises(TypeError):
        parsed.flags["list"] = False  # type: ignore[index]


def test_raw_keeps_trimmed_input() -> None:
    assert parse_command("  draw cat  ").raw == "draw cat"


def test_suggestions_match_prefix_case_insensitively() -> None:
    assert get_suggestions("DRAW") == ["draw cat", "draw heart", "draw mario", "draw --list"]
    assert get_suggestions("zzz") == []
