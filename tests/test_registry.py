import pytest

from ascii_oracle.core.registry import CommandRegistry
from ascii_oracle.core.types import InfoResult


@pytest.mark.asyncio
async def test_registry_logs_start_and_end_once(monkeypatch) -> None:
    logs: list[str] = []

    def _capture(message: str, *args: object) -> None:
        logs.append(message)

    monkeypatch.setattr("ascii_oracle.core.registry.logger.info", _capture)
    monkeypatch.setattr("ascii_oracle.core.registry.logger.exception", _capture)

    registry = CommandRegistry()

    @registry.register(name="echo", short_description="echo")
    def echo(args, flags, ctx):
        return InfoResult(output=" ".join(args))

    descriptor = registry.get("echo")
    assert descriptor is not None
    result = await descriptor.run(("a", "b"), {}, None)
    assert result.output == "a b"
    assert logs.count("command.call.start name={} {{ {} }}") == 1
    assert logs.count("command.call.end name={} duration={:.3f}ms") == 1


@pytest.mark.asyncio
async def test_registry_logs_error_and_reraises(monkeypatch) -> None:
    logs: list[str] = []

    def _capture(message: str, *args: object) -> None:
        logs.append(message)

    monkeypatch.setattr("ascii_oracle.core.registry.logger.info", _capture)
    monkeypatch.setattr("ascii_oracle.core.registry.logger.exception", _capture)

    registry = CommandRegistry()

    @registry.register(name="boom", short_description="boom")
    async def boom(args, flags, ctx):
        raise RuntimeError("kaboom")

    descriptor = registry.get("boom")
    assert descriptor is not None
    with pytest.raises(RuntimeError, match="kaboom"):
        await descriptor.run((), {}, None)
    assert logs.count("command.call.error name={}") == 1
    assert logs.count("command.call.end name={} duration={:.3f}ms") == 1


def test_registry_rejects_duplicate_names() -> None:
    registry = CommandRegistry()

    @registry.register(name="draw", short_description="first")
    def first(args, flags, ctx):
        return InfoResult()

    with pytest.raises(ValueError, match="Duplicate command name: draw"):

        @registry.register(name="DRAW", short_description="second")
        def second(args, flags, ctx):
            return InfoResult()


def test_registry_membership_is_case_insensitive() -> None:
    registry = CommandRegistry()

    @registry.register(name="help", short_description="Show help", usage="help [command]")
    def help_command(args, flags, ctx):
        return InfoResult()

    assert registry.has("HELP")
    assert registry.get("Help") is not None
    assert not registry.has("halp")
    assert registry.names() == ["help"]


def test_registry_help_text() -> None:
    registry = CommandRegistry()

    @registry.register(name="draw", short_description="Display ASCII art", usage="draw <name>", detail="draw cat")
    def draw(args, flags, ctx):
        return InfoResult()

    @registry.register(name="clear", short_description="Clear the screen")
    def clear(args, flags, ctx):
        return InfoResult()

    assert registry.compact_rows() == [
        "  draw <name>  Display ASCII art",
        "  clear        Clear the screen",
    ]
    assert registry.detail("draw") == "DRAW - Display ASCII art\n\nUsage: draw <name>\n\ndraw cat"
    with pytest.raises(KeyError):
        registry.detail("nope")
