import importlib

from typer.testing import CliRunner

cli_app_module = importlib.import_module("ascii_oracle.cli.app")


def test_run_command_prints_result(monkeypatch) -> None:
    monkeypatch.delenv("ORACLE_API_BASE", raising=False)
    result = CliRunner().invoke(cli_app_module.app, ["run", "solve 2^10"])
    assert result.exit_code == 0
    assert "2^10 = 1024" in result.stdout


def test_run_command_exits_nonzero_on_error(monkeypatch) -> None:
    monkeypatch.delenv("ORACLE_API_BASE", raising=False)
    result = CliRunner().invoke(cli_app_module.app, ["run", "foobar"])
    assert result.exit_code == 1
    assert "Unknown command: foobar" in result.stdout


def test_run_rejects_invalid_api_base() -> None:
    result = CliRunner().invoke(cli_app_module.app, ["run", "version", "--api-base", "ftp://nope"])
    assert result.exit_code == 2


def test_commands_lists_registry() -> None:
    result = CliRunner().invoke(cli_app_module.app, ["commands"])
    assert result.exit_code == 0
    assert "draw <name> [--list|-l]" in result.stdout
    assert "hologram <type> [text...]" in result.stdout


def test_chat_is_the_default_command(monkeypatch) -> None:
    called: list[str | None] = []

    def _fake_chat(api_base: str | None = None) -> None:
        called.append(api_base)

    monkeypatch.setattr(cli_app_module, "chat", _fake_chat)
    result = CliRunner().invoke(cli_app_module.app, [])
    assert result.exit_code == 0
    assert called == [None]
