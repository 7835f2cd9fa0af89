"""CLI main module for ASCII Oracle."""

from __future__ import annotations

import asyncio

import typer
from rich.markup import escape

from ascii_oracle import __version__
from ascii_oracle.cli.render import Renderer, create_cli_renderer
from ascii_oracle.commands import build_registry
from ascii_oracle.config import Settings, get_settings
from ascii_oracle.errors import ConfigurationError
from ascii_oracle.logging_utils import configure_logging
from ascii_oracle.session import TerminalSession, create_session

QUIT_WORDS = ("quit", "q")

app = typer.Typer(
    name="ascii-oracle",
    help="A retro terminal for ASCII art, 3D shapes, and math.",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        # Default to chat mode
        chat(api_base=None)


def _load_settings(api_base: str | None) -> Settings:
    overrides = {"api_base": api_base} if api_base else {}
    try:
        settings = get_settings(**overrides)
    except ConfigurationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(2) from exc
    configure_logging(profile=settings.log_format, level=settings.log_level)
    return settings


async def _chat_loop(session: TerminalSession, renderer: Renderer) -> None:
    while True:
        try:
            prompt = "3D> " if session.hologram_mode else "> "
            line = await renderer.get_user_input(prompt)
        except (KeyboardInterrupt, EOFError):
            renderer.info("\nGoodbye!")
            return

        if line.strip().lower() in QUIT_WORDS:
            renderer.info("Goodbye!")
            return

        was_3d = session.hologram_mode
        result = await session.submit(line)
        renderer.result(result)
        if result.power_up is not None:
            renderer.power_up(result.power_up)
        if result.trigger_upload is not None:
            renderer.info(f"[dim]Upload of {result.trigger_upload} files is handled by the web terminal.[/dim]")
        if session.hologram is not None and not was_3d:
            renderer.info(f"[cyan]3D mode:[/cyan] {session.hologram.type} [dim]({escape(session.hologram.text)})[/dim]")


@app.command()
def chat(
    api_base: str | None = typer.Option(None, "--api-base", help="Backend base URL for math and search"),
) -> None:
    """Start an interactive terminal session."""
    settings = _load_settings(api_base)
    session = create_session(settings)
    renderer = create_cli_renderer()
    renderer.welcome(__version__)
    asyncio.run(_chat_loop(session, renderer))


@app.command()
def run(
    command: str = typer.Argument(..., help="Command line to execute, quoted"),
    api_base: str | None = typer.Option(None, "--api-base", help="Backend base URL for math and search"),
) -> None:
    """Run a single command line and print its result."""
    settings = _load_settings(api_base)
    session = create_session(settings)
    renderer = create_cli_renderer()
    result = asyncio.run(session.submit(command))
    renderer.result(result)
    if not result.success:
        raise typer.Exit(1)


@app.command("commands")
def list_commands() -> None:
    """List the registered terminal commands."""
    for row in build_registry().compact_rows():
        typer.echo(row)


if __name__ == "__main__":
    app()
