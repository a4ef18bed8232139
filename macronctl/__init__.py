"""macron - CLI for creating macOS launchd tasks."""

from __future__ import annotations

import typer

from macronctl.commands import create

app = typer.Typer(
    name="macron",
    help="Create macOS launchd tasks that run scripts on an interval",
    no_args_is_help=True,
)

app.command("create")(create.create)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Create macOS launchd tasks that run scripts on an interval."""
    from macron.log import configure_logging

    configure_logging("DEBUG" if verbose else "WARNING")


@app.command()
def version() -> None:
    """Show version information."""
    from macron.version import BUILD_INFO

    typer.echo(BUILD_INFO.describe())


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
