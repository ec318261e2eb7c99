"""
rowversion - Convert SQL Server rowversion values between formats.

A small CLI around the rowversion library.
"""

import typer
from rich.console import Console

from cli.commands.convert import convert
from rowversion import __version__
from rowversion.config import configure_logging

console = Console()

# Main app
app = typer.Typer(
    name="rowversion",
    help="Convert SQL Server rowversion values between Base64, ULong and hex.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="convert")(convert)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]rowversion[/bold] version {__version__}")
    console.print("[dim]SQL Server rowversion converter[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    rowversion - Convert SQL Server rowversion values.

    Supported formats:

    - [cyan]Base64[/cyan]       AAAAAAKVTXs=
    - [cyan]ULong[/cyan]        43339131
    - [cyan]Hexadecimal[/cyan]  0x0000000002954D7B

    [bold]Quick Start:[/bold]

        rowversion convert 0x0000000002954D7B
        rowversion convert AAAAAAKVTXs= --from base64
        rowversion convert 43339131 --from ulong
    """
    configure_logging("DEBUG" if verbose else None)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
