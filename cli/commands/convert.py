"""
Convert command - show a row version in every format.
"""

from enum import Enum

import typer
from rich.console import Console

from cli.display.tables import display_conversion, display_error, display_plain
from rowversion.converter import RowVersionConverter
from rowversion.models.result import EmptyConversion, InputType

console = Console()
app = typer.Typer()


class InputFormat(str, Enum):
    """Formats accepted on the command line."""

    base64 = "base64"
    ulong = "ulong"
    hex = "hex"


FORMAT_INPUT_TYPES = {
    InputFormat.base64: InputType.BASE64,
    InputFormat.ulong: InputType.ULONG,
    InputFormat.hex: InputType.HEXADECIMAL,
}


@app.command()
def convert(
    value: str = typer.Argument(..., help="Row version text to convert"),
    from_format: InputFormat = typer.Option(
        InputFormat.hex, "--from", "-f", help="Format of VALUE", case_sensitive=False
    ),
    plain: bool = typer.Option(False, "--plain", "-p", help="Print name: value lines"),
) -> None:
    """
    Convert a row version to Base64, ULong, hexadecimal and bytes.

    Examples:

        rowversion convert 0x0000000002954D7B

        rowversion convert AAAAAAKVTXs= --from base64

        rowversion convert 43339131 --from ulong --plain

    Values starting with "-" must follow "--":

        rowversion convert --from ulong -- -1
    """
    source = FORMAT_INPUT_TYPES[from_format]
    result = RowVersionConverter().convert(source, value)

    if not result.is_success:
        display_error(result, source)
        raise typer.Exit(1)

    if isinstance(result, EmptyConversion):
        console.print("[dim]Nothing to convert[/dim]")
        return

    if plain:
        display_plain(result)
    else:
        display_conversion(result, source)


if __name__ == "__main__":
    app()
