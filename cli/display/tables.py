"""
Rich displays for conversion results.
"""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from rowversion.models.result import ConversionResult, InputType

console = Console()

FIELD_TITLES = {
    "base64": "Base64",
    "ulong": "ULong",
    "hexadecimal": "Hexadecimal",
    "byte_array": "Bytes",
}


def display_conversion(result: ConversionResult, source: InputType) -> None:
    """Display all four representations, marking the one converted from."""
    table = Table(
        title="Row Version", box=box.ROUNDED, show_header=True, header_style="bold cyan"
    )
    table.add_column("Format", style="cyan", width=14)
    table.add_column("Value")

    for name, value in result.as_dict().items():
        title = FIELD_TITLES[name]
        if name == source.value:
            title = f"{title} [dim]*[/dim]"
        table.add_row(title, escape(value))

    console.print(table)


def display_plain(result: ConversionResult) -> None:
    """Print "name: value" lines, one per representation."""
    for name, value in result.as_dict().items():
        console.print(f"{name}: {escape(value)}", highlight=False, soft_wrap=True)


def display_error(result: ConversionResult, source: InputType) -> None:
    """Display a failed conversion with the rejected input."""
    console.print(
        Panel(
            f"[bold]{FIELD_TITLES[source.value]}:[/bold] {escape(result.as_dict()[source.value])}\n"
            f"[red]{escape(result.error_message or '')}[/red]",
            title="[bold red]Conversion Failed[/bold red]",
            border_style="red",
            expand=False,
        )
    )
