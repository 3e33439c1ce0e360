"""Library information for geoproj-lib."""

from typing import Optional

from rich.console import Console
from rich.table import Table

from geoproj_lib import __version__
from geoproj_lib.core.definitions import MAX_PRECISION, MIN_PRECISION
from geoproj_lib.georef import resolution


def precision_table() -> Table:
    """Build a table of GEOREF precision levels and their cell sizes."""
    table = Table(title="GEOREF precision")

    table.add_column("Precision", style="cyan", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Cell size", style="magenta")

    for prec in range(MIN_PRECISION, MAX_PRECISION + 1):
        if prec == 1:
            continue
        res = resolution(prec)
        if prec < 1:
            size = f"{res:g}°"
        else:
            size = f"{res * 60:g}'"
        length = 2 if prec < 0 else 4 + 2 * prec
        table.add_row(str(prec), str(length), size)

    return table


def display_info(console: Optional[Console] = None) -> None:
    """Display information about the library using rich formatting."""
    console = console or Console()
    table = Table(title="geoproj-lib Information")

    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    table.add_row("Name", "geoproj-lib")
    table.add_row("Purpose", "GEOREF codec and gnomonic projection")
    table.add_row("Version", __version__)

    console.print(table)
    console.print(precision_table())
