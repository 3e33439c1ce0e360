"""Tests for library information output."""

from rich.console import Console

from geoproj_lib import __version__
from geoproj_lib.info import display_info, precision_table


def test_display_info():
    """Test the info tables are printed."""
    console = Console(record=True, width=100)
    display_info(console)
    text = console.export_text()

    assert "geoproj-lib" in text
    assert __version__ in text
    assert "GEOREF precision" in text


def test_precision_table_rows():
    """Test every precision level except 1 has a row."""
    table = precision_table()
    assert table.row_count == 12
