"""Tests for table rendering and output sinks."""

import io

import pandas as pd
import pytest
from spaceline.generation.errors import InvalidArgumentError
from spaceline.ir.ticket import TicketRow
from spaceline.render.text import HEADER, SEPARATOR, format_price, format_row, pad, render_table
from spaceline.render.writer import rows_to_frame, write_csv, write_text


def make_row(carrier="SpaceX", days=44, trip="One-way", price=36.0):
    return TicketRow(carrier=carrier, duration_days=days, trip_type=trip, price=price)


def test_header_and_separator():
    """Test the fixed header and a separator of the same width."""
    assert HEADER == "Spaceline        Days Trip type  Price"
    assert len(HEADER) == 38
    assert SEPARATOR == "=" * 38


def test_pad():
    """Test left and right justification."""
    assert pad("ab", 5, "left") == "ab   "
    assert pad("ab", 5, "right") == "   ab"
    assert pad("abcdef", 3, "left") == "abcdef"
    with pytest.raises(InvalidArgumentError):
        pad("ab", 5, "center")


def test_format_price():
    """Test that integral prices drop the fractional part."""
    assert format_price(36.0) == "36"
    assert format_price(100.0) == "100"
    assert format_price(36.5) == "36.5"


def test_format_row_one_way():
    """Test column widths for a one-way row."""
    line = format_row(make_row())
    assert line == "SpaceX" + " " * 13 + "44 One-way    $  36"
    assert len(line) == len(HEADER)


def test_format_row_widest_values():
    """Test a row using the widest carrier, trip type and price."""
    line = format_row(make_row("Space Adventures", 23, "Round-trip", 100.0))
    assert line == "Space Adventures   23 Round-trip $ 100"
    assert len(line) == len(HEADER)


def test_render_empty_table():
    """Test that an empty table is the header and separator only."""
    assert render_table([]) == HEADER + "\n" + SEPARATOR + "\n"


def test_render_table():
    """Test rendering two rows."""
    rows = [make_row(), make_row("Virgin Galactic", 23, "Round-trip", 100.0)]
    lines = render_table(rows).splitlines()
    assert lines == [
        HEADER,
        SEPARATOR,
        "SpaceX             44 One-way    $  36",
        "Virgin Galactic    23 Round-trip $ 100",
    ]
    assert render_table(rows).endswith("\n")


def test_write_text():
    """Test writing to a text stream."""
    stream = io.StringIO()
    write_text("abc\n", stream)
    assert stream.getvalue() == "abc\n"


def test_rows_to_frame():
    """Test DataFrame conversion keeps columns for empty input."""
    df = rows_to_frame([make_row(), make_row("Space Adventures", 31, "Round-trip", 86.0)])
    assert list(df.columns) == ["carrier", "duration_days", "trip_type", "price"]
    assert df["price"].tolist() == [36.0, 86.0]
    assert list(rows_to_frame([]).columns) == ["carrier", "duration_days", "trip_type", "price"]


def test_write_csv(tmp_path):
    """Test CSV output creates parent directories."""
    path = tmp_path / "nested" / "tickets.csv"
    write_csv([make_row()], path)
    df = pd.read_csv(path)
    assert df.to_dict("records") == [
        {"carrier": "SpaceX", "duration_days": 44, "trip_type": "One-way", "price": 36.0}
    ]
