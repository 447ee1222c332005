"""Plain-text rendering of ticket tables."""

from typing import Iterable, Literal
from spaceline.ir.ticket import TicketRow
from spaceline.generation.errors import InvalidArgumentError

Justify = Literal["left", "right"]

HEADER = "Spaceline        Days Trip type  Price"
SEPARATOR = "=" * len(HEADER)

# Column widths
CARRIER_WIDTH = 16
DAYS_WIDTH = 4
TRIP_WIDTH = 10
PRICE_WIDTH = 4


def pad(text: str, width: int, justify: Justify) -> str:
    """
    Pad text with spaces to width. Longer text is returned unchanged.

    Args:
        text: Text to pad
        width: Minimum field width
        justify: "left" keeps text at the start of the field, "right" at the end

    Returns:
        Padded text
    """
    fill = " " * max(width - len(text), 0)
    if justify == "left":
        return text + fill
    if justify == "right":
        return fill + text
    raise InvalidArgumentError(f"unknown justification: {justify!r}")


def format_price(price: float) -> str:
    """Format a price, dropping the fractional part when it is zero."""
    if float(price).is_integer():
        return str(int(price))
    return f"{price:g}"


def format_row(row: TicketRow) -> str:
    """Format one ticket as a table line (no trailing newline)."""
    return " ".join(
        [
            pad(row.carrier, CARRIER_WIDTH, "left"),
            pad(str(row.duration_days), DAYS_WIDTH, "right"),
            pad(row.trip_type, TRIP_WIDTH, "left"),
            "$" + pad(format_price(row.price), PRICE_WIDTH, "right"),
        ]
    )


def render_table(rows: Iterable[TicketRow]) -> str:
    """
    Render the header, separator and one line per row.

    Every line, the last included, ends with a newline.
    """
    lines = [HEADER, SEPARATOR]
    lines.extend(format_row(row) for row in rows)
    return "".join(f"{line}\n" for line in lines)
