"""Rendering and output of ticket tables."""

from .text import HEADER, SEPARATOR, pad, format_price, format_row, render_table
from .writer import write_text, rows_to_frame, write_csv

__all__ = [
    "HEADER",
    "SEPARATOR",
    "pad",
    "format_price",
    "format_row",
    "render_table",
    "write_text",
    "rows_to_frame",
    "write_csv",
]
