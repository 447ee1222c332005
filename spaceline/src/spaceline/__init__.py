"""Spaceline: random ticket price tables for trips to Mars."""

__version__ = "0.1.0"
