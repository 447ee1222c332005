"""Errors raised by the ticket generator."""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside its valid range."""
