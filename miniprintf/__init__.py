"""A small printf-style formatter with fixed-width integer conversions and extra string conversions."""

__version__ = "0.1.0"
__all__ = ["digits", "radix", "integers", "text", "specifiers", "printer"]