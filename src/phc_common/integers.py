"""Strict unsigned decimal parsing.

Python's int() accepts signs, whitespace and underscores; PHC integers are
plain ASCII digits only.
"""

from src.phc_common.errors import IntegerParseError


def parse_unsigned(value: str, bits: int = 32) -> int:
    """Parse ``value`` as a base-10 integer in [0, 2**bits - 1]."""
    if not value:
        raise IntegerParseError(value, "empty")
    if not (value.isascii() and value.isdigit()):
        raise IntegerParseError(value, "invalid character")
    result = int(value)
    if result >= 1 << bits:
        raise IntegerParseError(value, f"overflows u{bits}")
    return result
