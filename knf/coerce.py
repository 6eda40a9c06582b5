"""String to typed value coercion used by the accessors.

Parsers return None for malformed input so the caller can decide between the
zero value and the default; parse_bool never fails.
"""

import re
from typing import Optional

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_HEX_PATTERN = re.compile(r"0x([0-9a-fA-F]+)")
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_MODE_PATTERN = re.compile(r"[0-7]+")

FALSY_VALUES = frozenset({"", "0", "false"})


def parse_int(value: str) -> Optional[int]:
    """Parse a base-10 or 0x-prefixed hexadecimal integer."""
    hex_match = _HEX_PATTERN.fullmatch(value)
    if hex_match:
        return int(hex_match.group(1), 16)

    if _INT_PATTERN.fullmatch(value):
        return int(value)

    return None


def parse_float(value: str) -> Optional[float]:
    """Parse a decimal float; anything parse_int accepts is accepted too."""
    if _FLOAT_PATTERN.fullmatch(value):
        return float(value)

    as_int = parse_int(value)
    if as_int is not None:
        return float(as_int)

    return None


def parse_bool(value: str) -> bool:
    """Only "false", "0" and the empty string are false."""
    return value not in FALSY_VALUES


def parse_mode(value: str) -> Optional[int]:
    """Parse octal permission digits such as "644" or "0644"."""
    if _MODE_PATTERN.fullmatch(value):
        return int(value, 8)
    return None
