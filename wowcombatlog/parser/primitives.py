"""
Primitive field decoders: numbers, hex flags and log booleans.
"""

import re
from typing import Callable, TypeVar

from ..errors import InvalidBool, InvalidHex, InvalidNumber

N = TypeVar("N", int, float)

# Combat log booleans come in nil/1 and 0/1 flavours
_BOOL_VALUES = {"nil": False, "0": False, "1": True}

# int()/float() also take whitespace, "+", "_" separators, "inf" and
# exponents; the log writes none of those
_LITERALS = {
    int: re.compile(r"-?\d+"),
    float: re.compile(r"-?\d+(?:\.\d+)?"),
}
_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")


def parse_num(field: str, number_type: Callable[[str], N] = int) -> N:
    """
    Parse a decimal field as `number_type` (int or float).

    Signed values are accepted: absorbs, overkill and coordinates go negative.

    Raises:
        InvalidNumber: if the field is not a valid literal of that type
    """
    pattern = _LITERALS.get(number_type)
    if not isinstance(field, str) or (pattern is not None and not pattern.fullmatch(field)):
        raise InvalidNumber(field, number_type.__name__)
    try:
        return number_type(field)
    except ValueError:
        raise InvalidNumber(field, number_type.__name__) from None


def parse_bool(field: str) -> bool:
    """Parse nil/0 as False and 1 as True."""
    try:
        return _BOOL_VALUES[field]
    except KeyError:
        raise InvalidBool(field) from None


def parse_hex(field: str) -> int:
    """Parse a base-16 field with an optional 0x prefix."""
    digits = field[2:] if field.startswith("0x") else field
    if not _HEX_DIGITS.fullmatch(digits):
        raise InvalidHex(field)
    return int(digits, 16)


def is_number(field: str) -> bool:
    """Return True if `field` parses as an integer."""
    try:
        parse_num(field)
    except InvalidNumber:
        return False
    return True
