"""Numeric input coercion.

Calculator inputs arrive as loosely typed values (JSON numbers, form
strings, nulls). Anything that is not a well-formed number is treated
as zero instead of being rejected.
"""

import math
import re
from typing import Any

_UNSIGNED_NUMBER = re.compile(r"^\d*\.?\d*$")
_SIGNED_NUMBER = re.compile(r"^-?\d*\.?\d*$")


def parse_number(value: Any, allow_negative: bool = False) -> float:
    """Coerce a raw input value to a float.

    Args:
        value: Raw value (number, numeric string, None or anything else)
        allow_negative: Whether negative values are accepted

    Returns:
        The parsed value, or 0.0 if the value is malformed, empty,
        non-finite, or negative when negatives are not allowed
    """
    if isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        pattern = _SIGNED_NUMBER if allow_negative else _UNSIGNED_NUMBER
        if not pattern.match(text) or text.strip("-.") == "":
            return 0.0
        number = float(text)
    else:
        return 0.0

    if not math.isfinite(number):
        return 0.0
    if number < 0 and not allow_negative:
        return 0.0
    return number


def parse_int(value: Any, allow_negative: bool = False) -> int:
    """Coerce a raw input value to an int, truncating toward zero."""
    return int(parse_number(value, allow_negative=allow_negative))
