# core/utils.py

"""
Repository for program-wide utilities.
"""

import math
import re
from collections.abc import Callable
from typing import Any, Optional

# prompt text in, next input line out (None once input is exhausted)
InputProvider = Callable[[str], Optional[str]]

# plain decimal notation only: no digit separators, no nan/inf spellings
INT_PATTERN = re.compile(r"\s*[+-]?\d+\s*")
FLOAT_PATTERN = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*")


def is_blank(text: str | None) -> bool:
    return text is None or text.strip() == ""


def try_parse_float(value: Any) -> float | None:
    """
    Coerces text or a number to a finite float.

    Args:
        value (Any): Input text, or an int/float passed through a setter.

    Returns:
        The parsed value, or None if the value is missing, malformed, or non-finite.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)

    elif isinstance(value, str) and FLOAT_PATTERN.fullmatch(value):
        number = float(value)

    else:
        return None

    return number if math.isfinite(number) else None


def try_parse_int(value: Any) -> int | None:
    """
    Coerces text or a number to an int.

    Returns:
        The parsed value, or None if the value is missing, malformed, or not a whole number.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        return int(value) if value.is_integer() else None

    if isinstance(value, str) and INT_PATTERN.fullmatch(value):
        return int(value)

    return None
