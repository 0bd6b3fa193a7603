"""Conversions between strings, numbers, booleans and JSON values."""

from __future__ import annotations

import json
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Union

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECODER = json.JSONDecoder(parse_float=Decimal)
_HTML_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


class StrToBoolError(ValueError):
    """Raised when a string is not one of the accepted boolean spellings."""

    def __init__(self, text: str = ""):
        super().__init__("string to bool fail")
        self.text = text


def float_to_str(value: float) -> str:
    """Shortest decimal text that reads back as value, never in exponent form."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def parse_int64(text: str) -> int:
    """Parse a base-10 signed 64-bit integer; raise ValueError otherwise."""
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value


def parse_float(text: str) -> float:
    """Parse a float, returning 0.0 for anything unparsable."""
    if not text or text != text.strip() or "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


def parse_str_bool(text: str) -> bool:
    """Accept only 'true', '1', 'false' and '0'."""
    if text in ("true", "1"):
        return True
    if text in ("false", "0"):
        return False
    raise StrToBoolError(text)


def int_to_bool(value: int) -> bool:
    """Non-zero is True."""
    return value != 0


def bool_to_int(value: bool) -> int:
    """True is 1, False is 0."""
    return int(bool(value))


def _encode_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def marshal_to_string(value: Any) -> str:
    """Compact JSON with sorted keys and HTML-sensitive characters escaped."""
    text = json.dumps(
        value,
        ensure_ascii=False,
        sort_keys=True,
        separators=(",", ":"),
        allow_nan=False,
        default=_encode_default,
    )
    for char, escape in _HTML_ESCAPES:
        text = text.replace(char, escape)
    return text


def json_unmarshal(data: Union[bytes, bytearray, str]) -> Any:
    """Decode the first JSON value in data, keeping big numbers exact."""
    text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
    value, _ = _DECODER.raw_decode(text.lstrip(" \t\r\n"))
    return value


def json_to_str(value: Any) -> str:
    """Return value if it is a string, else an empty string."""
    return value if isinstance(value, str) else ""


def json_to_int(value: Any) -> int:
    """Convert a decoded JSON value to an integer, truncating fractions.

    Raises ValueError for a non-numeric string and TypeError for other types.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise TypeError("Unknown Type" + type(value).__name__)
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        try:
            return int(value)
        except (ValueError, OverflowError, InvalidOperation):
            return 0
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return parse_int64(value)
    raise TypeError("Unknown Type" + type(value).__name__)