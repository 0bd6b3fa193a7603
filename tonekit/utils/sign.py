"""MD5 request signatures over sorted parameters and a secret key."""

from __future__ import annotations

import dataclasses
import json
import math
from decimal import Decimal
from typing import Any

from tonekit.utils.checksum import md5_hex

SIGN_NAME = "sign"


class SignError(ValueError):
    """Raised when a signature is missing, wrong or cannot be computed."""


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    number = Decimal(repr(value)).normalize()
    sign, digits, exponent = number.as_tuple()
    prefix = "-" if sign else ""
    point = len(digits) + int(exponent) - 1
    if point < -4 or point >= 6:
        text = "".join(map(str, digits))
        mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
        return f"{prefix}{mantissa}e{'-' if point < 0 else '+'}{abs(point):02d}"
    return format(number, "f")


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_float(float(value))
    if isinstance(value, dict):
        inner = " ".join(f"{key}:{_format_value(value[key])}" for key in sorted(value))
        return f"map[{inner}]"
    if isinstance(value, list):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    return str(value)


def _as_mapping(params: Any) -> dict[str, Any]:
    if isinstance(params, str):
        return {"default": params}
    if dataclasses.is_dataclass(params) and not isinstance(params, type):
        params = dataclasses.asdict(params)
    try:
        encoded = json.dumps(params, allow_nan=False)
    except (TypeError, ValueError):
        raise SignError("sign params not conform") from None
    decoded = json.loads(encoded, parse_int=float)
    return decoded if isinstance(decoded, dict) else {}


def get_sign(params: Any, secret_key: str) -> str:
    """Return the hex MD5 of the sorted key/value pairs followed by the secret key."""
    mapping = _as_mapping(params)
    base = "".join(f"{key}{_format_value(mapping[key])}" for key in sorted(mapping))
    return md5_hex(base + secret_key)


def verify_sign(sign: str, params: Any, secret_key: str) -> None:
    """Raise SignError unless sign is the signature of params under secret_key."""
    if sign == "":
        raise SignError("sign not exit")
    try:
        expected = get_sign(params, secret_key)
    except SignError:
        raise SignError("sign error") from None
    if expected != sign:
        raise SignError("sign error")