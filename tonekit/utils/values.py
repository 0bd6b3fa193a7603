"""Content types by file name, float helpers and random strings."""

from __future__ import annotations

import math
import random

from tonekit.utils.convert import parse_float

CONTENT_TYPE_HEADER = "Content-Type"
LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

_CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".html": "text/html",
    ".txt": "text/plain",
    ".mp4": "video/mp4",
    ".webm": "video/webm",
}


def _extension(file_name: str) -> str:
    base = file_name.rsplit("/", 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def content_type(file_name: str) -> str:
    """Return the Content-Type for a file name's extension."""
    return _CONTENT_TYPES.get(_extension(file_name), DEFAULT_CONTENT_TYPE)


def round2(value: float) -> float:
    """Round to two decimals the way fixed two-place formatting does."""
    return float(f"{value:.2f}")


def str_to_float(text: str) -> float:
    """Parse a float, returning 0.0 for anything unparsable or out of range."""
    value = parse_float(text)
    if math.isinf(value) and "inf" not in text.lower():
        return 0.0
    return value


def rand_str(length: int) -> str:
    """A random string of ASCII letters."""
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(random.choices(LETTERS, k=length))