"""Request and response body capture for access logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional, Protocol, Union

from tonekit.utils.convert import marshal_to_string

MAX_LOG_SIZE = 8 * 1024
LOGGED_BODY_LIMIT = 4 * 1024
SKIP_LOGGING = "skipLogging"
TOO_LARGE = "[too large or binary content]"
SENSITIVE_FIELDS = ("password", "old_password", "new_password")

_LOG = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class _Writer(Protocol):
    def write(self, data: bytes) -> Any: ...


class BodyLogWriter:
    """Passes writes through to a writer while keeping a bounded copy for the log."""

    def __init__(self, writer: _Writer, max_size: int = MAX_LOG_SIZE, skip_logging: bool = False):
        self.writer = writer
        self.max_size = max_size
        self.skip_logging = skip_logging
        self.body = bytearray()
        self.truncated = False

    def write(self, data: BytesLike) -> int:
        """Write data through; record as much as still fits. Errors from the writer propagate."""
        chunk = bytes(data)
        written = self.writer.write(chunk)
        size = len(chunk) if written is None else written
        remaining = self.max_size - len(self.body)
        if remaining > 0:
            if len(chunk) > remaining:
                self.body += chunk[:remaining]
                self.truncated = True
            else:
                self.body += chunk
        return size

    def logged_body(self) -> str:
        """The body text for the log line, or a marker when skipped or too large."""
        if self.skip_logging:
            return SKIP_LOGGING
        if len(self.body) < LOGGED_BODY_LIMIT:
            return self.body.decode("utf-8", errors="replace")
        return TOO_LARGE


def _default_log(message: str) -> None:
    _LOG.error("%s", message)


@dataclass
class PanicWriter:
    """A writer that sends everything written to it to a log function."""

    log: Callable[[str], Any] = field(default=_default_log)

    def write(self, data: Union[BytesLike, str]) -> int:
        """Log data as text and report it all written."""
        if isinstance(data, str):
            self.log(data)
            return len(data)
        chunk = bytes(data)
        self.log(chunk.decode("utf-8", errors="replace"))
        return len(chunk)


def redact_body(body: Union[BytesLike, str]) -> str:
    """Drop password fields from a JSON object body; anything else becomes '{}'."""
    text = body if isinstance(body, str) else bytes(body).decode("utf-8", errors="replace")
    try:
        value = json.loads(text, parse_float=Decimal)
    except ValueError:
        return "{}"
    if value is None:
        return "null"
    if not isinstance(value, dict):
        return "{}"
    for name in SENSITIVE_FIELDS:
        value.pop(name, None)
    return marshal_to_string(value)


def describe_request(
    method: str,
    uri: str,
    body: Optional[BytesLike],
    content_type: str = "",
) -> Optional[str]:
    """The request log line for method, or None when the method is not logged."""
    method = method.upper()
    if method in ("POST", "PATCH", "DELETE"):
        length = 0 if body is None else len(body)
        if 0 < length < LOGGED_BODY_LIMIT and "multipart/form-data" not in content_type:
            assert body is not None
            return f"request url: {uri} request body: {redact_body(body)}"
        return f"request url: {uri} request body: {TOO_LARGE}"
    if method == "PUT":
        return f"request url: {uri}"
    return None