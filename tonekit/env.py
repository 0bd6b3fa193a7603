"""Service settings read from environment variables."""

from __future__ import annotations

import functools
import os
import socket
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from tonekit.utils.convert import parse_int64

ENV_PROD = "prod"
ENV_UAT = "uat"
ENV_TESTING = "test"
ENV_DEVELOP = "dev"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 80

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}

T = TypeVar("T", str, int, bool)


class EnvError(RuntimeError):
    """Raised when a required environment variable is missing or malformed."""


def _parse_int(text: str) -> Optional[int]:
    try:
        return parse_int64(text)
    except ValueError:
        return None


def _parse_bool(text: str) -> Optional[bool]:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    return None


@dataclass
class Settings:
    """Identity and address of the running service."""

    platform: str = ""
    service: str = ""
    env: str = ""
    version: str = ""
    id: str = ""
    host: str = ""
    port: int = DEFAULT_PORT
    hostname: str = ""
    debug: bool = False

    def check(self) -> "Settings":
        """Raise EnvError for a missing required value and default the host."""
        for name, value in (
            ("PLATFORM", self.platform),
            ("SERVICE", self.service),
            ("ENV", self.env),
            ("VERSION", self.version),
        ):
            if not value:
                raise EnvError(f"{name} 初始化失败，请设置环境变量: {name}")
        if not self.host:
            self.host = DEFAULT_HOST
        return self

    def is_prod(self) -> bool:
        return self.env == ENV_PROD

    def is_testing(self) -> bool:
        return self.env == ENV_TESTING

    def is_develop(self) -> bool:
        return self.env == ENV_DEVELOP

    def is_uat(self) -> bool:
        return self.env == ENV_UAT


def load(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from environ, or from the process environment."""
    source = os.environ if environ is None else environ
    port = _parse_int(source.get("PORT", ""))
    return Settings(
        platform=source.get("PLATFORM", ""),
        service=source.get("SERVICE", ""),
        env=source.get("ENV", ""),
        version=source.get("VERSION", ""),
        id=source.get("ID", ""),
        host=source.get("HOST", ""),
        port=DEFAULT_PORT if port is None else port,
        hostname=socket.gethostname(),
    )


@functools.lru_cache(maxsize=None)
def current() -> Settings:
    """Settings of this process, read once from the environment."""
    return load()


def environment() -> str:
    """The deployment environment name of this process."""
    return current().env


def env_value(
    name: str,
    default: T,
    use_default: bool = True,
    environ: Optional[Mapping[str, str]] = None,
) -> T:
    """Read name as the type of default, falling back to default when allowed.

    Raises EnvError when the value is missing or malformed and use_default is False.
    """
    source = os.environ if environ is None else environ
    text = source.get(name, "")
    parsed: Any
    if isinstance(default, bool):
        parsed = _parse_bool(text)
        if parsed is not None:
            return parsed
        if use_default:
            return default
        raise EnvError(f"ENV {name} is err value: {text}")
    if isinstance(default, int):
        parsed = _parse_int(text)
        if parsed is not None:
            return parsed
        if use_default:
            return default
        raise EnvError(f"ENV {name} is err value: {text}")
    if isinstance(default, str):
        if text:
            return text
        if use_default:
            return default
        raise EnvError(f"ENV {name} is empty")
    raise TypeError(f"unsupported default type: {type(default).__name__}")