"""Running callables while capturing the exceptions they raise."""

from __future__ import annotations

import threading
from collections.abc import Callable
from types import TracebackType
from typing import Any, Optional


def safely_run(func: Callable[[], Any]) -> Optional[Exception]:
    """Call func and return the exception it raised, or None if it succeeded."""
    try:
        func()
    except Exception as exc:
        return exc
    return None


def safely_go(func: Callable[[], Any], handle_error: Callable[[Exception], Any]) -> threading.Thread:
    """Run func in a daemon thread, passing any exception it raises to handle_error."""

    def runner() -> None:
        err = safely_run(func)
        if err is not None:
            handle_error(err)

    thread = threading.Thread(target=runner, daemon=True)
    thread.start()
    return thread


class ErrorGroup:
    """Runs callables in threads; wait() re-raises the first exception any of them raised."""

    def __init__(self) -> None:
        self._threads: list[threading.Thread] = []
        self._error: Optional[Exception] = None
        self._lock = threading.Lock()

    def go(self, func: Callable[[], Any]) -> None:
        """Start func in a new thread."""

        def runner() -> None:
            err = safely_run(func)
            if err is not None:
                with self._lock:
                    if self._error is None:
                        self._error = err

        thread = threading.Thread(target=runner, daemon=True)
        with self._lock:
            self._threads.append(thread)
        thread.start()

    def wait(self) -> None:
        """Block until every started callable finishes, then raise the first failure."""
        while True:
            with self._lock:
                threads, self._threads = self._threads, []
            if not threads:
                break
            for thread in threads:
                thread.join()
        with self._lock:
            err, self._error = self._error, None
        if err is not None:
            raise err

    def __enter__(self) -> "ErrorGroup":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc is None:
            self.wait()