"""Block until a termination signal arrives, then run exit hooks."""

from __future__ import annotations

import signal
import time
from collections.abc import Callable, Iterable
from typing import Any

ExitFunc = Callable[[], Any]

_WATCHED = ("SIGHUP", "SIGQUIT", "SIGTERM", "SIGINT")
_EXITING = {
    getattr(signal, name) for name in ("SIGQUIT", "SIGTERM", "SIGINT") if hasattr(signal, name)
}
_HANGUP = getattr(signal, "SIGHUP", None)


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return str(signum)


def handle_signal(signum: int, exit_funcs: Iterable[ExitFunc]) -> None:
    """React to one signal: run exit_funcs and exit on termination, ignore hang-up.

    Raises SystemExit(0) for termination and unknown signals.
    """
    name = _signal_name(signum)
    print(f"signal: service got signal: {name}!")
    if signum in _EXITING:
        for func in exit_funcs:
            func()
        print("signal: service exit now!")
        raise SystemExit(0)
    if _HANGUP is not None and signum == _HANGUP:
        print("signal: got signal hup!")
        return
    print(f"signal: got unknown signal {name}!")
    raise SystemExit(0)


def wait(*exit_funcs: ExitFunc) -> None:
    """Wait for hang-up, quit, terminate or interrupt; exit after running exit_funcs.

    Must be called from the main thread. Previous handlers are restored on exit.
    """
    signums = [getattr(signal, name) for name in _WATCHED if hasattr(signal, name)]

    def _handler(signum: int, _frame: Any) -> None:
        handle_signal(signum, exit_funcs)

    previous = {signum: signal.signal(signum, _handler) for signum in signums}
    try:
        while True:
            if hasattr(signal, "pause"):
                signal.pause()
            else:
                time.sleep(3600)
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, signal.SIG_DFL if handler is None else handler)