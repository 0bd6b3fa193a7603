"""Errors that bundle several other errors together."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Optional

Matcher = Callable[[BaseException], bool]

ERR_PRECONDITION_VIOLATED = Exception("precondition is violated")


def _unwrap(err: BaseException) -> Optional[BaseException]:
    method = getattr(err, "unwrap", None)
    if callable(method):
        return method()
    return err.__cause__


def _is(err: Optional[BaseException], target: Any) -> bool:
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        if isinstance(target, type):
            if isinstance(err, target):
                return True
        elif err is target or err == target:
            return True
        matches = getattr(err, "matches", None)
        if callable(matches) and matches(target):
            return True
        err = _unwrap(err)
    return False


class Aggregate(Exception):
    """Several errors reported as one; never empty."""

    def __init__(self, errors: Iterable[BaseException]):
        self.errors: tuple[BaseException, ...] = tuple(errors)
        super().__init__(*self.errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def _visit(self, predicate: Callable[[BaseException], bool]) -> bool:
        for err in self.errors:
            if isinstance(err, Aggregate):
                if err._visit(predicate):
                    return True
            elif predicate(err):
                return True
        return False

    def __str__(self) -> str:
        if not self.errors:
            return ""
        if len(self.errors) == 1:
            return str(self.errors[0])
        seen: dict[str, None] = {}

        def collect(err: BaseException) -> bool:
            seen.setdefault(str(err))
            return False

        self._visit(collect)
        result = ", ".join(seen)
        if len(seen) == 1:
            return result
        return f"[{result}]"

    def matches(self, target: Any) -> bool:
        """Return True if any contained error, or its cause chain, matches target."""
        return self._visit(lambda err: _is(err, target))


def new_aggregate(errors: Iterable[Optional[BaseException]]) -> Optional[Aggregate]:
    """Bundle the non-None errors, or return None when there are none."""
    kept = [err for err in errors if err is not None]
    if not kept:
        return None
    return Aggregate(kept)


def _matches_any(err: BaseException, matchers: tuple[Matcher, ...]) -> bool:
    return any(matcher(err) for matcher in matchers)


def filter_out(err: Optional[BaseException], *matchers: Matcher) -> Optional[BaseException]:
    """Drop every error that a matcher accepts, recursing into aggregates."""
    if err is None:
        return None
    if isinstance(err, Aggregate):
        remaining = (filter_out(inner, *matchers) for inner in err.errors)
        return new_aggregate(remaining)
    if _matches_any(err, matchers):
        return None
    return err


def flatten(agg: Optional[Aggregate]) -> Optional[Aggregate]:
    """Collapse nested aggregates into a single level."""
    if agg is None:
        return None
    result: list[BaseException] = []
    for err in agg.errors:
        if isinstance(err, Aggregate):
            inner = flatten(err)
            if inner is not None:
                result.extend(inner.errors)
        elif err is not None:
            result.append(err)
    return new_aggregate(result)


def aggregate_from_message_counts(counts: Optional[Mapping[str, int]]) -> Optional[Aggregate]:
    """Build an aggregate from message occurrence counts."""
    if counts is None:
        return None
    errors = [
        Exception(f"{message} (repeated {count} times)" if count > 1 else message)
        for message, count in counts.items()
    ]
    return new_aggregate(errors)


def reduce_error(err: Optional[BaseException]) -> Optional[BaseException]:
    """Return the sole member of a one-element aggregate, else err itself."""
    if isinstance(err, Aggregate):
        if len(err.errors) == 1:
            return err.errors[0]
        if not err.errors:
            return None
    return err


def aggregate_concurrently(*funcs: Callable[[], Any]) -> Optional[Aggregate]:
    """Run the callables in parallel and bundle the exceptions they raise."""
    if not funcs:
        return None
    errors: list[BaseException] = []
    with ThreadPoolExecutor(max_workers=len(funcs)) as pool:
        futures = [pool.submit(func) for func in funcs]
        for future in as_completed(futures):
            exc = future.exception()
            if exc is not None:
                errors.append(exc)
    return new_aggregate(errors)