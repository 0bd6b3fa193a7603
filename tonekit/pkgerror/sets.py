"""A set of strings with a few convenience queries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class StringSet(set):
    """A mutable set of strings."""

    def insert(self, *items: str) -> "StringSet":
        """Add items to the set and return the set."""
        self.update(items)
        return self

    def delete(self, *items: str) -> "StringSet":
        """Remove items from the set, ignoring missing ones, and return the set."""
        self.difference_update(items)
        return self

    def has(self, item: str) -> bool:
        """Return True if item is in the set."""
        return item in self

    def has_all(self, *items: str) -> bool:
        """Return True if every item is in the set."""
        return all(item in self for item in items)

    def has_any(self, *items: str) -> bool:
        """Return True if at least one item is in the set."""
        return any(item in self for item in items)

    def sorted_list(self) -> list[str]:
        """Return the contents as a sorted list."""
        return sorted(self)

    def pop_any(self) -> str | None:
        """Remove and return an arbitrary element, or None when empty."""
        if not self:
            return None
        return self.pop()


def string_key_set(mapping: Any) -> StringSet:
    """Build a StringSet from the keys of a mapping whose keys are strings."""
    if not isinstance(mapping, Mapping):
        raise TypeError(f"expected a mapping, got {type(mapping).__name__}")
    result = StringSet()
    for key in mapping:
        if not isinstance(key, str):
            raise TypeError(f"mapping key {key!r} is not a string")
        result.add(key)
    return result