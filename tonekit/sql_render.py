"""Render parameterised SQL with its values inlined, for logging."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from enum import Enum
from typing import Any

_LOG = logging.getLogger(__name__)

_RESERVED_WORDS = frozenset(
    {
        "group", "order", "key", "level", "user", "organization", "tree_node",
        "knowledge", "agent", "status", "limit", "offset", "select", "update",
        "delete", "insert", "where", "from", "join", "left", "right", "inner",
        "outer", "on", "as", "by",
    }
)

_SQL_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def is_reserved_word(word: str) -> bool:
    """Report whether word, in any case, is a MySQL reserved word worth quoting."""
    return word.lower() in _RESERVED_WORDS


def _quote_name_or_plain(text: str) -> str:
    return f"`{text}`" if is_reserved_word(text) else text


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _render_value(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, Enum):
        return _quote_name_or_plain(str(value.value))
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, str):
        if is_reserved_word(value):
            return f"`{value}`"
        return "'" + value.replace("'", "''") + "'"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, datetime):
        return f"'{value.strftime(_SQL_TIME_FORMAT)}'"
    if isinstance(value, (list, tuple)):
        if all(_is_int(item) for item in value):
            return "(" + ",".join(str(item) for item in value) + ")"
        return "[" + " ".join(str(item) for item in value) + "]"
    return _quote_name_or_plain(str(value))


def render_sql(sql: str, params: Iterable[Any]) -> str:
    """Replace each '?' in turn with the SQL text of the next parameter."""
    complete = sql
    for value in params:
        complete = complete.replace("?", _render_value(value), 1)
    return complete


def print_sql(sql: str, params: Sequence[Any], operation: str) -> str:
    """Log the rendered statement under an operation heading and return it."""
    complete = render_sql(sql, params)
    _LOG.info("\n\n=== %s SQL ===\n%s\n=== 查询结束 ===\n\n", operation, complete)
    return complete


def print_query_sql(sql: str, params: Sequence[Any]) -> str:
    """Log and return a rendered query statement."""
    return print_sql(sql, params, "查询")


def print_count_sql(sql: str, params: Sequence[Any]) -> str:
    """Log and return a rendered count statement."""
    return print_sql(sql, params, "计数")


def print_update_sql(sql: str, params: Sequence[Any]) -> str:
    """Log and return a rendered update statement."""
    return print_sql(sql, params, "更新")


def print_delete_sql(sql: str, params: Sequence[Any]) -> str:
    """Log and return a rendered delete statement."""
    return print_sql(sql, params, "删除")


def print_insert_sql(sql: str, params: Sequence[Any]) -> str:
    """Log and return a rendered insert statement."""
    return print_sql(sql, params, "插入")