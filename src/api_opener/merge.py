"""Deep merge over JSON-like trees (maps, sequences, scalars)."""

from collections.abc import Mapping
from typing import Any


def is_plain_map(value: Any) -> bool:
    """True for mapping nodes. Lists, strings, numbers and None are leaves."""
    return isinstance(value, Mapping)


def deep_merge(left: Mapping, right: Mapping) -> dict:
    """Merge ``right`` onto ``left`` and return a new dict.

    Keys keep their first-seen order (left keys, then keys only in right).
    When both sides hold a map under the same key the merge recurses;
    otherwise the right value wins, unless it is missing or None, in which
    case the left value is kept. Neither input is mutated.
    """
    merged: dict = {}
    for key in [*left, *(k for k in right if k not in left)]:
        left_value = left.get(key)
        right_value = right.get(key)
        if is_plain_map(left_value) and is_plain_map(right_value):
            merged[key] = deep_merge(left_value, right_value)
        elif right_value is not None:
            merged[key] = right_value
        else:
            merged[key] = left_value
    return merged
