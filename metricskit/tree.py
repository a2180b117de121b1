"""A tree of integer metrics grouped by nested scope."""

from __future__ import annotations

import json
from typing import Iterable, Sequence, Union

_MIN = -(1 << 63)
_MAX = (1 << 64) - 1

_Entry = Union[int, "MetricsTree"]


def _check_integer(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"metric values must be integers, got {value!r}")
    if not _MIN <= value <= _MAX:
        raise ValueError(f"{value} does not fit in a signed or unsigned 64-bit integer")
    return value


class MetricsTree:
    """A tree-structured metrics container.

    Each level of the tree is a nested scope; leaves hold integer values.
    """

    __slots__ = ("_contents",)

    def __init__(self) -> None:
        self._contents: dict[str, _Entry] = {}

    def _descend(self, levels: Sequence[str]) -> "MetricsTree | None":
        node = self
        for name in levels:
            entry = node._contents.setdefault(name, MetricsTree())
            if not isinstance(entry, MetricsTree):
                # A value already occupies this scope; nothing is inserted.
                return None
            node = entry
        return node

    def insert_value(self, levels: Sequence[str], key: str, value: int) -> None:
        """Insert a single value under the scope given by ``levels``."""
        value = _check_integer(value)
        node = self._descend(levels)
        if node is not None:
            node._contents[key] = value

    def insert_values(self, levels: Sequence[str], values: Iterable[tuple[str, int]]) -> None:
        """Insert several ``(key, value)`` pairs under the scope given by ``levels``."""
        pairs = [(key, _check_integer(value)) for key, value in values]
        node = self._descend(levels)
        if node is not None:
            node._contents.update(pairs)

    def clear(self) -> None:
        """Remove every entry from the tree."""
        self._contents.clear()

    def to_dict(self) -> dict:
        """Return the tree as nested dictionaries with keys in sorted order."""
        return {
            key: entry.to_dict() if isinstance(entry, MetricsTree) else entry
            for key, entry in sorted(self._contents.items())
        }

    def to_json(self) -> str:
        """Serialise the tree as a JSON object with keys in sorted order."""
        return json.dumps(self.to_dict())