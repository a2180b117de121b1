"""An append-only bucket of values with snapshot reads."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")

BLOCK_SIZE = 128


class BlockFullError(Exception):
    """Raised when a value is pushed into a block that has no free slots."""

    def __init__(self, value: object) -> None:
        super().__init__("block is full")
        self.value = value


class Block(Generic[T]):
    """A fixed-size chunk of values, linked to the block written before it."""

    __slots__ = ("_slots", "_lock", "prev")

    def __init__(self, prev: Optional["Block[T]"] = None) -> None:
        self._slots: list[T] = []
        self._lock = threading.Lock()
        self.prev = prev

    def __len__(self) -> int:
        return len(self._slots)

    def data(self) -> list[T]:
        """Return a copy of the values written to this block, in write order."""
        with self._lock:
            return list(self._slots)

    def push(self, value: T) -> None:
        """Append a value, raising BlockFullError if the block is full."""
        with self._lock:
            if len(self._slots) >= BLOCK_SIZE:
                raise BlockFullError(value)
            self._slots.append(value)


class AtomicBucket(Generic[T]):
    """A thread-safe, unbounded bucket with snapshot capabilities.

    Values are stored in a chain of blocks.  Reading walks the chain from the
    newest block to the oldest, so blocks come out in reverse order while the
    values inside each block keep their original order.  Clearing the bucket
    does not disturb a read that is already in progress.
    """

    def __init__(self) -> None:
        self._tail: Optional[Block[T]] = None
        self._lock = threading.Lock()

    def push(self, value: T) -> None:
        """Add a value to the bucket."""
        with self._lock:
            tail = self._tail
            if tail is None or len(tail) >= BLOCK_SIZE:
                tail = Block(prev=tail)
                self._tail = tail
            tail.push(value)

    def data(self) -> list[T]:
        """Collect every value in the bucket, newest block first."""
        values: list[T] = []
        self.data_with(values.extend)
        return values

    def data_with(self, f: Callable[[Sequence[T]], object]) -> None:
        """Call ``f`` with the contents of each block, newest block first."""
        with self._lock:
            block = self._tail
        while block is not None:
            f(block.data())
            block = block.prev

    def clear(self) -> None:
        """Empty the bucket; reads already in progress are unaffected."""
        with self._lock:
            self._tail = None