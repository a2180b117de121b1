"""A compressed, append-only set of unsigned 64-bit integers."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional, Sequence

_BITS = 64
_MASK = (1 << _BITS) - 1
_SIGN = 1 << (_BITS - 1)
_BATCH_SIZE = 1024


def _to_signed(number: int) -> int:
    """Wrap an integer into the signed 64-bit range."""
    number &= _MASK
    return number - (1 << _BITS) if number & _SIGN else number


def _zigzag_encode(number: int) -> int:
    """Map a signed 64-bit integer onto an unsigned one, small magnitudes first."""
    return ((number << 1) ^ (number >> (_BITS - 1))) & _MASK


def _zigzag_decode(number: int) -> int:
    """Invert the zigzag mapping."""
    return (number >> 1) ^ -(number & 1)


def _vbyte_encode(number: int, buf: bytearray) -> None:
    """Append ``number`` to ``buf`` as a little-endian base-128 varint."""
    while number >= 0x80:
        buf.append(0x80 | (number & 0x7F))
        number >>= 7
    buf.append(number)


def _vbyte_decode(buf: bytes) -> Iterator[int]:
    """Yield each varint stored in ``buf``."""
    value = 0
    shift = 0
    for byte in buf:
        value |= (byte & 0x7F) << shift
        if byte & 0x80:
            shift += 7
            continue
        yield value
        value = 0
        shift = 0


class StreamingIntegers:
    """A set of integers stored with delta and variable-byte encoding.

    Each integer is stored as the zigzag-encoded difference from the one
    before it, written as a varint, so long runs of similar values take far
    less space than their plain representation.  Values can be decompressed
    all at once or handed out in batches.
    """

    __slots__ = ("_inner", "_len", "_last")

    def __init__(self) -> None:
        self._inner = bytearray()
        self._len = 0
        self._last: Optional[int] = None

    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        """Return True if the set holds no integers."""
        return self._len == 0

    def compress(self, src: Iterable[int]) -> None:
        """Compress the given unsigned 64-bit integers and add them to the set."""
        values = list(src)
        for number in values:
            if isinstance(number, bool) or not isinstance(number, int):
                raise TypeError(f"expected an integer, got {number!r}")
            if not 0 <= number <= _MASK:
                raise ValueError(f"{number} is not an unsigned 64-bit integer")
        if not values:
            return

        last = self._last
        for number in values:
            current = _to_signed(number)
            # The very first integer is stored whole rather than as a delta.
            delta = current if last is None else _to_signed(current - last)
            _vbyte_encode(_zigzag_encode(delta), self._inner)
            last = current

        self._len += len(values)
        self._last = last

    def __iter__(self) -> Iterator[int]:
        last = 0
        for encoded in _vbyte_decode(bytes(self._inner)):
            last = _to_signed(last + _zigzag_decode(encoded))
            yield last & _MASK

    def decompress(self) -> list[int]:
        """Return every integer in the set, in the order it was added."""
        return list(self)

    def decompress_with(self, f: Callable[[Sequence[int]], object]) -> None:
        """Call ``f`` with successive batches of the decompressed integers."""
        batch: list[int] = []
        for number in self:
            batch.append(number)
            if len(batch) == _BATCH_SIZE:
                f(batch)
                batch = []
        if batch:
            f(batch)