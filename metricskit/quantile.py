"""Quantiles paired with their familiar percentile labels."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable


def _format_float(number: float) -> str:
    """Render a float in plain decimal notation, dropping a trailing '.0'."""
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), "f")


class Quantile:
    """A quantile value together with a human-friendly label such as ``p99``.

    Values are clamped to the range 0.0 to 1.0.  A quantile of 0.0 is labelled
    ``min`` and 1.0 is labelled ``max``; any other value becomes the percentile
    with the decimal point removed, so 0.999 is ``p999``.
    """

    __slots__ = ("_value", "_label")

    def __init__(self, quantile: float) -> None:
        quantile = float(quantile)
        if math.isnan(quantile) or quantile <= 0.0:
            clamped = 0.0
        else:
            clamped = min(quantile, 1.0)

        if clamped == 0.0:
            label = "min"
        elif clamped == 1.0:
            label = "max"
        else:
            label = "p" + _format_float(clamped * 100.0).replace(".", "")

        self._value = clamped
        self._label = label

    @property
    def value(self) -> float:
        """The clamped quantile."""
        return self._value

    @property
    def label(self) -> str:
        """The display label."""
        return self._label

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantile):
            return NotImplemented
        return self._value == other._value and self._label == other._label

    def __hash__(self) -> int:
        return hash((self._value, self._label))

    def __repr__(self) -> str:
        return f"Quantile({self._value!r}, {self._label!r})"


def parse_quantiles(quantiles: Iterable[float]) -> list[Quantile]:
    """Turn a sequence of floats into Quantile objects."""
    return [Quantile(q) for q in quantiles]