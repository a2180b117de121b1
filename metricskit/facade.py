"""A process-wide metrics facade that forwards measurements to one recorder.

Until a recorder is installed, every measurement is silently ignored.  A
recorder may be installed only once.
"""

from __future__ import annotations

import abc
import threading
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterable, Mapping, Optional, Tuple, Union

_U64_MAX = (1 << 64) - 1
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1

_SET_RECORDER_ERROR = (
    "attempted to set a recorder after the metrics system was already initialized"
)

Labels = Union[Mapping[str, object], Iterable[Tuple[str, object]], None]


@dataclass(frozen=True)
class _Key:
    """The name of a metric together with its labels."""

    name: str
    labels: Tuple[Tuple[str, str], ...] = field(default=())

    def __str__(self) -> str:
        if not self.labels:
            return self.name
        rendered = ",".join(f"{k}={v}" for k, v in self.labels)
        return f"{self.name}[{rendered}]"


def _make_key(name: str, labels: Labels) -> _Key:
    if labels is None:
        return _Key(str(name))
    pairs = labels.items() if isinstance(labels, Mapping) else labels
    return _Key(str(name), tuple((str(k), str(v)) for k, v in pairs))


class Recorder(abc.ABC):
    """Something that records metrics behind the facade."""

    @abc.abstractmethod
    def increment_counter(self, key: _Key, value: int) -> None:
        """Record a counter increment."""

    @abc.abstractmethod
    def update_gauge(self, key: _Key, value: int) -> None:
        """Record a new gauge value."""

    @abc.abstractmethod
    def record_histogram(self, key: _Key, value: int) -> None:
        """Record one observed histogram value."""


class _NoopRecorder(Recorder):
    def increment_counter(self, key: _Key, value: int) -> None:
        pass

    def update_gauge(self, key: _Key, value: int) -> None:
        pass

    def record_histogram(self, key: _Key, value: int) -> None:
        pass


_NOOP = _NoopRecorder()


class SetRecorderError(Exception):
    """Raised when a recorder is installed after one has already been set."""

    def __init__(self) -> None:
        super().__init__(_SET_RECORDER_ERROR)


class _Registry:
    __slots__ = ("lock", "recorder")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.recorder: Optional[Recorder] = None


_registry = _Registry()


def set_recorder(recorder: Recorder) -> None:
    """Install the global recorder; raise SetRecorderError if one is already set."""
    if not isinstance(recorder, Recorder):
        raise TypeError(f"expected a Recorder, got {recorder!r}")
    with _registry.lock:
        if _registry.recorder is not None:
            raise SetRecorderError()
        _registry.recorder = recorder


def _reset() -> None:
    """Uninstall the global recorder, returning the facade to its initial state."""
    with _registry.lock:
        _registry.recorder = None


def try_recorder() -> Optional[Recorder]:
    """Return the installed recorder, or None if none has been set."""
    return _registry.recorder


def recorder() -> Recorder:
    """Return the installed recorder, or a recorder that ignores everything."""
    installed = _registry.recorder
    return _NOOP if installed is None else installed


def _check_int(value: object, low: int, high: int, kind: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} values must be integers, got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{value} is out of range for a {kind}")
    return value


def _as_nanoseconds(value: object) -> int:
    if isinstance(value, timedelta):
        value = (
            value.days * 86_400_000_000_000
            + value.seconds * 1_000_000_000
            + value.microseconds * 1_000
        )
    return _check_int(value, 0, _U64_MAX, "histogram")


def counter(name: str, value: int, labels: Labels = None) -> None:
    """Increment the counter ``name`` by ``value``."""
    installed = try_recorder()
    if installed is not None:
        installed.increment_counter(
            _make_key(name, labels), _check_int(value, 0, _U64_MAX, "counter")
        )


def gauge(name: str, value: int, labels: Labels = None) -> None:
    """Set the gauge ``name`` to ``value``."""
    installed = try_recorder()
    if installed is not None:
        installed.update_gauge(
            _make_key(name, labels), _check_int(value, _I64_MIN, _I64_MAX, "gauge")
        )


def timing(name: str, start_or_value, end=None, labels: Labels = None) -> None:
    """Record a timing, given either a single duration or a start and an end.

    Durations are nanosecond integers or ``timedelta`` objects; start and end
    may be anything whose difference is such a duration.
    """
    installed = try_recorder()
    if installed is not None:
        measured = start_or_value if end is None else end - start_or_value
        installed.record_histogram(_make_key(name, labels), _as_nanoseconds(measured))


def value(name: str, value: int, labels: Labels = None) -> None:
    """Record a single value into the histogram ``name``."""
    installed = try_recorder()
    if installed is not None:
        installed.record_histogram(_make_key(name, labels), _as_nanoseconds(value))