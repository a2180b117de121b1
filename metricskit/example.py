"""A recorder that prints every measurement, with a small demonstration."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from metricskit.facade import Recorder, counter, gauge, set_recorder, timing, value


class PrintRecorder(Recorder):
    """Write each measurement as a line of text."""

    def __init__(self, file: Optional[TextIO] = None) -> None:
        self._file = file

    def _emit(self, kind: str, key: object, number: int) -> None:
        print(
            f"metrics -> {kind}(name={key}, value={number})",
            file=self._file if self._file is not None else sys.stdout,
        )

    def increment_counter(self, key, value: int) -> None:
        self._emit("counter", key, value)

    def update_gauge(self, key, value: int) -> None:
        self._emit("gauge", key, value)

    def record_histogram(self, key, value: int) -> None:
        self._emit("histogram", key, value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Install a PrintRecorder and record a handful of sample metrics."""
    server_name = "web03"

    set_recorder(PrintRecorder())

    counter("requests_processed", 1)
    counter("requests_processed", 1, {"request_type": "admin"})
    counter("requests_processed", 1, {"request_type": "admin", "server": server_name})
    counter(
        "requests_processed",
        1,
        {"request_type": "admin", "server": server_name, "version": "e7d6f12"},
    )
    gauge("connection_count", 300)
    gauge("connection_count", 300, {"listener": "frontend"})
    gauge("connection_count", 300, {"listener": "frontend", "server": server_name})
    gauge(
        "connection_count",
        300,
        {"listener": "frontend", "server": server_name, "version": "e7d6f12"},
    )
    timing("service.execution_time", 120, 190)
    timing("service.execution_time", 120, 190, {"type": "users"})
    timing("service.execution_time", 120, 190, {"type": "users", "server": server_name})
    timing(
        "service.execution_time",
        120,
        190,
        {"type": "users", "server": server_name, "version": "e7d6f12"},
    )
    timing("service.execution_time", 70)
    timing("service.execution_time", 70, labels={"type": "users"})
    timing("service.execution_time", 70, labels={"type": "users", "server": server_name})
    timing(
        "service.execution_time",
        70,
        labels={"type": "users", "server": server_name, "version": "e7d6f12"},
    )
    value("service.results_returned", 666)
    value("service.results_returned", 666, {"type": "users"})
    value("service.results_returned", 666, {"type": "users", "server": server_name})
    value(
        "service.results_returned",
        666,
        {"type": "users", "server": server_name, "version": "e7d6f12"},
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())