# metricskit

A small metrics toolkit for Python applications and libraries.

It has two halves:

- **A metrics facade** (`metricskit.facade`). Libraries record counters,
  gauges and histogram values through one API. The application that uses those
  libraries picks the backend by installing a recorder. Until a recorder is
  installed, every call is ignored.
- **Helper data structures** for people who write recorders and exporters:
  `AtomicBucket`, `StreamingIntegers`, `Quantile` and `MetricsTree`.

It has no runtime dependencies and runs on Python 3.10 or later.

## Installation

From a checkout of the project:

```
pip install .
```

## Recording metrics

```python
from metricskit.facade import counter, gauge, timing, value

def handle_request():
    counter("requests_processed", 1)
    gauge("connection_count", 300)
    timing("service.execution_time", 120, 190)  # start and end; records 70
    value("service.results_returned", 666)
```

Each call can take labels, either as a mapping or as an iterable of
`(name, value)` pairs:

```python
counter("requests_processed", 1, {"request_type": "admin"})
timing("service.execution_time", 70, labels={"type": "users"})
```

For `timing` with a single duration, pass the labels by keyword, since the
third positional argument is the end of the interval.

The values are checked when a recorder is installed:

- `counter` takes an integer from 0 to 2**64 - 1.
- `gauge` takes a signed 64-bit integer.
- `timing` and `value` take a non-negative integer number of nanoseconds, or a
  `datetime.timedelta`, which is converted to nanoseconds. Given a start and
  an end, `timing` records `end - start`.

A value of the wrong type raises `TypeError`; one out of range raises
`ValueError`.

## Installing a recorder

A recorder subclasses `Recorder` and implements three methods:

```python
from metricskit.facade import Recorder, SetRecorderError, set_recorder

class LogRecorder(Recorder):
    def increment_counter(self, key, value):
        print(f"counter {key} -> {value}")

    def update_gauge(self, key, value):
        print(f"gauge {key} -> {value}")

    def record_histogram(self, key, value):
        print(f"histogram {key} -> {value}")

set_recorder(LogRecorder())
```

The `key` passed to a recorder has a `name` and a tuple of `labels` pairs.
Printed, it reads `name` or `name[label=value,...]`.

A process can install a recorder only once. A second call to `set_recorder`
raises `SetRecorderError`. Passing something that is not a `Recorder` raises
`TypeError`. Metrics recorded before a recorder is installed are dropped.

Two functions return the installed recorder:

- `try_recorder()` returns the recorder, or `None` if none is installed.
- `recorder()` always returns a recorder. It falls back to one that does nothing.

## Helper structures

`metricskit.bucket.AtomicBucket` is an unbounded container that several threads
can push into at the same time.

- Values are stored in blocks (`Block`) of 128 values each. Pushing into a
  full `Block` directly raises `BlockFullError`.
- `data()` returns a snapshot of the contents. The newest block comes first, and
  values inside a block keep their insertion order.
- `data_with(f)` passes each block's values to `f` in turn, newest first.
- `clear()` empties the bucket. A snapshot that is already being read is not
  affected.

`metricskit.streaming.StreamingIntegers` stores unsigned 64-bit integers
compactly, using delta, zigzag and variable-byte encoding.

```python
from metricskit.streaming import StreamingIntegers

si = StreamingIntegers()
si.compress([8, 6, 7, 5, 3, 0, 9])
assert si.decompress() == [8, 6, 7, 5, 3, 0, 9]
assert len(si) == 7
```

`decompress_with(f)` decodes the set in batches of up to 1024 values and calls
`f` with each batch, so the whole list is never built at once. Iterating over
the set yields the values one by one. `is_empty()` tells whether anything has
been added.

`metricskit.quantile.Quantile` holds a quantile clamped to the range 0.0 to 1.0,
together with a familiar label:

| Quantile | Label  |
|----------|--------|
| 0.0      | `min`  |
| 1.0      | `max`  |
| 0.99     | `p99`  |
| 0.999    | `p999` |

The clamped number is `Quantile.value` and the label is `Quantile.label`.
`parse_quantiles` turns a list of floats into a list of `Quantile` objects.

`metricskit.tree.MetricsTree` builds nested scopes out of integer values:

- `insert_value(levels, key, value)` adds one value under the scope named by
  the list `levels`.
- `insert_values(levels, values)` adds several `(key, value)` pairs.
- `clear()` removes everything.
- `to_dict()` returns the tree as nested dictionaries, keys sorted.
- `to_json()` returns the same as a JSON string.

If a scope name is already taken by a value, the insert is ignored.

## Example

`metricskit.example.PrintRecorder` prints every metric it receives, to standard
output or to a file passed to its constructor. This command installs it and
records a series of sample metrics:

```
metricskit-example
```

## What it does not do

The package ships no exporter, aggregator or storage. Apart from the demo
`PrintRecorder`, what happens to recorded metrics is up to the recorder you
write and install.

## Running the tests

```
pip install .[test]
pytest
```