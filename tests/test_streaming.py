import random

import pytest

from metricskit.streaming import StreamingIntegers


def _gamma_distribution(length, upper_bound_nanos=200_000_000):
    rng = random.Random(length)
    return [int(rng.gammavariate(1.75, 1.0) * upper_bound_nanos) for _ in range(length)]


def _linear_distribution(length):
    return list(range(length))


def test_streaming_integers_new():
    si = StreamingIntegers()
    assert len(si.decompress()) == 0
    assert si.is_empty()
    assert len(si) == 0


def test_streaming_integers_single_block():
    si = StreamingIntegers()
    assert len(si.decompress()) == 0

    values = [8, 6, 7, 5, 3, 0, 9]
    si.compress(values)

    assert si.decompress() == values
    assert len(si) == len(values)
    assert not si.is_empty()


def test_streaming_integers_multiple_blocks():
    si = StreamingIntegers()
    assert len(si.decompress()) == 0

    values = [8, 6, 7, 5, 3, 0, 9]
    si.compress(values)
    values2 = [6, 6, 6]
    si.compress(values2)
    values3 = []
    si.compress(values3)
    values4 = [6, 6, 6, 7, 7, 7, 8, 8, 8]
    si.compress(values4)

    total = values + values2 + values3 + values4
    assert si.decompress() == total
    assert len(si) == len(total)


def test_streaming_integers_empty_block():
    si = StreamingIntegers()
    assert len(si.decompress()) == 0

    si.compress([])

    assert len(si.decompress()) == 0
    assert si.is_empty()


def test_extreme_values_round_trip():
    values = [0, 2**64 - 1, 0, 2**63, 2**63 - 1, 1, 2**64 - 1]
    si = StreamingIntegers()
    si.compress(values)
    assert si.decompress() == values


@pytest.mark.parametrize("length", [100, 10_000])
def test_gamma_distribution_round_trip(length):
    values = _gamma_distribution(length)
    si = StreamingIntegers()
    si.compress(values)
    decompressed = si.decompress()
    assert decompressed == values
    assert sum(decompressed) == sum(values)


@pytest.mark.parametrize("length", [100, 10_000])
def test_linear_distribution_decompress_with_sum(length):
    values = _linear_distribution(length)
    si = StreamingIntegers()
    si.compress(values)

    total = 0
    collected = []

    def consume(batch):
        nonlocal total
        assert 0 < len(batch) <= 1024
        total += sum(batch)
        collected.extend(batch)

    si.decompress_with(consume)
    assert total == sum(values)
    assert collected == values


def test_decompress_with_batches_of_fixed_size():
    values = _linear_distribution(2500)
    si = StreamingIntegers()
    si.compress(values)

    sizes = []
    si.decompress_with(lambda batch: sizes.append(len(batch)))
    assert sizes == [1024, 1024, 452]


def test_decompress_with_on_empty_set_calls_nothing():
    calls = []
    StreamingIntegers().decompress_with(calls.append)
    assert calls == []


def test_iteration_matches_decompress():
    values = [5, 1000000, 1000001, 3]
    si = StreamingIntegers()
    si.compress(values)
    assert list(si) == si.decompress() == values


def test_compress_accepts_generators():
    si = StreamingIntegers()
    si.compress(n * 3 for n in range(10))
    assert si.decompress() == [n * 3 for n in range(10)]


@pytest.mark.parametrize("bad", [-1, 2**64])
def test_out_of_range_values_rejected(bad):
    si = StreamingIntegers()
    with pytest.raises(ValueError):
        si.compress([1, bad])
    assert si.decompress() == []
    assert len(si) == 0


def test_non_integer_values_rejected():
    si = StreamingIntegers()
    with pytest.raises(TypeError):
        si.compress([1.5])
    assert si.is_empty()