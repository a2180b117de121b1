import pytest

from metricskit.quantile import Quantile, parse_quantiles


@pytest.mark.parametrize(
    ("raw", "value", "label"),
    [
        (0.0, 0.0, "min"),
        (1.0, 1.0, "max"),
        (0.99, 0.99, "p99"),
        (0.999, 0.999, "p999"),
        (0.9999, 0.9999, "p9999"),
        (-1.0, 0.0, "min"),
        (1.2, 1.0, "max"),
    ],
)
def test_quantiles(raw, value, label):
    quantile = Quantile(raw)
    assert quantile.value == value
    assert quantile.label == label


def test_median_label():
    assert Quantile(0.5).label == "p50"


def test_nan_clamps_to_min():
    quantile = Quantile(float("nan"))
    assert quantile.value == 0.0
    assert quantile.label == "min"


def test_equality_and_hash():
    assert Quantile(0.99) == Quantile(0.99)
    assert Quantile(-3.0) == Quantile(0.0)
    assert Quantile(0.5) != Quantile(0.99)
    assert len({Quantile(0.9), Quantile(0.9), Quantile(1.5)}) == 2


def test_parse_quantiles_empty():
    assert parse_quantiles([]) == []


def test_parse_quantiles():
    result = parse_quantiles([0.0, 0.5, 0.99, 0.999, 1.0])
    assert len(result) == 5
    assert result[0] == Quantile(0.0)
    assert result[1] == Quantile(0.5)
    assert result[2] == Quantile(0.99)
    assert result[3] == Quantile(0.999)
    assert result[4] == Quantile(1.0)
    assert [q.label for q in result] == ["min", "p50", "p99", "p999", "max"]