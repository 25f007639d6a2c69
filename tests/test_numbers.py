import re
import struct

import pytest

from fakesmith import numbers
from fakesmith.randomness import seed


def _draws(func, count=500):
    seed(7)
    return [func() for _ in range(count)]


def test_number_same_bounds():
    assert numbers.number(5, 5) == 5


def test_number_in_range():
    seed(11)
    for _ in range(500):
        assert 50 <= numbers.number(50, 23456) <= 23456


def test_number_reversed_bounds_raises():
    with pytest.raises(ValueError):
        numbers.number(10, 1)


def test_number_is_reproducible_with_seed():
    seed(11)
    first = [numbers.number(0, 10**6) for _ in range(10)]
    seed(11)
    second = [numbers.number(0, 10**6) for _ in range(10)]
    assert first == second


@pytest.mark.parametrize(
    "func, low, high",
    [
        (numbers.uint8, 0, 255),
        (numbers.uint16, 0, 65535),
        (numbers.uint32, 0, 2**31 - 1),
        (numbers.uint64, 0, 2**63 - 2),
        (numbers.int8, -128, 127),
        (numbers.int16, -32768, 32767),
        (numbers.int32, -(2**31), 2**31 - 1),
        (numbers.int64, -(2**63), -2),
    ],
)
def test_integer_ranges(func, low, high):
    assert all(low <= value <= high for value in _draws(func))


def test_int8_covers_both_signs():
    values = _draws(numbers.int8)
    assert min(values) < 0 < max(values)


def test_float32_is_single_precision_and_positive():
    for value in _draws(numbers.float32, 200):
        assert 0 < value <= 3.4028234663852886e38
        assert struct.unpack("<f", struct.pack("<f", value))[0] == value


def test_float32_range():
    seed(11)
    for _ in range(200):
        assert 0 <= numbers.float32_range(0, 9999999) <= 9999999


def test_float32_range_same_bounds():
    assert numbers.float32_range(5.0, 5.0) == 5.0


def test_float64_positive():
    assert all(value > 0 for value in _draws(numbers.float64, 200))


def test_float64_range():
    seed(11)
    for _ in range(200):
        assert 0 <= numbers.float64_range(0, 9999999) < 9999999


def test_float64_range_same_bounds():
    assert numbers.float64_range(5.0, 5.0) == 5.0


def test_numerify_phone_pattern():
    seed(11)
    pattern = re.compile(r"[1-9]\d\d-\d{3}-\d{4}")
    results = [numbers.numerify("###-###-####") for _ in range(100)]
    assert [r for r in results if not pattern.fullmatch(r)] == []
    assert len(results) == 100


def test_numerify_empty():
    assert numbers.numerify("") == ""


def test_shuffle_ints_keeps_values():
    seed(11)
    ints = [52, 854, 941, 74125, 8413, 777, 89416, 841657]
    original = list(ints)
    numbers.shuffle_ints(ints)
    assert sorted(ints) == sorted(original)


def test_shuffle_ints_changes_order_eventually():
    seed(3)
    original = list(range(8))
    results = []
    for _ in range(20):
        ints = list(original)
        numbers.shuffle_ints(ints)
        results.append(ints)
    assert results.count(original) < len(results)


def test_boolean_gives_both_values():
    assert set(_draws(numbers.boolean, 200)) == {True, False}