import math

import pytest

from hornetkit.numeric import (
    binomial_coeff,
    ceil_div,
    ceil_log,
    ceil_log2,
    exclusive_prefix_sum,
    geometric_serie,
    inclusive_prefix_sum,
    is_aligned,
    is_integer,
    is_vectorizable,
    log2_floor,
    log_floor,
    lower_approx,
    power,
    product_sequence,
    round_div,
    roundup_pow2,
    upper_approx,
)


@pytest.mark.parametrize("n", range(0, 50))
@pytest.mark.parametrize("div", [1, 2, 3, 7, 16])
def test_ceil_div_bounds(n, div):
    q = ceil_div(n, div)
    assert q * div >= n
    assert (q - 1) * div < n or n == 0


def test_ceil_div_zero_numerator():
    assert ceil_div(0, 5) == 0


def test_ceil_div_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        ceil_div(4, 0)


@pytest.mark.parametrize("n", range(0, 40))
@pytest.mark.parametrize("div", [1, 2, 5, 8])
def test_round_div_is_nearest(n, div):
    q = round_div(n, div)
    assert abs(q * div - n) <= div / 2


@pytest.mark.parametrize("n", range(0, 40))
@pytest.mark.parametrize("mul", [1, 3, 4, 10])
def test_approx_bracket(n, mul):
    low = lower_approx(n, mul)
    high = upper_approx(n, mul)
    assert low % mul == 0 and high % mul == 0
    assert low <= n <= high
    assert high - low in (0, mul)


def test_power_zero_exponent_is_one():
    assert power(9, 0) == 1


@pytest.mark.parametrize("n,exp", [(2, 10), (3, 4), (7, 1)])
def test_power_matches_repeated_product(n, exp):
    assert power(n, exp) == math.prod([n] * exp)


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


@pytest.mark.parametrize("n", range(1, 200))
@pytest.mark.parametrize("base", [2, 3, 10])
def test_log_floor_bracket(n, base):
    k = log_floor(n, base)
    assert base**k <= n < base ** (k + 1)


def test_log_of_one_is_zero():
    assert log_floor(1, 7) == 0


@pytest.mark.parametrize("bad", [0, -3])
def test_log_floor_rejects_non_positive(bad):
    with pytest.raises(ValueError):
        log_floor(bad, 2)


@pytest.mark.parametrize("n", range(1, 300))
def test_log2_floor_matches_bit_length(n):
    assert log2_floor(n) == n.bit_length() - 1


@pytest.mark.parametrize("n", range(1, 300))
def test_roundup_pow2(n):
    p = roundup_pow2(n)
    assert p & (p - 1) == 0
    assert p >= n
    assert p // 2 < n


@pytest.mark.parametrize("n", range(1, 300))
def test_ceil_log2_bracket(n):
    k = ceil_log2(n)
    assert 2**k >= n
    assert k == 0 or 2 ** (k - 1) < n


@pytest.mark.parametrize("n", range(1, 200))
@pytest.mark.parametrize("base", [2, 3, 5])
def test_ceil_log_bracket(n, base):
    k = ceil_log(n, base)
    assert base**k >= n
    assert k == 0 or base ** (k - 1) < n


@pytest.mark.parametrize("low,high", [(1, 1), (1, 6), (3, 8), (5, 5)])
def test_product_sequence_matches_factorials(low, high):
    assert product_sequence(low, high) == math.factorial(high) // math.factorial(low - 1)


def test_product_sequence_empty_range():
    with pytest.raises(ValueError):
        product_sequence(5, 4)


@pytest.mark.parametrize("n", range(0, 15))
def test_binomial_coeff_matches_comb(n):
    for k in range(n + 1):
        assert binomial_coeff(n, k) == math.comb(n, k)


def test_binomial_coeff_diagonal_is_one():
    assert binomial_coeff(12, 12) == 1


def test_binomial_coeff_invalid():
    with pytest.raises(ValueError):
        binomial_coeff(3, 4)


@pytest.mark.parametrize("n,high", [(2, 0), (2, 5), (3, 4), (10, 3)])
def test_geometric_serie_sum(n, high):
    assert geometric_serie(n, high) == sum(n**i for i in range(high + 1))


def test_geometric_serie_ratio_one():
    with pytest.raises(ValueError):
        geometric_serie(1, 3)


def test_prefix_sums_relation():
    values = [4, 1, 7, 0, 3]
    inc = inclusive_prefix_sum(values)
    exc = exclusive_prefix_sum(values)
    assert len(inc) == len(values)
    assert len(exc) == len(values) + 1
    assert exc[0] == 0
    assert exc[1:] == inc
    assert inc[-1] == sum(values)
    assert [b - a for a, b in zip(exc, exc[1:])] == values


def test_prefix_sums_of_generator():
    assert exclusive_prefix_sum(x for x in [2, 2]) == [0, 2, 4]


def test_is_vectorizable_cases():
    assert is_vectorizable(4, 4, 4, 4) is True
    assert is_vectorizable(8, 8) is True
    assert is_vectorizable(4, 8) is False
    assert is_vectorizable(8, 8, 8) is False
    assert is_vectorizable(1, 1, 1, 1, 1) is False


def test_is_vectorizable_needs_sizes():
    with pytest.raises(ValueError):
        is_vectorizable()


@pytest.mark.parametrize(
    "text,expected",
    [("0123456789", True), ("42", True), ("", True), ("-1", False), ("1.5", False), ("12a", False)],
)
def test_is_integer(text, expected):
    assert is_integer(text) is expected


@pytest.mark.parametrize("size", [1, 2, 4, 8, 16])
def test_is_aligned(size):
    assert is_aligned(size * 37, size) is True
    if size > 1:
        assert is_aligned(size * 37 + 1, size) is False


def test_is_aligned_zero_size():
    with pytest.raises(ZeroDivisionError):
        is_aligned(8, 0)