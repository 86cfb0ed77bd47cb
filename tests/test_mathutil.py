import math
import random

import pytest

from caes import mathutil as mu


def test_interleave_int32_orders_left_then_right():
    assert mu.interleave_int32([1.0, -2.0], [3.0, 4.0]) == [1, 3, -2, 4]


def test_interleave_truncates_toward_zero():
    values = [2.9, -2.9, 0.5, -0.5, 7.99]
    out = mu.interleave_int32(values, values)
    for v, got in zip(values, out[0::2]):
        assert abs(got) <= abs(v) < abs(got) + 1


def test_interleave_int16_stays_in_range():
    out = mu.interleave_int16([40000.0, -40000.0], [12.0, 70000.0])
    assert all(-32768 <= v <= 32767 for v in out)
    assert out[1] == 12


def test_interleave_length_mismatch():
    with pytest.raises(ValueError):
        mu.interleave_int32([1.0], [1.0, 2.0])


def test_deinterleave_full_scale():
    left, right = mu.deinterleave_int32([0x7FFFFFFF, -0x7FFFFFFF])
    assert left == [pytest.approx(1.0)]
    assert right == [pytest.approx(-1.0)]


def test_deinterleave_int16_round_trip():
    left = [0.25, -0.5, 1.0]
    right = [0.0, 0.75, -1.0]
    samples = mu.interleave_int16([v * 0x7FFF for v in left], [v * 0x7FFF for v in right])
    got_l, got_r = mu.deinterleave_int16(samples)
    assert got_l == pytest.approx(left, abs=1e-4)
    assert got_r == pytest.approx(right, abs=1e-4)


def test_deinterleave_odd_length():
    with pytest.raises(ValueError):
        mu.deinterleave_int16([1, 2, 3])


def test_round_to_int_half_even():
    assert mu.round_to_int(2.5) == 2
    assert mu.round_to_int(-1.6) == -2


def test_convolve_ext_identity_and_length():
    b = [3.0, -1.0, 4.0, 1.5]
    assert mu.convolve_ext([1.0], b) == b
    a = [1.0, 2.0, 0.5]
    assert len(mu.convolve_ext(a, b)) == len(a) + len(b) - 1


def test_convolve_ext_commutes_and_sums():
    a = [1.0, 2.0, -0.5]
    b = [0.5, 1.0, 3.0, -2.0, 1.0]
    ab = mu.convolve_ext(a, b)
    assert ab == pytest.approx(mu.convolve_ext(b, a))
    assert sum(ab) == pytest.approx(sum(a) * sum(b))


def test_convolve_ext_binomial():
    assert mu.convolve_ext([1.0, 1.0], [1.0, 1.0]) == [1.0, 2.0, 1.0]


def test_convolve_int_is_middle_of_ext():
    a = [1.0, -2.0, 0.5]
    b = [2.0, 1.0, 3.0, -1.0, 0.25, 4.0]
    inner = mu.convolve_int(a, b)
    full = mu.convolve_ext(a, b)
    assert len(inner) == len(b) - len(a) + 1
    assert inner == pytest.approx(full[len(a) - 1:len(b)])


def test_convolve_int_reports_progress():
    seen = []
    mu.convolve_int([1.0, 1.0], [1.0, 2.0, 3.0], seen.append)
    assert seen[0] == 0.0
    assert seen[-1] == 1.0


def test_convolve_empty_raises():
    with pytest.raises(ValueError):
        mu.convolve_ext([], [1.0])
    with pytest.raises(ValueError):
        mu.convolve_int([1.0], [])


@pytest.mark.parametrize("a,b", [(12, 18), (100, 75), (17, 5), (0, 9)])
def test_gcf_divides_both(a, b):
    g = mu.gcf(a, b)
    assert a % g == 0 and b % g == 0
    assert mu.gcf(a * 7, b * 7) == 7 * g


def test_gcf_with_zero():
    assert mu.gcf(42, 0) == 42


@pytest.mark.parametrize("n", [1, 3, 8, 11])
def test_reverse_bits_is_involution(n):
    for x in range(1 << n):
        assert mu.reverse_bits(mu.reverse_bits(x, n), n) == x
    assert mu.reverse_bits(1, n) == 1 << (n - 1)


@pytest.mark.parametrize("n", [2, 3, 5, 8, 1000, 1024, 1025])
def test_log2_ceil_bounds(n):
    l = mu.log2_ceil(n)
    assert (1 << l) >= n
    assert (1 << (l - 1)) < n


def test_log2_ceil_of_one():
    assert mu.log2_ceil(1) == 0


@pytest.mark.parametrize("n", [2, 3, 7, 64, 100, 4097])
def test_next_pow_two(n):
    p = mu.next_pow_two(n)
    assert mu.is_pow_two(p)
    assert n <= p < 2 * n


def test_next_pow_two_small_and_exact():
    assert mu.next_pow_two(0) == 1
    assert mu.next_pow_two(64) == 64


def test_is_pow_two():
    assert not mu.is_pow_two(1)
    assert not mu.is_pow_two(0)
    assert mu.is_pow_two(1024)
    assert not mu.is_pow_two(1023)


@pytest.mark.parametrize("x", [-3.5, 0.0, 0.25, 2.0, 7.3])
def test_pow10_inverts_log10(x):
    assert math.log10(mu.pow10(x)) == pytest.approx(x)


@pytest.mark.parametrize("x", [-2.5, -1.0, -0.3, 0.3, 1.0, 5.999, 1e20, -1e20])
def test_floor_ld_matches_floor(x):
    assert mu.floor_ld(x) == math.floor(x)


def test_floor_ld_passes_non_finite():
    assert mu.floor_ld(math.inf) == math.inf
    assert math.isnan(mu.floor_ld(math.nan))
    assert mu.floor_ld(-0.0) == 0.0


def test_rand_rect_statistics():
    rng = random.Random(1)
    values = [mu.rand_rect(rng) for _ in range(20000)]
    bound = 0x40000000 * 1.613098018221020000e-09
    assert all(-bound <= v <= bound for v in values)
    mean = sum(values) / len(values)
    var = sum((v - mean) ** 2 for v in values) / len(values)
    assert abs(mean) < 0.05
    assert var == pytest.approx(1.0, abs=0.05)


def test_rand_gauss_statistics():
    rng = random.Random(2)
    values = [mu.rand_gauss(rng) for _ in range(20000)]
    mean = sum(values) / len(values)
    var = sum((v - mean) ** 2 for v in values) / len(values)
    assert abs(mean) < 0.05
    assert var == pytest.approx(1.0, abs=0.05)


def test_rand_gauss_vec_is_repeatable():
    first = mu.rand_gauss_vec(500, random.Random(3))
    second = mu.rand_gauss_vec(500, random.Random(3))
    assert first == second
    assert len(first) == 500
    assert abs(sum(first) / 500) < 0.2


@pytest.mark.parametrize("x", [-1.0, -0.4, 0.0, 0.7, 1.0, 1.5, 3.0])
def test_tk_second_order(x):
    assert mu.tk(2, x) == pytest.approx(2 * x * x - 1)


@pytest.mark.parametrize("k", [0, 1, 4, 9])
def test_tk_recurrence(k):
    for x in (-0.9, 0.2, 0.95, 1.3, 2.0):
        assert mu.tk(k + 2, x) == pytest.approx(2 * x * mu.tk(k + 1, x) - mu.tk(k, x), rel=1e-9, abs=1e-9)


def test_tk_below_minus_one_is_nan():
    assert math.isnan(mu.tk(3, -2.0))
    assert mu.tk(5, 1.0) == pytest.approx(1.0)