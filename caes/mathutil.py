"""Numeric helpers: sample conversion, convolution, integer tricks, noise and Chebyshev terms."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Iterable, Sequence

INT32_FULL_SCALE = 0x7FFFFFFF
INT16_FULL_SCALE = 0x7FFF

_REPORT_EVERY_EXT = 1_000_000
_REPORT_MASK_INT = 0x000000000004FFFF

_RAND_BITS = 31
_RAND_RECT_FACTOR = 1.613098018221020000e-09
_RAND_RECT_OFF = 0x0000000040000000
_RAND_GAUSS_FACTOR = 4.656612875245800000e-10
_RAND_GAUSS_OFF = 0x0000000300000000
_RAND_GAUSS_TERMS = 12

Report = Callable[[float], None]

_default_rng = random.Random()


def _wrap(value: int, bits: int) -> int:
    """Wrap an integer into a signed two's-complement range of ``bits`` bits."""
    span = 1 << bits
    value &= span - 1
    if value >= span >> 1:
        value -= span
    return value


def _interleave(left: Iterable[float], right: Iterable[float], bits: int) -> list[int]:
    left = list(left)
    right = list(right)
    if len(left) != len(right):
        raise ValueError("left and right channels must have the same length")
    out: list[int] = []
    for lval, rval in zip(left, right):
        out.append(_wrap(int(lval), bits))
        out.append(_wrap(int(rval), bits))
    return out


def _deinterleave(samples: Sequence[int], full_scale: int) -> tuple[list[float], list[float]]:
    samples = list(samples)
    if len(samples) % 2:
        raise ValueError("interleaved stereo data must have an even number of samples")
    scale = 1.0 / float(full_scale)
    return [scale * s for s in samples[0::2]], [scale * s for s in samples[1::2]]


def interleave_int32(left, right):
    """Truncate two channels to 32-bit integers and interleave them L, R, L, R..."""
    return _interleave(left, right, 32)


def interleave_int16(left, right):
    """Truncate two channels to 16-bit integers and interleave them L, R, L, R..."""
    return _interleave(left, right, 16)


def deinterleave_int32(samples):
    """Split interleaved 32-bit samples into two channels scaled to full scale 1.0."""
    return _deinterleave(samples, INT32_FULL_SCALE)


def deinterleave_int16(samples):
    """Split interleaved 16-bit samples into two channels scaled to full scale 1.0."""
    return _deinterleave(samples, INT16_FULL_SCALE)


def round_to_int(x):
    """Round to the nearest integer, halves going to the even neighbour."""
    return round(float(x))


def _order(a: Iterable[float], b: Iterable[float]) -> tuple[list[float], list[float]]:
    a = list(a)
    b = list(b)
    if not a or not b:
        raise ValueError("convolution needs two non-empty sequences")
    return (a, b) if len(a) <= len(b) else (b, a)


def convolve_ext(a, b, report=None):
    """Exterior (full) convolution of two sequences, of length len(a) + len(b) - 1.

    ``report`` is called now and then with the fraction of the work done.
    """
    short, long_ = _order(a, b)
    n_short, n_long = len(short), len(long_)
    out: list[float] = []
    for n in range(n_short + n_long - 1):
        if report is not None and n_short <= n <= n_long and n % _REPORT_EVERY_EXT == 0:
            report(n / n_long)
        lo = max(0, n - n_long + 1)
        hi = min(n, n_short - 1)
        out.append(sum(short[d] * long_[n - d] for d in range(lo, hi + 1)))
    return out


def convolve_int(a, b, report=None):
    """Interior convolution: only the fully overlapping part, len(long) - len(short) + 1 values.

    ``report`` is called with the fraction of work done and finally with 1.0.
    """
    short, long_ = _order(a, b)
    n_short, n_long = len(short), len(long_)
    count = n_long - n_short + 1
    out: list[float] = []
    for w in range(count):
        if report is not None and (w & _REPORT_MASK_INT) == 0:
            report(w / count)
        top = w + n_short - 1
        out.append(sum(s * long_[top - d] for d, s in enumerate(short)))
    if report is not None:
        report(1.0)
    return out


def gcf(a, b):
    """Greatest common factor by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def reverse_bits(x, n):
    """Reverse the lowest ``n`` bits of ``x``."""
    r = 0
    for _ in range(n):
        r = (r << 1) | (x & 1)
        x >>= 1
    return r


def log2_ceil(n):
    """Smallest ``l`` with 2**l >= n (0 for n <= 1)."""
    l = 0
    i = 1
    while i < n:
        i <<= 1
        l += 1
    return l


def next_pow_two(i):
    """The smallest power of two not below ``i`` (1 for i <= 1)."""
    if i <= 1:
        return 1
    candidate = 1 << i.bit_length()
    return i if candidate == 2 * i else candidate


def is_pow_two(x):
    """True for powers of two from 2 upwards; 0 and 1 are not counted."""
    if x < 2:
        return False
    return not (x & (x - 1))


def pow10(x):
    """Ten raised to ``x``."""
    return 10.0 ** x


def floor_ld(x):
    """Floor of ``x`` as a float; infinities and NaN are passed through."""
    x = float(x)
    if math.isnan(x) or math.isinf(x):
        return x
    return float(math.floor(x))


def _rng(rng):
    return _default_rng if rng is None else rng


def rand_rect(rng=None):
    """A uniform random number of zero mean and unit variance."""
    draw = _rng(rng).getrandbits(_RAND_BITS)
    return (draw - _RAND_RECT_OFF) * _RAND_RECT_FACTOR


def rand_gauss(rng=None):
    """An approximately normal random number: a sum of twelve uniforms, centred and scaled."""
    r = _rng(rng)
    total = sum(r.getrandbits(_RAND_BITS) for _ in range(_RAND_GAUSS_TERMS))
    return (total - _RAND_GAUSS_OFF) * _RAND_GAUSS_FACTOR


def rand_gauss_vec(n, rng=None):
    """``n`` approximately normal random numbers, drawn one pass of the vector at a time."""
    r = _rng(rng)
    totals = [r.getrandbits(_RAND_BITS) for _ in range(n)]
    for _ in range(_RAND_GAUSS_TERMS - 1):
        totals = [t + r.getrandbits(_RAND_BITS) for t in totals]
    return [(t - _RAND_GAUSS_OFF) * _RAND_GAUSS_FACTOR for t in totals]


def tk(k, x):
    """Chebyshev polynomial of the first kind, T_k(x); NaN below -1."""
    if abs(x) <= 1.0:
        return math.cos(k * math.acos(x))
    if x < -1.0:
        return math.nan
    try:
        return math.cosh(k * math.acosh(x))
    except OverflowError:
        return math.inf