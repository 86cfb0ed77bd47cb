"""Radix-2 in-order FFT with bit-reversed input copy, scaled by 1/N in both directions."""

from __future__ import annotations

import math

from caes.mathutil import is_pow_two, log2_ceil, reverse_bits


class FFT:
    """A fixed-length radix-2 transform.

    Both directions divide the result by the length. The forward direction
    uses twiddles exp(+j*2*pi*k*n/N); the inverse uses exp(-j*2*pi*k*n/N).
    """

    MIN_LEN = 4
    MAX_LEN = 256 * 1024

    def __init__(self, length=2048, inverse=False):
        self._length = 2048
        self.inverse = inverse
        self.set_len(length)

    @property
    def length(self):
        """Transform length."""
        return self._length

    @length.setter
    def length(self, value):
        self.set_len(value)

    def set_len(self, m):
        """Set the length, clamped to [MIN_LEN, MAX_LEN]; return the length in force."""
        self._length = min(max(int(m), self.MIN_LEN), self.MAX_LEN)
        return self._length

    def _check(self, re, im):
        n = self._length
        re = list(re)
        im = list(im)
        if len(re) < n or len(im) < n:
            raise ValueError(f"need at least {n} real and {n} imaginary values")
        return re[:n], im[:n]

    def calc(self, re, im):
        """Transform the first ``length`` points; return (real, imaginary) lists."""
        n = self._length
        if not is_pow_two(n):
            raise ValueError(f"length {n} is not a power of two")
        re, im = self._check(re, im)

        radix = log2_ceil(n)
        out = [0j] * n
        for i, (r, m) in enumerate(zip(re, im)):
            out[reverse_bits(i, radix)] = complex(r, m)

        two_pi = -2.0 * math.pi if self.inverse else 2.0 * math.pi
        half = 1
        block = 2
        while block <= n:
            delta = two_pi / block
            sm2 = math.sin(-2.0 * delta)
            sm1 = math.sin(-delta)
            cm2 = math.cos(-2.0 * delta)
            cm1 = math.cos(-delta)
            w = 2.0 * cm1
            for start in range(0, n, block):
                ar2, ar1 = cm2, cm1
                ai2, ai1 = sm2, sm1
                for j in range(start, start + half):
                    ar0 = w * ar1 - ar2
                    ar2, ar1 = ar1, ar0
                    ai0 = w * ai1 - ai2
                    ai2, ai1 = ai1, ai0
                    k = j + half
                    tmp = complex(ar0, ai0) * out[k]
                    out[k] = out[j] - tmp
                    out[j] = out[j] + tmp
            half = block
            block <<= 1

        scale = float(n)
        return [z.real / scale for z in out], [z.imag / scale for z in out]

    def to_power(self, re, im):
        """Fold a transform into a one-sided magnitude spectrum.

        Bin 0 holds |X0|; bins below N/2 hold the root-sum-square of the
        magnitudes at +f and -f; the upper half is zero.
        """
        re, im = self._check(re, im)
        n = self._length
        mid = n // 2
        mags = [math.sqrt(r * r + m * m) for r, m in zip(re, im)]
        power = [mags[0]]
        for i in range(1, n):
            if i < mid:
                power.append(math.sqrt(mags[i] * mags[i] + mags[n - i] * mags[n - i]))
            else:
                power.append(0.0)
        return power

    def norm_freq(self, x):
        """Normalised frequency of bin ``x``: in [0, 0.5] for the lower half, negative above."""
        if x < 0:
            raise ValueError("bin index must not be negative")
        n = self._length
        if x >= n:
            return 0.0
        if x <= n // 2:
            return x / n
        return (x - n) / n