"""Equiripple linear-phase FIR design by the Remez exchange algorithm."""

from __future__ import annotations

import logging
import math
import sys
from enum import Enum

from caes.mathutil import floor_ld

_log = logging.getLogger(__name__)

_EPS = sys.float_info.epsilon
_TWO_PI = 2.0 * math.pi


class FilterType(Enum):
    """Kind of filter to design."""

    BAND = "band"
    DIFF = "differentiator"
    HILBERT = "hilbert"


def _fdiv(a, b):
    """Division that follows IEEE rules instead of raising on a zero divisor."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class Remez:
    """Designs the taps of an equiripple FIR filter.

    Bands are given by pairs of edges in ``edges`` (normalised to a sample
    rate of 1.0, so 0.0 to 0.5), a desired response per band in ``gains``
    and a weighting per band in ``weights``. :meth:`calculate` produces
    ``n`` taps.
    """

    MAX_N = 2999
    MAX_BANDS = 4
    GRID_DENSITY = 128
    MAX_ITER = 1587

    def __init__(self):
        self.n = 0
        self.num_bands = 0
        self.filter_type = FilterType.BAND
        self.edges = [0.0] * (2 * self.MAX_BANDS)
        self.gains = [0.0] * self.MAX_BANDS
        self.weights = [0.0] * self.MAX_BANDS
        self.taps: list[float] = []
        self.converge_test = 1.0e-12
        self.max_iterations = self.MAX_ITER
        self.iterations = 0
        self.converged = False

        self._positive = True
        self._num_cos = 1
        self._num_gdd = 0
        self._grid_f: list[float] = []
        self._grid_g: list[float] = []
        self._grid_w: list[float] = []
        self._err: list[float] = []
        self._err_dex: list[int] = []
        self._loc: list[int] = []
        self._x: list[float] = []
        self._y: list[float] = []
        self._ad: list[float] = []

    # ----- specification ---------------------------------------------------

    def set_edge(self, index, freq):
        """Set band edge ``index``; the index and frequency are clamped to their ranges."""
        index = min(max(int(index), 0), 2 * self.MAX_BANDS - 1)
        freq = min(max(float(freq), 0.0), 0.5)
        self.edges[index] = freq

    # ----- design ----------------------------------------------------------

    def calculate(self):
        """Run the exchange and return the designed taps."""
        self._setup()
        self._create_dense_grid()
        self._initial_guess()

        self.converged = False
        self.iterations = 0
        for iteration in range(self.max_iterations):
            self.iterations = iteration + 1
            self._calc_parms()
            self._calc_error()
            self._search()
            if self._is_done():
                self.converged = True
                break
        if not self.converged:
            _log.warning("reached maximum iteration count; results may be bad")
        self._calc_parms()

        n = self.n
        ary_cos = [0.0] * (n // 2 + 1)
        for i in range(n // 2 + 1):
            f = i / n
            if self._positive:
                corr = 1.0 if n % 2 else math.cos(math.pi * f)
            else:
                corr = math.sin(_TWO_PI * f) if n % 2 else math.sin(math.pi * f)
            ary_cos[i] = self._compute_a(f) * corr
        self.taps = self._f_to_t(ary_cos)
        return list(self.taps)

    def _setup(self):
        n = int(self.n)
        if not 1 <= n <= self.MAX_N:
            raise ValueError(f"tap count {n} outside [1, {self.MAX_N}]")
        if not 1 <= self.num_bands <= self.MAX_BANDS:
            raise ValueError(f"band count {self.num_bands} outside [1, {self.MAX_BANDS}]")
        self.n = n
        self._positive = self.filter_type is FilterType.BAND

        num_cos = n // 2
        if n % 2 and self._positive:
            num_cos += 1
        if num_cos < 1:
            raise ValueError("too few taps for this filter type")

        num_gdd = 0
        for band in range(self.num_bands):
            width = self.edges[2 * band + 1] - self.edges[2 * band]
            num_gdd += int(2 * num_cos * self.GRID_DENSITY * width + 0.5)
        if not self._positive:
            num_gdd -= 1
        if num_gdd < 2 or num_gdd <= num_cos:
            raise ValueError("band specification leaves too few grid points")

        self._num_cos = num_cos
        self._num_gdd = num_gdd
        size = max(num_gdd, (num_cos + 1) * self.GRID_DENSITY) + 3
        self._err = [0.0] * num_gdd
        self._err_dex = [0] * size
        self._loc = [0] * (num_cos + 1)
        self._x = [0.0] * (num_cos + 1)
        self._y = [0.0] * (num_cos + 1)
        self._ad = [0.0] * (num_cos + 1)

    def _create_dense_grid(self):
        """Lay the frequencies, desired response and weights onto the dense grid."""
        num_cos = self._num_cos
        num_gdd = self._num_gdd
        n = self.n
        delf = 0.5 / (self.GRID_DENSITY * num_cos)
        if not self._positive and delf > self.edges[0]:
            self.edges[0] = delf

        grid_f: list[float] = []
        grid_g: list[float] = []
        grid_w: list[float] = []
        for band in range(self.num_bands):
            lowf = self.edges[2 * band]
            highf = self.edges[2 * band + 1]
            k = int((highf - lowf) / delf + 0.5)
            for _ in range(k):
                grid_g.append(self.gains[band])
                grid_w.append(self.weights[band])
                grid_f.append(lowf)
                lowf += delf
            if grid_f:
                grid_f[-1] = highf

        pad = [0.0] * max(0, num_gdd - len(grid_f))
        grid_f = (grid_f + pad)[:num_gdd]
        grid_g = (grid_g + pad)[:num_gdd]
        grid_w = (grid_w + pad)[:num_gdd]

        if not self._positive and grid_f[-1] > 0.5 - delf and n % 2:
            grid_f[-1] = 0.5 - delf

        if self.filter_type is FilterType.DIFF:
            grid_w = [
                _fdiv(w, f) if g > _EPS else w
                for f, g, w in zip(grid_f, grid_g, grid_w)
            ]

        if self._positive:
            correction = None if n % 2 else (lambda f: math.cos(math.pi * f))
        elif n % 2:
            correction = lambda f: math.sin(_TWO_PI * f)  # noqa: E731
        else:
            correction = lambda f: math.sin(math.pi * f)  # noqa: E731
        if correction is not None:
            factors = [correction(f) for f in grid_f]
            grid_g = [_fdiv(g, c) for g, c in zip(grid_g, factors)]
            grid_w = [w * c for w, c in zip(grid_w, factors)]

        self._grid_f = grid_f
        self._grid_g = grid_g
        self._grid_w = grid_w

    def _initial_guess(self):
        """Spread the extremal frequencies evenly over the dense grid."""
        gs = self._num_gdd - 1.0
        nc = float(self._num_cos)
        self._loc = [0] + [int(i * gs / nc - _EPS) for i in range(1, self._num_cos + 1)]

    def _calc_parms(self):
        num_cos = self._num_cos
        loc = self._loc
        grid_g = self._grid_g
        grid_w = self._grid_w
        x = [math.cos(_TWO_PI * self._grid_f[d]) for d in loc]

        ld = (num_cos - 1) // 15 + 1
        ld = (ld * 3245983 + 1219874) % num_cos - 1

        ad = []
        for i, xi in enumerate(x):
            denom = 1.0
            for j in range(ld):
                for k in range(j, num_cos + 1, ld):
                    if k != i:
                        denom *= 2.0 * (xi - x[k])
            if abs(denom) < _EPS:
                denom = _EPS
            ad.append(1.0 / denom)

        numer = 0.0
        denom = 0.0
        sign = 1.0
        for a, d in zip(ad, loc):
            numer += a * grid_g[d]
            denom += _fdiv(sign * a, grid_w[d])
            sign = -sign
        delta = _fdiv(numer, denom)

        y = []
        sign = 1.0
        for d in loc:
            y.append(grid_g[d] - _fdiv(sign * delta, grid_w[d]))
            sign = -sign

        self._x = x
        self._ad = ad
        self._y = y

    def _compute_a(self, freq):
        """Response at ``freq`` by barycentric interpolation through the extremals."""
        numer = 0.0
        denom = 0.0
        xc = math.cos(_TWO_PI * freq)
        for xi, a, yi in zip(self._x, self._ad, self._y):
            c = xc - xi
            if abs(c) < _EPS:
                numer = yi
                denom = 1.0
                break
            c = a / c
            denom += c
            numer += c * yi
        return _fdiv(numer, denom)

    def _calc_error(self):
        self._err = [
            w * (g - self._compute_a(f))
            for f, g, w in zip(self._grid_f, self._grid_g, self._grid_w)
        ]

    def _search(self):
        """Find the extrema of the error curve and keep ``num_cos + 1`` of them."""
        err = self._err
        dex = self._err_dex
        count = 0

        if (err[0] > 0.0 and err[0] > err[1]) or (err[0] < 0.0 and err[0] < err[1]):
            dex[count] = 0
            count += 1

        for i, (prev, cur, nxt) in enumerate(zip(err, err[1:], err[2:]), start=1):
            if (cur >= prev and cur > nxt and cur > 0.0) or (
                cur <= prev and cur < nxt and cur < 0.0
            ):
                dex[count] = i
                count += 1

        last = len(err) - 1
        if (err[last] > 0.0 and err[last] > err[last - 1]) or (
            err[last] < 0.0 and err[last] < err[last - 1]
        ):
            dex[count] = last
            count += 1

        extra = count - (self._num_cos + 1)
        while extra > 0:
            up = err[dex[0]] > 0.0
            smallest = 0
            alternating = True
            for j in range(1, count):
                value = err[dex[j]]
                if abs(value) < abs(err[dex[smallest]]):
                    smallest = j
                if up and value < 0.0:
                    up = False
                elif not up and value > 0.0:
                    up = True
                else:
                    alternating = False
                    break

            if alternating and extra == 1:
                if abs(err[dex[count - 1]]) < abs(err[dex[0]]):
                    smallest = dex[count - 1]
                else:
                    smallest = dex[0]

            if smallest < count:
                dex[smallest:count] = dex[smallest + 1 : count + 1]
            count -= 1
            extra -= 1

        self._loc = dex[: self._num_cos + 1]

    def _is_done(self):
        """True once the extremal errors are equal to within ``converge_test``."""
        values = [abs(self._err[d]) for d in self._loc]
        low = min(values)
        high = max(values)
        test = _fdiv(high - low, high)
        _log.debug("residue %.21g", test)
        return abs(test) < self.converge_test

    def _f_to_t(self, ary_cos):
        """Turn the cosine (or sine) series back into an impulse response."""
        n = self.n
        m = (n - 1) / 2.0
        taps = []
        if self._positive:
            top = int(m) if n % 2 else n // 2 - 1
            for pos in range(n):
                x = _TWO_PI * (pos - m) / n
                val = ary_cos[0] + sum(
                    2.0 * ary_cos[k] * math.cos(x * k) for k in range(1, top + 1)
                )
                taps.append(val / n)
        else:
            top = int(m) if n % 2 else n // 2 - 1
            for pos in range(n):
                x = _TWO_PI * (pos - m) / n
                val = 0.0 if n % 2 else ary_cos[n // 2] * math.sin(math.pi * (pos - m))
                val += sum(2.0 * ary_cos[k] * math.sin(x * k) for k in range(1, top + 1))
                taps.append(val / n)
        return taps

    # ----- normalisation ---------------------------------------------------

    def _need_taps(self):
        if not self.taps:
            raise ValueError("no taps; call calculate first")

    def _scale(self, divisor):
        if divisor == 0.0 or math.isnan(divisor):
            raise ValueError("taps cannot be normalised")
        self.taps = [t / divisor for t in self.taps]
        return list(self.taps)

    def norm_dc(self):
        """Scale the taps so that their mean is 1.0."""
        self._need_taps()
        return self._scale(sum(self.taps) / len(self.taps))

    def norm_rms(self):
        """Scale the taps so that their root-mean-square is 1.0."""
        self._need_taps()
        return self._scale(math.sqrt(sum(t * t for t in self.taps) / len(self.taps)))

    def norm_sf(self, sf):
        """Scale the taps for unit response at normalised frequency ``sf`` (clamped to [0, 0.5])."""
        self._need_taps()
        sf = min(max(float(sf), 0.0), 0.5)
        n = len(self.taps)
        ph_off = floor_ld((n - 1.0) * 0.5 * sf + _EPS) * _TWO_PI
        d_ph = sf * _TWO_PI
        convo = 0.0
        ph = ph_off
        for t in self.taps:
            ph += d_ph
            convo += t * math.cos(ph)
        if convo == 0.0:
            raise ValueError("taps cannot be normalised")
        factor = 1.0 / convo
        self.taps = [t * factor for t in self.taps]
        return list(self.taps)

    def norm_peak(self):
        """Scale the taps so that the largest positive tap is 1.0."""
        self._need_taps()
        peak = 0.0
        for t in self.taps:
            if abs(peak) < t:
                peak = abs(t)
        return self._scale(peak)