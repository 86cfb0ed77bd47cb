"""Apodisation windows: build a normalised window of a chosen shape and apply it."""

from __future__ import annotations

import math
from enum import Enum

from caes.apodia_shapes import Shape, list_catalog, shape_info, shape_value
from caes.mathutil import tk


class Norm(Enum):
    """How a built window is normalised."""

    PEAK = "peak"
    RMS = "rms"
    DC = "dc"


class Apodia:
    """A window generator.

    Each shape remembers its own alpha. The window is built on demand with
    :meth:`build_window` and applied with :meth:`apply`.
    """

    MAX_WIN_SIZE = 256 * 1024

    def __init__(self):
        self._alphas = {s: shape_info(s).default_alpha for s in Shape}
        self._n = 1
        self._is_odd = True
        self._norm = Norm.DC
        self._anti = False
        self._window: list[float] = [1.0]
        self._dirty = True
        self._shape = Shape.DIRICHLET
        self._alpha = 0.0
        self.set_shape(Shape.DIRICHLET)

    # ----- state -----------------------------------------------------------

    @property
    def shape(self):
        """The current shape."""
        return self._shape

    @property
    def shape_name(self):
        """Catalogue name of the current shape."""
        return shape_info(self._shape).name

    @property
    def alpha(self):
        """The current shape's alpha."""
        return self._alpha

    @property
    def alpha_range(self):
        """Largest alpha the current shape accepts."""
        return shape_info(self._shape).alpha_range

    @property
    def n(self):
        """Window length."""
        return self._n

    @property
    def n_max(self):
        """Largest window length."""
        return self.MAX_WIN_SIZE

    @property
    def norm(self):
        """Normalisation applied when the window is built."""
        return self._norm

    @norm.setter
    def norm(self, value):
        self._norm = Norm(value)
        self._dirty = True

    @property
    def anti(self):
        """Whether the window is turned into its complement (centre spike minus window)."""
        return self._anti

    @anti.setter
    def anti(self, value):
        self._anti = bool(value)
        self._dirty = True

    @property
    def window(self):
        """A copy of the last built window."""
        return list(self._window)

    @property
    def catalog(self):
        """Names of all shapes, in catalogue order."""
        return list_catalog()

    @property
    def catalog_size(self):
        """Number of shapes in the catalogue."""
        return len(Shape)

    # ----- setters ---------------------------------------------------------

    def set_shape(self, shape):
        """Select a shape; its remembered alpha comes back into force."""
        self._shape = Shape(shape)
        self.set_alpha(self._alphas[self._shape])

    def set_alpha(self, alpha):
        """Set the current shape's alpha, clamped to [0, alpha_range]."""
        alpha = float(alpha)
        top = self.alpha_range
        if alpha > top:
            alpha = top
        elif alpha < 0.0:
            alpha = 0.0
        self._alpha = alpha
        self._alphas[self._shape] = alpha
        self._dirty = True

    def set_n(self, n):
        """Set the window length, clamped to [0, MAX_WIN_SIZE]."""
        n = int(n)
        if n == self._n:
            return
        n = min(max(n, 0), self.MAX_WIN_SIZE)
        self._n = n
        self._dirty = True
        if n == 0:
            return
        self._is_odd = n % 2 == 1

    # ----- building --------------------------------------------------------

    def build_window(self):
        """Build the window for the current shape, length, alpha and normalisation."""
        n = self._n
        if n < 2:
            self._dirty = False
            return
        if self._shape is Shape.DOLPH:
            window = self._dolph()
        else:
            window = self._shaped()

        if self._norm is Norm.DC:
            factor = sum(window) / n
        elif self._norm is Norm.RMS:
            factor = math.sqrt(sum(v * v for v in window) / n)
        else:
            factor = max(abs(v) for v in window)
        if factor == 0.0 or math.isnan(factor):
            raise ValueError("window cannot be normalised")
        window = [v / factor for v in window]

        if self._anti:
            window = self._antify(window)
        self._window = window
        self._dirty = False

    def _shaped(self):
        n = self._n
        window = [0.0] * n
        factor = 2.0 / n
        if self._is_odd:
            flipper = (n - 1) // 2
            offset = 0.0
            middle = (n - 1) // 2
            window[middle] = shape_value(self._shape, 0.0, self._alpha)
            start = middle - 1
        else:
            flipper = n // 2 - 1
            offset = 1.0 / n
            start = n // 2 - 1
        for i in range(start, -1, -1):
            x = offset + (flipper - i) * factor
            y = shape_value(self._shape, x, self._alpha)
            window[i] = y
            window[n - i - 1] = y
        return window

    def _dolph(self):
        n = self._n
        r = self._alpha
        if r <= 0.0:
            raise ValueError("Dolph window needs a positive alpha")
        window = [0.0] * n
        zo = math.cosh(math.acosh(1.0 / r) / (n - 1))
        middle = n >> 1
        limit = middle if self._is_odd else middle - 1
        k_ac = 2.0 * math.pi / n
        k_tk = math.pi / n
        for pos in range(limit + 1):
            value = 1.0 / r
            for i in range(1, middle):
                arg_tk = zo * math.cos(i * k_tk)
                value += 2.0 * tk(n - 1, arg_tk) * math.cos(i * pos * k_ac)
            value *= 2.0 / n
            if self._is_odd:
                window[middle - pos] = value
                window[middle + pos] = value
            else:
                window[middle - pos - 1] = value
                window[middle + pos] = value
        return window

    def _antify(self, window):
        middle = self._n >> 1
        window = list(window)
        window[middle] = 0.0
        if not self._is_odd:
            window[middle - 1] = 0.0
        total = sum(window)
        window = [-v for v in window]
        if self._is_odd:
            window[middle] = total
        else:
            window[middle] = total * 0.5
            window[middle - 1] = total * 0.5
        return window

    # ----- use -------------------------------------------------------------

    def apply(self, samples):
        """Return the first ``n`` samples multiplied by the window.

        The rectangular shape and windows of two points or fewer pass the
        samples through unchanged.
        """
        samples = list(samples)
        n = self._n
        if len(samples) < n:
            raise ValueError(f"need at least {n} samples")
        if self._shape is Shape.DIRICHLET or n <= 2:
            return samples[:n]
        if self._dirty:
            raise ValueError("window is out of date; call build_window first")
        return [s * w for s, w in zip(samples, self._window)]