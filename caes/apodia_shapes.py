"""Catalogue of apodisation (window) shapes and their point functions.

A shape's point function is evaluated on the half-window coordinate ``x``,
which runs from 0.0 at the centre of the window to 1.0 at its ends.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import IntEnum

_EPS = sys.float_info.epsilon


class Shape(IntEnum):
    """Window shapes, in catalogue order."""

    DIRICHLET = 0
    BARTLETT = 1
    WELCH = 2
    PARZEN = 3
    BARTLETT_HANN = 4
    TUKEY_HANNING = 5
    HANN = 6
    HAMMING = 7
    NUTTALL = 8
    BLACKMAN = 9
    BLACKMAN_NUTTALL = 10
    BLACKMAN_HARRIS = 11
    FLAT_TOP_ISO = 12
    FLAT_TOP_2PT = 13
    FLAT_TOP_ALT4 = 14
    FLAT_TOP_HP_P301 = 15
    FLAT_TOP_HP4 = 16
    FLAT_TOP_HP_P401 = 17
    FLAT_TOP_RS4 = 18
    FLAT_TOP_SR785 = 19
    DOLPH = 20
    GAUSS = 21
    KAISER = 22
    SLEPIAN = 23
    POISSON = 24
    HANN_POISSON = 25
    CONNES = 26
    BOHMAN = 27
    LANCZOS = 28


@dataclass(frozen=True)
class ShapeInfo:
    """Static description of a window shape."""

    name: str
    alpha_range: float
    alpha_char: str
    default_alpha: float
    cos_terms: tuple[float, ...] = ()


_HANN_TERMS = (0.5, 0.5)

_INFO: dict[Shape, ShapeInfo] = {
    Shape.DIRICHLET: ShapeInfo("Dirichlet", 0.0, "a", 0.0),
    Shape.BARTLETT: ShapeInfo("Bartlett", 0.0, "a", 0.0),
    Shape.WELCH: ShapeInfo("Welch", 0.0, "a", 0.0),
    Shape.PARZEN: ShapeInfo("Parzen", 0.0, "a", 0.0),
    Shape.BARTLETT_HANN: ShapeInfo("Bartlett-Hann", 0.0, "a", 0.0),
    Shape.TUKEY_HANNING: ShapeInfo("Tukey-Hanning", 0.99999, "a", 0.5),
    Shape.HANN: ShapeInfo("Hann", 0.0, "a", 0.0, _HANN_TERMS),
    Shape.HAMMING: ShapeInfo("Hamming", 0.0, "a", 0.0, (25.0 / 46.0, 21.0 / 46.0)),
    Shape.NUTTALL: ShapeInfo(
        "Nuttall", 0.0, "a", 0.0,
        (88942.0 / 250000.0, 121849.0 / 250000.0, 36058.0 / 250000.0, 3151.0 / 250000.0),
    ),
    Shape.BLACKMAN: ShapeInfo(
        "Blackman", 0.0, "a", 0.0, (21.0 / 50.0, 25.0 / 50.0, 4.0 / 50.0)
    ),
    Shape.BLACKMAN_NUTTALL: ShapeInfo(
        "Blackman-Nuttall", 0.0, "a", 0.0, (0.36358190, 0.48917750, 0.13659950, 0.01064110)
    ),
    Shape.BLACKMAN_HARRIS: ShapeInfo(
        "Blackman-Harris", 0.0, "a", 0.0, (0.35875000, 0.48829000, 0.14128000, 0.01168000)
    ),
    Shape.FLAT_TOP_ISO: ShapeInfo(
        "Flat-Top ISO", 0.0, "a", 0.0, (1.0, 1.933, 1.286, 0.388, 0.0322)
    ),
    Shape.FLAT_TOP_2PT: ShapeInfo(
        "Flat-Top 2-pt", 0.0, "a", 0.0, (0.28106390, 0.52089720, 0.19803990)
    ),
    Shape.FLAT_TOP_ALT4: ShapeInfo(
        "Flat-Top alt 4-pt", 0.0, "a", 0.0,
        (0.215578947, 0.416631580, 0.277263158, 0.083578947, 0.006947368),
    ),
    Shape.FLAT_TOP_HP_P301: ShapeInfo(
        "Flat-Top hp P301", 0.0, "a", 0.0,
        (0.999448600, 2.0 * 0.955728, 2.0 * 0.538289, 2.0 * 0.091581),
    ),
    Shape.FLAT_TOP_HP4: ShapeInfo(
        "Flat-Top hp 4-pt", 0.0, "a", 0.0,
        (1.0, 2.0 * 0.934516, 2.0 * 0.597986, 2.0 * 0.017964, 2.0 * 0.015458),
    ),
    Shape.FLAT_TOP_HP_P401: ShapeInfo(
        "Flat-Top hp P401", 0.0, "a", 0.0,
        (1.0, 1.93774046310203, 1.32530734987255, 0.43206975880342,
         0.04359135856900, 0.00015175580171),
    ),
    Shape.FLAT_TOP_RS4: ShapeInfo(
        "Flat-Top R&S 4-pt", 0.0, "a", 0.0, (0.1881999, 0.36923, 0.28702, 0.13077, 0.02488)
    ),
    Shape.FLAT_TOP_SR785: ShapeInfo(
        "Flat-Top SR785", 0.0, "a", 0.0, (1.0, 1.93, 1.29, 0.388, 0.028)
    ),
    Shape.DOLPH: ShapeInfo("Dolph", 1.0, "a", 0.01),
    Shape.GAUSS: ShapeInfo("Gauss", 20.0, "b", 2.0),
    Shape.KAISER: ShapeInfo("Kaiser", 20.0, "a", 5.0),
    Shape.SLEPIAN: ShapeInfo("Slepian", 20.0, "a", 1.0),
    Shape.POISSON: ShapeInfo("Poisson", 20.0, "a", 3.0),
    Shape.HANN_POISSON: ShapeInfo("Hann-Poisson", 20.0, "a", 3.0, _HANN_TERMS),
    Shape.CONNES: ShapeInfo("Connes", 0.0, "a", 0.0),
    Shape.BOHMAN: ShapeInfo("Bohman", 0.0, "a", 0.0),
    Shape.LANCZOS: ShapeInfo("Lanczos", 0.0, "a", 0.0),
}


def shape_info(shape):
    """The static description of ``shape``."""
    return _INFO[Shape(shape)]


def list_catalog():
    """Names of all shapes, in catalogue order."""
    return [_INFO[s].name for s in Shape]


def bessel_i0(x):
    """Modified Bessel function of the first kind, order zero, by its power series."""
    half = abs(float(x)) / 2.0
    total = 1.0
    term = 1.0
    k = 0
    while True:
        k += 1
        term *= (half / k) ** 2
        total += term
        if term <= _EPS * total:
            return total


def cosine_sum(terms, x):
    """Sum of terms[i] * cos(i * pi * x)."""
    return sum(t * math.cos(i * math.pi * x) for i, t in enumerate(terms))


def _parzen(x):
    x = abs(x)
    if x < 0.5:
        return 1.0 - 6.0 * x * x + 6.0 * x * x * x
    if x < 1.0:
        return 2.0 * (1.0 - x) ** 3
    return 0.0


def _tukey(x, alpha):
    if x < alpha:
        return 1.0
    return (math.cos((x - alpha) * math.pi / (1.0 - alpha)) + 1.0) * 0.5


def _kaiser(x, alpha):
    inner = 1.0 - x * x
    if inner < 0.0:
        return math.nan
    return bessel_i0(alpha * math.sqrt(inner)) / bessel_i0(alpha)


def _lanczos(x):
    if x < _EPS:
        return 1.0
    return math.sin(x * math.pi) / x / math.pi


def shape_value(shape, x, alpha=None):
    """Value of the shape's point function at half-window coordinate ``x``.

    ``alpha`` defaults to the shape's default alpha. Shapes with no point
    function (Dolph, Slepian) give 1.0.
    """
    shape = Shape(shape)
    info = _INFO[shape]
    if alpha is None:
        alpha = info.default_alpha
    x = float(x)
    if info.cos_terms and shape is not Shape.HANN_POISSON:
        return cosine_sum(info.cos_terms, x)
    if shape is Shape.DIRICHLET:
        return 1.0
    if shape is Shape.BARTLETT:
        return 1.0 - x
    if shape is Shape.WELCH:
        return 1.0 - x * x
    if shape is Shape.PARZEN:
        return _parzen(x)
    if shape is Shape.BARTLETT_HANN:
        return 31.0 / 50.0 - 12.0 / 50.0 * x + 19.0 / 50.0 * math.cos(math.pi * x)
    if shape is Shape.TUKEY_HANNING:
        return _tukey(x, alpha)
    if shape is Shape.GAUSS:
        return math.exp(-alpha * x * x)
    if shape is Shape.KAISER:
        return _kaiser(x, alpha)
    if shape is Shape.POISSON:
        return math.exp(-alpha * x)
    if shape is Shape.HANN_POISSON:
        return math.exp(-alpha * x) * cosine_sum(info.cos_terms, x)
    if shape is Shape.CONNES:
        return (1.0 - x * x) ** 2
    if shape is Shape.BOHMAN:
        return (1.0 - x) * math.cos(math.pi * x) + math.sin(math.pi * x) / math.pi
    if shape is Shape.LANCZOS:
        return _lanczos(x)
    return 1.0