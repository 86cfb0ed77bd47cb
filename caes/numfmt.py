"""Number formatting: grouped integers, fixed-width hex, ratios and 1-2-5 grid steps."""

from __future__ import annotations

import math

_HEX = "0123456789ABCDEF"
_MAX_HEX_DIGITS = 8
_STEPS = (1, 2, 5)
_FIRST_EXPONENT = -21
_MIN_V_MAX_FACTOR = 2.333333333333333


def int_with_comma(value):
    """The integer part of ``value`` with commas between groups of three digits."""
    number = int(value)
    sign = "-" if number < 0 else ""
    return f"{sign}{abs(number):,}"


def hex_with_0x(value, sig_figs):
    """'0x' and the lowest ``sig_figs`` hex digits (0 to 8) of a 32-bit value, upper case."""
    sig_figs = int(sig_figs)
    if not 0 <= sig_figs <= _MAX_HEX_DIGITS:
        raise ValueError(f"sig_figs must be in [0, {_MAX_HEX_DIGITS}], got {sig_figs}")
    value = int(value) & 0xFFFFFFFF
    digits = "".join(_HEX[(value >> (4 * i)) & 0xF] for i in reversed(range(sig_figs)))
    return "0x" + digits


def ratio_string(value):
    """A ratio as 'N:1' above one, '1:N' below one and '1:1' at one."""
    value = float(value)
    if value == 1.0:
        return "1:1"
    if value > 1.0:
        return f"{value:f}:1"
    return f"1:{value:f}"


def _pow10(exponent):
    try:
        return 10.0 ** exponent
    except OverflowError:
        return math.inf


def gridder_125(span, count, min_v_max=False):
    """The smallest grid step of 1, 2 or 5 times 10**(3k) giving fewer than ``count`` divisions.

    With ``min_v_max`` the allowed count is widened by the 1-2-5 ratio.
    """
    span = float(span)
    if not math.isfinite(span):
        raise ValueError("span must be finite")
    if count < 0:
        raise ValueError("count must not be negative")
    max_count = float(count) * (_MIN_V_MAX_FACTOR if min_v_max else 1.0)
    if span > 0.0 and max_count <= 0.0:
        raise ValueError("count must be positive")

    exponent = _FIRST_EXPONENT
    index = 0
    while True:
        step = _STEPS[index] * _pow10(exponent)
        if span / step < max_count:
            return step
        index += 1
        if index == len(_STEPS):
            index = 0
            exponent += 3