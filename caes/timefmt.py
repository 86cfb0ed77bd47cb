"""Formatting and parsing of times as [HH:][MM:]SS.ffff."""

from __future__ import annotations

import math
import re

_DIGITS = "0123456789"
_FLOAT_PREFIX = re.compile(r"\d+\.?\d*|\.\d+")


def _c_divmod(value, divisor):
    """Quotient and remainder with truncation toward zero."""
    q = int(value / divisor) if value >= 0 else -int(-value / divisor)
    return q, value - q * divisor


def sec_to_hms(t, pad_hours=False):
    """Format seconds as [HH:][MM:]SS.ffff; hours and minutes appear when nonzero or padded."""
    whole = math.floor(t)
    frac = t - whole
    minutes, sec = _c_divmod(whole, 60)
    hours, minutes = _c_divmod(minutes, 60)

    out = ""
    if hours > 0 or pad_hours:
        out += f"{hours:02d}:"
    if minutes > 0 or pad_hours:
        out += f"{minutes:02d}:"
    frac += sec
    if sec < 10:
        out += "0" + f"{frac:5.4f}"
    else:
        out += f"{frac:6.4f}"
    return out


def _scan_back(text, end, chars):
    start = end
    while start > 0 and text[start - 1] in chars:
        start -= 1
    return start


def _field(text, start, end, unit):
    digits = text[start:end]
    value = int(digits) if digits else 0
    if value >= 60:
        raise ValueError(f"{unit} must be below 60: {value}")
    return value


def hms_to_sec(text):
    """Parse [[H:]M:]S[.f] from the end of ``text`` into seconds.

    Anything before the last recognised field is ignored. Seconds, minutes
    and hours must each be below 60.
    """
    if not text:
        raise ValueError("empty time string")
    end = len(text)
    start = _scan_back(text, end, _DIGITS + ".")
    match = _FLOAT_PREFIX.match(text, start, end)
    if start == end or match is None:
        raise ValueError(f"no seconds in {text!r}")
    total = float(match.group())
    if total >= 60.0:
        raise ValueError(f"seconds must be below 60: {total}")

    colon = start - 1
    if colon <= 0 or text[colon] != ":":
        return total
    end = colon
    start = _scan_back(text, end, _DIGITS)
    total += 60.0 * _field(text, start, end, "minutes")

    colon = start - 1
    if colon <= 0 or text[colon] != ":":
        return total
    end = colon
    start = _scan_back(text, end, _DIGITS)
    total += 3600.0 * _field(text, start, end, "hours")
    return total