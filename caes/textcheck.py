"""Checks whether text holds a plain decimal integer or fixed-point number."""

from __future__ import annotations

from caes.textutil import strip_np_lead, strip_np_trail

_MAX_LLONG_DIGITS = 18
_MAX_FIXED_CHARS = 35


def _body(s):
    s = strip_np_trail(strip_np_lead(s))
    return s[1:] if s.startswith("-") else s


def is_llong_dec(s):
    """True if ``s`` is an optional '-' and 1 to 18 decimal digits, ignoring surrounding blanks."""
    body = _body(s)
    if not 0 < len(body) <= _MAX_LLONG_DIGITS:
        return False
    return all("0" <= c <= "9" for c in body)


def is_double_fixed(s):
    """True if ``s`` is an optional '-' and up to 35 digits with at most one '.'."""
    body = _body(s)
    if not 0 < len(body) <= _MAX_FIXED_CHARS:
        return False
    found_dot = False
    for c in body:
        if c == "." and not found_dot:
            found_dot = True
        elif not "0" <= c <= "9":
            return False
    return True