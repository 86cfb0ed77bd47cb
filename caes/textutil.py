"""ASCII case changes, non-printable stripping, padding and substring search."""

from __future__ import annotations

import string

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _printable(c):
    return "!" <= c <= "~"


def to_upper(s):
    """Upper-case the ASCII letters a-z; every other character is left alone."""
    return s.translate(_UPPER)


def to_lower(s):
    """Lower-case the ASCII letters A-Z; every other character is left alone."""
    return s.translate(_LOWER)


def to_upper_block(s, n):
    """Upper-case the ASCII letters among the first ``n`` characters."""
    if n <= 0:
        return s
    return s[:n].translate(_UPPER) + s[n:]


def to_lower_block(s, n):
    """Lower-case the ASCII letters among the first ``n`` characters."""
    if n <= 0:
        return s
    return s[:n].translate(_LOWER) + s[n:]


def strip_np_trail(s):
    """Drop trailing characters outside the printable range '!'..'~' (spaces included)."""
    end = len(s)
    while end > 0 and not _printable(s[end - 1]):
        end -= 1
    return s[:end]


def strip_np_lead(s):
    """Drop leading characters outside the printable range '!'..'~' (spaces included)."""
    start = 0
    while start < len(s) and not _printable(s[start]):
        start += 1
    return s[start:]


def strip_np_all(s):
    """Keep only the characters in the printable range '!'..'~'."""
    return "".join(c for c in s if _printable(c))


def compact_all_np(s):
    """Replace each run of non-printable characters (spaces included) with one space."""
    out = []
    in_gap = False
    for c in s:
        if _printable(c):
            out.append(c)
            in_gap = False
        elif not in_gap:
            out.append(" ")
            in_gap = True
    return "".join(out)


def pad_space_lead(s, length):
    """Right-justify in ``length`` characters with leading spaces; longer strings are kept."""
    return s.rjust(length)


def pad_space_trail(s, length):
    """Left-justify in ``length`` characters with trailing spaces; longer strings are kept."""
    return s.ljust(length)


def find_any_char_list(s, f):
    """Index of the first occurrence of ``f`` in ``s``, or None; empty strings never match."""
    if not s or not f:
        return None
    index = s.find(f)
    return None if index < 0 else index