"""Engineering notation: format numbers with SI prefixes and parse them back."""

from __future__ import annotations

import logging
import re
from enum import Enum, auto

from caes.textutil import strip_np_all

_log = logging.getLogger(__name__)

_PREFIXES = "afpnumRkMGTPY"
_UNIT_INDEX = 6
_LOW_MILLENIUM = -18
_HIGH_MILLENIUM = 15

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")
_INT_PREFIX = re.compile(r"[+-]?\d+")


class _State(Enum):
    START = auto()
    MANT = auto()
    EXP = auto()
    DONE = auto()
    RESIDUE = auto()
    BAD = auto()


class _Mode(Enum):
    NUM = auto()
    ENG = auto()
    SCI = auto()


def parse_eng_mark(c):
    """Decimal exponent of SI prefix ``c`` ('k' gives 3, 'u' gives -6), 0 for '.', else None."""
    if c == ".":
        return 0
    if len(c) != 1:
        return None
    index = _PREFIXES.find(c)
    if index < 0:
        return None
    return _LOW_MILLENIUM + 3 * index


def eng_string(value, sig_figs=3, units=""):
    """Format ``value`` with ``sig_figs`` significant figures and an SI prefix before ``units``.

    Values beyond the prefix range give 'big' or 'small', signed.
    """
    value = float(value)
    if value == 0.0:
        return f"{0.0:.{max(int(sig_figs), 0)}f} {units}"
    sign = "-" if value < 0.0 else ""
    v = abs(value)

    millenium = 0
    while v < 0.999999999999 and millenium > _LOW_MILLENIUM:
        v *= 1000.0
        millenium -= 3
    while v > 999.999999999 and millenium < _HIGH_MILLENIUM:
        v /= 1000.0
        millenium += 3

    if millenium == _HIGH_MILLENIUM and v >= 1000.0:
        return sign + "big"
    if millenium == _LOW_MILLENIUM and v < 1.0:
        return sign + "small"

    index = (millenium - _LOW_MILLENIUM) // 3
    if v > 99.99999999:
        decimals = sig_figs - 3
    elif v > 9.999999999:
        decimals = sig_figs - 2
    else:
        decimals = sig_figs - 1
    decimals = max(int(decimals), 0)
    prefix = "" if index == _UNIT_INDEX else _PREFIXES[index]
    return f"{sign}{v:.{decimals}f} {prefix}{units}"


def string_eng(text):
    """Parse plain, scientific ('1.5e3') or engineering ('1k5', '2.2 uF') notation.

    Non-printable characters and spaces are ignored and trailing text is
    dropped. Raises ValueError for empty text or text that does not start
    like a number.
    """
    s = strip_np_all(text)
    if not s:
        raise ValueError("no number in empty text")

    mant: list[str] = []
    exp: list[str] = []
    dst = mant
    state = _State.START
    mode = _Mode.NUM
    got_period = False
    got_mark = False
    i_exp = 0
    pos = 0

    while state not in (_State.DONE, _State.RESIDUE, _State.BAD):
        c = s[pos] if pos < len(s) else ""
        if c and ("0" <= c <= "9" or c in "+-"):
            if state is _State.START:
                state = _State.MANT
            dst.append(c)
            pos += 1
        elif state is _State.START:
            mark = parse_eng_mark(c)
            if mark is None:
                state = _State.BAD
            else:
                i_exp = mark
                got_period = True
                got_mark = True
                mode = _Mode.ENG
                state = _State.MANT
                dst.append(".")
                pos += 1
        elif state is _State.EXP:
            if pos < len(s):
                _log.warning("residue after exponent: %s", s[pos:])
                state = _State.RESIDUE
            else:
                state = _State.DONE
        elif c in ("e", "E"):
            if got_mark:
                _log.warning("exponent after engineering mark: %s", s[pos:])
                state = _State.RESIDUE
            else:
                state = _State.EXP
                mode = _Mode.SCI
                pos += 1
                dst = exp
        elif c == ".":
            if got_period:
                _log.warning("extra decimal point: %s", s[pos:])
                state = _State.RESIDUE
            else:
                dst.append(c)
                pos += 1
                got_period = True
        elif c and parse_eng_mark(c) is not None:
            if mode is _Mode.ENG:
                _log.warning("second engineering mark: %s", s[pos:])
                state = _State.RESIDUE
            else:
                i_exp = parse_eng_mark(c)
                got_period = True
                got_mark = True
                mode = _Mode.ENG
                dst.append(".")
                pos += 1
        elif not c:
            state = _State.DONE
        else:
            _log.warning("trailing characters: %s", s[pos:])
            state = _State.DONE

    if state is _State.BAD:
        raise ValueError(f"{text!r} does not start with a number")

    match = _FLOAT_PREFIX.match("".join(mant))
    d_mant = float(match.group()) if match else 1.0
    if mode is _Mode.SCI:
        match = _INT_PREFIX.match("".join(exp))
        if match:
            i_exp = int(match.group())
    try:
        scale = 10.0 ** i_exp
    except OverflowError:
        scale = float("inf")
    return d_mant * scale