"""Spectrum transform: a real-input DFT on a precomputed table, or an FFT for long records."""

from __future__ import annotations

import math

from caes.fft import FFT


class SpecTran:
    """Takes time samples in and gives a one-sided spectrum out.

    Time runs from zero in steps of one sample. Frequencies are normalised to
    a sample rate of 1.0 and span ``f_start`` to ``f_stop`` (0.0 to 0.5).
    Records of up to ``DFT_LIMIT`` points use a direct DFT whose sine and
    cosine tables are built by :meth:`resize`; longer records use the FFT.
    """

    MIN_LEN = 4
    DFT_LIMIT = 2048
    MAX_LEN = 256 * 1024

    def __init__(self):
        self.f_start = 0.0
        self.f_stop = 0.5
        self._nt = 1
        self._nf = 1
        self.is_odd = False
        self.uses_fft = True
        self._fft = FFT()
        self._cos: list[list[float]] = []
        self._sin: list[list[float]] = []

    @property
    def nt(self):
        """Number of time points."""
        return self._nt

    @property
    def nf(self):
        """Number of frequency points."""
        return self._nf

    def resize(self, nt, nf):
        """Set the time and frequency sizes and rebuild the DFT tables when they are used."""
        nt = int(nt)
        nf = int(nf)
        for name, value in (("nt", nt), ("nf", nf)):
            if not self.MIN_LEN <= value <= self.MAX_LEN:
                raise ValueError(
                    f"{name}={value} outside [{self.MIN_LEN}, {self.MAX_LEN}]"
                )
        if nt == self._nt and nf == self._nf:
            return
        self._nt = nt
        self._nf = nf
        self.is_odd = bool(nf & 1)
        self._fft.set_len(nt)
        self.uses_fft = False
        self._cos = []
        self._sin = []
        if nt > self.DFT_LIMIT or nf > self.DFT_LIMIT:
            self.uses_fft = True
            return

        t_start = -0.5 * (nt - 1)  # time centred on the middle of the record
        d_w = 2.0 * math.pi * (self.f_stop - self.f_start) / nf
        w_start = 2.0 * math.pi * self.f_start
        corr = 2.0 / nt  # integration and one-sided spectrum compensation
        times = [t_start + t for t in range(nt)]
        for f in range(nf):
            w = w_start + f * d_w
            self._cos.append([math.cos(w * t) * corr for t in times])
            self._sin.append([math.sin(w * t) * corr for t in times])

    def calc(self, t_re, t_im=None):
        """Transform a record; return (real, imaginary) frequency lists."""
        if t_re is None:
            raise ValueError("no time data given")
        if self._nt <= self.DFT_LIMIT:
            self.uses_fft = False
            return self.dft_real(t_re)
        self.uses_fft = True
        return self.fft_real(t_re, t_im)

    def fft_real(self, t_re, t_im=None):
        """Transform with the FFT; a missing imaginary part counts as zeros."""
        t_re = list(t_re)
        if t_im is None:
            t_im = [0.0] * len(t_re)
        return self._fft.calc(t_re, t_im)

    def dft_real(self, t_re):
        """Direct DFT of a real record on the precomputed tables."""
        if not self._cos:
            raise ValueError("DFT tables not built; resize to DFT-sized lengths first")
        t_re = list(t_re)
        if len(t_re) < self._nt:
            raise ValueError(f"need at least {self._nt} time samples")
        t_re = t_re[: self._nt]
        f_re = [sum(c * x for c, x in zip(row, t_re)) for row in self._cos]
        f_im = [sum(s * x for s, x in zip(row, t_re)) for row in self._sin]
        return f_re, f_im

    def dft_lin_phase(self, t_re):
        """Real response of a record symmetric about its middle, ``nf`` points long."""
        nf = self._nf
        if nf < self.MIN_LEN:
            raise ValueError("sizes not set; call resize first")
        t_re = list(t_re)
        if len(t_re) < nf:
            raise ValueError(f"need at least {nf} time samples")

        df = 1.0 / (nf - 1)
        ncos = nf >> 1
        mo = ncos + 1 if self.is_odd else ncos
        # half[k] for k in 1..ncos walks outward from the middle
        half = {k: t_re[mo - 1 + k] for k in range(1, ncos + 1)}

        if self.is_odd:
            f_re = [t_re[mo - 1] * 0.5] * nf
            df *= 2.0 * math.pi
            for k, coeff in half.items():
                f_re = [acc + coeff * math.cos(k * i * df) for i, acc in enumerate(f_re)]
        else:
            f_re = [0.0] * nf
            df *= math.pi
            for k, coeff in half.items():
                tk = 2 * k - 1
                f_re = [acc + coeff * math.cos(tk * i * df) for i, acc in enumerate(f_re)]
        return [v / ncos for v in f_re]

    def to_power_spectrum(self, f_re, f_im):
        """Magnitude of each complex frequency point."""
        f_re = list(f_re)
        f_im = list(f_im)
        if len(f_re) != len(f_im):
            raise ValueError("real and imaginary parts differ in length")
        return [math.sqrt(r * r + i * i) for r, i in zip(f_re, f_im)]