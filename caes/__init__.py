"""Pure-Python signal helpers (FFT, spectra, windows, Remez FIR design) and text and number formatting."""

__version__ = "0.1.0"