# caes

A small pure-Python toolbox for signal work, with a set of helpers for
formatting and parsing numbers, times, paths and text. It needs only the
standard library, Python 3.10 or later.

## Modules

### Signal processing

- `caes.mathutil`
  - `convolve_ext(a, b, report=None)`: full convolution, `len(a) + len(b) - 1` values.
  - `convolve_int(a, b, report=None)`: only the fully overlapping part,
    `len(long) - len(short) + 1` values. Both take an optional `report`
    callback that receives the fraction of work done.
  - Integer helpers: `gcf`, `reverse_bits`, `log2_ceil`, `next_pow_two`,
    `is_pow_two` (true from 2 upwards), `round_to_int`, `pow10`, `floor_ld`.
  - Stereo PCM helpers: `interleave_int16`, `interleave_int32` truncate two
    channels to integers and interleave them; `deinterleave_int16`,
    `deinterleave_int32` split them back, scaled to full scale 1.0.
  - Noise: `rand_rect`, `rand_gauss` and `rand_gauss_vec(n)`. Each accepts an
    optional `random.Random` so results can be repeated.
  - `tk(k, x)`: Chebyshev polynomial of the first kind.
- `caes.fft`: `FFT(length=2048, inverse=False)` is a radix-2 transform.
  `calc(re, im)` returns `(real, imaginary)` lists and divides by the length
  in both directions. `to_power(re, im)` folds the result into a one-sided
  magnitude spectrum, and `norm_freq(x)` gives the normalised frequency of a
  bin. The length is clamped to 4 .. 262144 and must be a power of two.
- `caes.spectrum`: `SpecTran` transforms real time records. After
  `resize(nt, nf)`, `calc(t_re)` uses a direct DFT on precomputed tables for
  records of up to 2048 points and the FFT for longer ones. It also offers
  `dft_real`, `fft_real`, `dft_lin_phase` for records that are symmetric about
  their middle, and `to_power_spectrum`.
- `caes.apodia_shapes`: the `Shape` enumeration of 29 window shapes (Dirichlet,
  Bartlett, Welch, Parzen, Bartlett-Hann, Tukey-Hanning, Hann, Hamming,
  Nuttall, the Blackman family, ten flat-tops, Dolph, Gauss, Kaiser, Slepian,
  Poisson, Hann-Poisson, Connes, Bohman and Lanczos). It also has
  `shape_info(shape)` (a `ShapeInfo` with name, alpha range and default alpha),
  `shape_value(shape, x, alpha=None)`, `cosine_sum`, `bessel_i0` and
  `list_catalog()`.
- `caes.apodia`: `Apodia` builds a window of a chosen shape and length.
  `set_shape`, `set_alpha` (clamped to the shape's range) and `set_n` (0 ..
  262144) set it up, `build_window()` builds it, and `apply(samples)`
  multiplies samples by it. Normalisation is chosen with the `norm` property
  (`Norm.DC`, `Norm.RMS`, `Norm.PEAK`). Setting `anti = True` turns the window
  into its complement.
- `caes.remez`: `Remez` designs equiripple linear-phase FIR filters by the
  Remez exchange. You set `n`, `num_bands`, the band edges through
  `set_edge(index, freq)`, and `gains`, `weights` and `filter_type`
  (`FilterType.BAND`, `DIFF` or `HILBERT`). Then `calculate()` returns the taps.
  `norm_dc`, `norm_rms`, `norm_sf(sf)` and `norm_peak` rescale them. The
  `iterations` and `converged` attributes report how the run went. If the
  exchange does not converge, a warning goes to the `caes.remez` logger.

### Text and number formatting

- `caes.textutil`: ASCII case changes (`to_upper`, `to_lower`,
  `to_upper_block`, `to_lower_block`), removal of non-printable characters,
  spaces included (`strip_np_lead`, `strip_np_trail`, `strip_np_all`,
  `compact_all_np`), `pad_space_lead`, `pad_space_trail` and
  `find_any_char_list`.
- `caes.textcheck`: `is_llong_dec(s)` and `is_double_fixed(s)`.
- `caes.paths`: `cleanup_file_name`, `path_string_split`,
  `path_extract_file_name`, `path_extract_ext`, `path_extract_base`,
  `path_extract_path` and `path_extract_last_dir`.
- `caes.timefmt`: `sec_to_hms(t, pad_hours=False)` and `hms_to_sec(text)` for
  `[HH:][MM:]SS.ffff` text.
- `caes.engfmt`: `eng_string(value, sig_figs=3, units="")` formats with SI
  prefixes, so `eng_string(4700, 3, "Ohm")` gives `"4.70 kOhm"`.
  `string_eng(text)` parses plain, scientific (`1.5e3`) or engineering (`1k5`,
  `2.2uF`) notation. `parse_eng_mark(c)` maps a prefix letter to its exponent.
- `caes.numfmt`: `int_with_comma`, `hex_with_0x`, `ratio_string` and
  `gridder_125` (a 1-2-5 grid step).
- `caes.errnames`: `errno_to_string(code)` gives a readable sentence for an
  errno code.

Bad input raises `ValueError` rather than returning a status flag.

## Example

```python
from caes.apodia import Apodia
from caes.apodia_shapes import Shape
from caes.fft import FFT

win = Apodia()
win.set_shape(Shape.HANN)
win.set_n(1024)
win.build_window()

shaped = win.apply([1.0] * 1024)

fft = FFT(1024, False)
re, im = fft.calc(shaped, [0.0] * 1024)
spectrum = fft.to_power(re, im)
```

A low-pass filter design:

```python
from caes.remez import Remez

design = Remez()
design.n = 31
design.num_bands = 2
for index, freq in enumerate((0.0, 0.1, 0.2, 0.5)):
    design.set_edge(index, freq)
design.gains[0], design.gains[1] = 1.0, 0.0
design.weights[0], design.weights[1] = 1.0, 1.0
taps = design.calculate()
```

## What it does not do

It is a library only. There is no command-line program, no audio file reading
or writing, and no plotting. `SpecTran` transforms real records only.

## Install and test

```
pip install .
pip install ".[test]"
pytest
```