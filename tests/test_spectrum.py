import pytest

from caes.fft import FFT
from caes.spectrum import SpecTran


def _ready(nt=8, nf=8):
    st = SpecTran()
    st.resize(nt, nf)
    return st


def test_constant_signal_dc_term():
    st = _ready()
    f_re, f_im = st.calc([1.0] * 8)
    assert f_re[0] == pytest.approx(2.0)
    assert f_im[0] == pytest.approx(0.0)


def test_symmetric_input_has_no_imaginary_part():
    st = _ready()
    _, f_im = st.dft_real([1, 2, 3, 4, 4, 3, 2, 1])
    assert all(abs(v) < 1e-12 for v in f_im)


def test_antisymmetric_input_has_no_real_part():
    st = _ready()
    f_re, _ = st.dft_real([1, 2, 3, 4, -4, -3, -2, -1])
    assert all(abs(v) < 1e-12 for v in f_re)


def test_dft_is_linear():
    st = _ready()
    a = [0.5, -1.0, 2.0, 0.25, 3.0, -2.0, 1.0, 0.0]
    b = [1.0, 1.5, -0.5, 2.0, 0.0, 4.0, -3.0, 1.0]
    ra, ia = st.dft_real(a)
    rb, ib = st.dft_real(b)
    rs, is_ = st.dft_real([x + y for x, y in zip(a, b)])
    assert rs == pytest.approx([x + y for x, y in zip(ra, rb)])
    assert is_ == pytest.approx([x + y for x, y in zip(ia, ib)])


def test_output_length_is_nf():
    st = _ready(8, 5)
    f_re, f_im = st.calc([1.0] * 8)
    assert len(f_re) == 5 and len(f_im) == 5
    assert st.is_odd


def test_uses_fft_flag():
    st = SpecTran()
    assert st.uses_fft
    st.resize(8, 8)
    assert not st.uses_fft
    st.resize(4096, 16)
    assert st.uses_fft


def test_long_record_goes_through_fft():
    st = _ready(4096, 16)
    signal = [0.0] * 4096
    signal[3] = 1.0
    got = st.calc(signal, [0.0] * 4096)
    expected = FFT(4096).calc(signal, [0.0] * 4096)
    assert got[0] == pytest.approx(expected[0])
    assert got[1] == pytest.approx(expected[1])


@pytest.mark.parametrize("nt,nf", [(3, 8), (8, 3), (300000, 8), (8, 300000)])
def test_resize_out_of_range(nt, nf):
    with pytest.raises(ValueError):
        SpecTran().resize(nt, nf)


def test_dft_without_tables_raises():
    with pytest.raises(ValueError):
        SpecTran().dft_real([1.0] * 8)


def test_dft_short_input_raises():
    st = _ready()
    with pytest.raises(ValueError):
        st.dft_real([1.0] * 4)


def test_lin_phase_odd_center_impulse_is_flat():
    st = _ready(8, 5)
    out = st.dft_lin_phase([0.0, 0.0, 1.0, 0.0, 0.0])
    assert len(out) == 5
    assert out == pytest.approx([0.25] * 5)


def test_lin_phase_even_zeros():
    st = _ready(8, 4)
    out = st.dft_lin_phase([0.0] * 4)
    assert out == [0.0] * 4


def test_lin_phase_linear():
    st = _ready(8, 7)
    a = [1.0, 2.0, 3.0, 4.0, 3.0, 2.0, 1.0]
    doubled = st.dft_lin_phase([2 * x for x in a])
    assert doubled == pytest.approx([2 * v for v in st.dft_lin_phase(a)])


def test_lin_phase_needs_resize():
    with pytest.raises(ValueError):
        SpecTran().dft_lin_phase([1.0] * 8)


def test_power_spectrum():
    st = SpecTran()
    assert st.to_power_spectrum([3.0, 0.0], [4.0, 0.0]) == pytest.approx([5.0, 0.0])


def test_power_spectrum_length_mismatch():
    with pytest.raises(ValueError):
        SpecTran().to_power_spectrum([1.0, 2.0], [1.0])