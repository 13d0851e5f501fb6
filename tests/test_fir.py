# tests/test_fir.py

import pytest
import numpy as np
from scipy import signal

from pyltifiltering import FIR, InvalidArgument, convolve


def test_fir_default_impulse_response():
    fir = FIR([1.5, 2.0, 3.5])
    np.testing.assert_array_equal(fir.h, [1, 2, 1])
    np.testing.assert_allclose(fir.out_signal(), [1.5, 5.0, 9.0, 9.0, 3.5])


def test_fir_second_constructor_and_setters():
    fir = FIR([1, 2, 3], [3, 2, 1], dtype=int)
    np.testing.assert_array_equal(fir.out_signal(), [3, 8, 14, 8, 3])

    fir.x = [2, 1, 3, 7]
    fir.h = [7, 3, 1, 2]
    np.testing.assert_array_equal(fir.out_signal(), [14, 13, 26, 63, 26, 13, 14])


@pytest.mark.parametrize("h_len", [1, 3, 8])
def test_fir_output_length(random_signal, h_len):
    h = np.linspace(-1.0, 1.0, h_len)
    fir = FIR(random_signal, h)
    assert fir.out_signal().size == h_len + random_signal.size - 1


def test_fir_matches_scipy_lfilter(random_signal):
    """The first len(x) samples of the convolution are the causal FIR output."""
    h = np.array([0.4, -0.2, 0.1])
    fir = FIR(random_signal, h)
    y_ref = signal.lfilter(h, [1.0], random_signal)
    np.testing.assert_allclose(fir.out_signal()[: random_signal.size], y_ref, atol=1e-12)


def test_fir_filter_signal_does_not_store_input(random_signal):
    fir = FIR([1.0, 2.0], [0.5, 0.5])
    y = fir.filter_signal(random_signal)
    np.testing.assert_allclose(y, convolve([0.5, 0.5], random_signal))
    np.testing.assert_array_equal(fir.x, [1.0, 2.0])


def test_fir_getters_return_copies():
    fir = FIR([1.0, 2.0], [1.0, -1.0])
    h = fir.h
    h[0] = 99.0
    x = fir.x
    x[0] = 99.0
    np.testing.assert_array_equal(fir.h, [1.0, -1.0])
    np.testing.assert_array_equal(fir.x, [1.0, 2.0])


def test_fir_keeps_explicit_integer_kind():
    fir = FIR([1, 2, 3], [3, 2, 1], dtype=int)
    assert np.issubdtype(fir.dtype, np.integer)
    assert np.issubdtype(fir.out_signal().dtype, np.integer)


def test_fir_complex_signal(complex_signal):
    fir = FIR(complex_signal, [1.0, 0.5])
    assert fir.dtype == np.complex128
    np.testing.assert_allclose(fir.out_signal(), np.convolve([1.0, 0.5], complex_signal))


@pytest.mark.parametrize(
    "args",
    [
        ([],),
        ([], [1.0]),
        ([1.0], []),
    ],
)
def test_fir_constructor_rejects_empty_vectors(args):
    with pytest.raises(InvalidArgument):
        FIR(*args)


@pytest.mark.parametrize("attr", ["h", "x"])
def test_fir_setters_reject_empty_and_keep_state(attr):
    fir = FIR([1.0, 2.0], [3.0, 4.0])
    before = getattr(fir, attr)
    with pytest.raises(InvalidArgument):
        setattr(fir, attr, [])
    np.testing.assert_array_equal(getattr(fir, attr), before)


def test_fir_rejects_two_dimensional_input():
    with pytest.raises(InvalidArgument):
        FIR(np.ones((2, 2)))


def test_fir_rejects_complex_into_real_kind():
    fir = FIR([1.0, 2.0])
    with pytest.raises(InvalidArgument):
        fir.x = [1.0 + 1.0j]


def test_integer_fir_rejects_float_samples():
    fir = FIR([1, 2, 3], dtype=int)
    with pytest.raises(InvalidArgument):
        fir.x = [1.5, 2.0]
    np.testing.assert_array_equal(fir.x, [1, 2, 3])


def test_fir_explicit_float_kind():
    fir = FIR([1, 2, 3], [3, 2, 1], dtype=np.float32)
    assert fir.dtype == np.float32
    np.testing.assert_allclose(fir.out_signal(), [3, 8, 14, 8, 3])


def test_fir_from_integer_literals_infers_float():
    fir = FIR([1, 2, 3])
    assert fir.dtype == np.float64
    np.testing.assert_array_equal(fir.h, [1.0, 2.0, 1.0])


def test_fir_from_integer_literals_accepts_float_vectors():
    fir = FIR([1, 2, 3])
    fir.h = [0.5, 0.5]
    np.testing.assert_allclose(fir.out_signal(), [0.5, 1.5, 2.5, 1.5])
    fir.x = [0.25]
    np.testing.assert_allclose(fir.out_signal(), [0.125, 0.125])
    np.testing.assert_allclose(fir.filter_signal([0.5]), [0.25, 0.25])


def test_fir_rejects_non_numeric_vectors():
    with pytest.raises(InvalidArgument):
        FIR(["a", "b"])
    with pytest.raises(InvalidArgument):
        FIR([1.0], ["x"])


def test_fir_repr():
    assert repr(FIR([1, 2, 3])).startswith("<FIR h=[1.0, 2.0, 1.0] samples=3")
    assert repr(FIR([1, 2, 3], dtype=int)).startswith("<FIR h=[1, 2, 1] samples=3")
