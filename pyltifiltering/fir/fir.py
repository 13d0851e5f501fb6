#  fir.fir.py
#
#       Implements a Finite Impulse Response filter through direct linear
#       convolution of a stored input with an impulse response.

from __future__ import annotations

from typing import Optional

import numpy as np

from pyltifiltering.base import LTIFilter
from pyltifiltering._constants import DEFAULT_IMPULSE_RESPONSE
from pyltifiltering._utils.signal import convolve
from pyltifiltering._utils.typing import ArrayLike, DTypeLike
from pyltifiltering._utils.validation import ensure_1d_signal


class FIR(LTIFilter):
    """
    Finite Impulse Response (FIR) filter.

    Holds an input signal ``x`` and an impulse response ``h`` and produces the
    full linear convolution

    .. math::
        y[n] = \\sum_{k} h[k]\\, x[n - k], \\qquad n = 0, \\ldots, N + M - 2,

    where ``N = len(x)`` and ``M = len(h)``.

    Parameters
    ----------
    x : array_like
        Stored input signal. Must be non-empty.
    h : array_like, optional
        Impulse response. Must be non-empty if given. Defaults to ``[1, 2, 1]``.
    dtype : data-type, optional
        Numeric kind of the filter. If None, it is inferred from ``x`` and
        ``h`` and is at least float64. Pass an integer kind (e.g. ``dtype=int``)
        for exact integer convolution.

    Raises
    ------
    InvalidArgument
        If ``x`` or ``h`` is empty.
    """

    inexact: bool = False

    def __init__(
        self,
        x: ArrayLike,
        h: Optional[ArrayLike] = None,
        dtype: Optional[DTypeLike] = None,
    ) -> None:
        if h is None:
            h = DEFAULT_IMPULSE_RESPONSE
        super().__init__(x, h, dtype=dtype)
        self._x: np.ndarray = self._vector(x, "x")
        self._h: np.ndarray = self._vector(h, "h")

    @property
    def h(self) -> np.ndarray:
        """Copy of the impulse response."""
        return self._h.copy()

    @h.setter
    def h(self, h: ArrayLike) -> None:
        self._h = self._vector(h, "h")

    @property
    def x(self) -> np.ndarray:
        """Copy of the stored input signal."""
        return self._x.copy()

    @x.setter
    def x(self, x: ArrayLike) -> None:
        self._x = self._vector(x, "x")

    def out_signal(self) -> np.ndarray:
        """Convolution of the impulse response with the stored input."""
        return convolve(self._h, self._x)

    @ensure_1d_signal
    def filter_signal(self, input_signal: np.ndarray) -> np.ndarray:
        """Convolve ``input_signal`` with the impulse response, without storing it."""
        return convolve(self._h, input_signal)

    def __repr__(self) -> str:
        return f"<FIR h={self._h.tolist()} samples={self._x.size} dtype={self._dtype}>"
# EOF
