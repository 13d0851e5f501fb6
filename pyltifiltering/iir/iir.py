#  iir.iir.py
#
#       Implements an Infinite Impulse Response filter evaluated in the time
#       domain through its linear recursive difference equation (direct form),
#       plus an impulse-response energy heuristic for stability.

from __future__ import annotations

import logging
from enum import Enum
from time import perf_counter
from typing import Optional, Tuple

import numpy as np

from pyltifiltering.base import LTIFilter
from pyltifiltering._constants import (
    AUTO_LENGTH,
    DEFAULT_A,
    DEFAULT_B,
    STABILITY_IMPULSE_LENGTH,
    STABILITY_PROBE_LENGTH,
    STABILITY_RATIO_THRESHOLD,
)
from pyltifiltering._utils.signal import next_power_of_two, resize_signal, sum_squares
from pyltifiltering._utils.typing import ArrayLike, DTypeLike
from pyltifiltering._utils.validation import check_length, ensure_1d_signal
from pyltifiltering.exceptions import DomainError, InvalidArgument

logger = logging.getLogger(__name__)


class Stability(str, Enum):
    """Outcome of :meth:`IIR.stability`."""

    STABLE = "stable"
    UNSTABLE = "unstable"

    @property
    def message(self) -> str:
        if self is Stability.STABLE:
            return "This filter is stable"
        return "This filter is unstable! - Please change coefficients"


class IIR(LTIFilter):
    """
    Infinite Impulse Response (IIR) filter.

    Realizes the transfer function

    .. math::
        H(z) = \\frac{B(z)}{A(z)}
             = \\frac{b_0 + b_1 z^{-1} + \\cdots + b_M z^{-M}}
                     {1 + a_1 z^{-1} + \\cdots + a_K z^{-K}}

    through the causal difference equation

    .. math::
        y[n] = \\sum_{k=0}^{M} b_k\\, x[n-k] - \\sum_{k=1}^{K} a_k\\, y[n-k].

    Parameters
    ----------
    b : array_like, optional
        Feedforward (numerator) coefficients. Defaults to ``[0.1, 0.1]``.
    a : array_like, optional
        Feedback (denominator) coefficients. Defaults to ``[1.0, 0.1]``.
        ``a[0]`` must be non-zero.
    output_length : int, optional
        Desired output length ``L``. ``0`` (default) selects the next power of
        two of the input length.
    dtype : data-type, optional
        Numeric kind of the filter, inferred from ``b`` and ``a`` if None.
        Integer kinds, even explicit ones, are promoted to float64.

    Notes
    -----
    Normalization
    ~~~~~~~~~~~~~
    Whenever ``a`` is set (construction included) and ``a[0] != 1``, both
    ``a`` and ``b`` are divided by ``a[0]``. The transfer function is
    unchanged and the stored denominator always starts with 1. Assigning
    ``b`` alone never renormalizes.

    Output length
    ~~~~~~~~~~~~~
    For an input of ``n`` samples the input is zero-padded to:

    - ``next_power_of_two(n)`` if ``L == 0``;
    - ``next_power_of_two(n)`` if ``0 < L < n`` (``L`` is overridden and a
      warning is logged);
    - ``L`` otherwise.

    The output has the same length as the padded input.

    Raises
    ------
    InvalidArgument
        If ``b`` or ``a`` is empty, or ``output_length`` is negative.
    DomainError
        If ``a[0] == 0``.
    """

    inexact: bool = True

    def __init__(
        self,
        b: Optional[ArrayLike] = None,
        a: Optional[ArrayLike] = None,
        output_length: int = AUTO_LENGTH,
        dtype: Optional[DTypeLike] = None,
    ) -> None:
        if b is None:
            b = DEFAULT_B
        if a is None:
            a = DEFAULT_A
        super().__init__(b, a, dtype=dtype)

        b_vec = self._vector(b, "b")
        a_vec = self._vector(a, "a")
        self._b, self._a = self._normalize(b_vec, a_vec)
        self._L: int = check_length(output_length, "L", owner=self)

    def _normalize(self, b: np.ndarray, a: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Scale ``b`` and ``a`` so that ``a[0] == 1``. Inputs are not modified."""
        div = a[0]
        if div == 0:
            raise DomainError(f"{self.__class__.__name__}: a[0] can't be zero (division by zero).")
        if div == 1:
            return b, a
        logger.debug("Normalizing coefficients by a[0]=%s", div)
        return b / div, a / div

    @property
    def b(self) -> np.ndarray:
        """Copy of the feedforward coefficients."""
        return self._b.copy()

    @b.setter
    def b(self, b: ArrayLike) -> None:
        self._b = self._vector(b, "b")

    @property
    def a(self) -> np.ndarray:
        """Copy of the (normalized) feedback coefficients."""
        return self._a.copy()

    @a.setter
    def a(self, a: ArrayLike) -> None:
        a_vec = self._vector(a, "a")
        self._b, self._a = self._normalize(self._b, a_vec)

    @property
    def output_length(self) -> int:
        """Desired output length ``L`` (0 means next power of two)."""
        return self._L

    @output_length.setter
    def output_length(self, L: int) -> None:
        self._L = check_length(L, "L", owner=self)

    def _padded_length(self, n_samples: int, L: int) -> int:
        if L == AUTO_LENGTH:
            return next_power_of_two(n_samples)
        if L < n_samples:
            logger.warning(
                "L cannot be smaller than input (L=%d, input has %d samples); "
                "resizing input to the next power of 2.",
                L,
                n_samples,
            )
            return next_power_of_two(n_samples)
        return L

    def _evaluate(self, x: np.ndarray, L: int) -> np.ndarray:
        """Direct-form recursion over ``x`` zero-padded according to ``L``."""
        x = resize_signal(x, self._padded_length(x.size, L), dtype=self._dtype)

        n_samples: int = int(x.size)
        m: int = int(self._b.size - 1)
        k_fb: int = int(self._a.size - 1)

        y: np.ndarray = np.zeros(n_samples, dtype=self._dtype)
        for n in range(n_samples):
            acc = y[n]
            for k in range(m + 1):
                if n - k >= 0:
                    acc += self._b[k] * x[n - k]
            for k in range(1, k_fb + 1):
                if n - k >= 0:
                    acc -= self._a[k] * y[n - k]
            y[n] = acc
        return y

    @ensure_1d_signal(allow_empty=True)
    def filter_signal(self, input_signal: np.ndarray, verbose: bool = False) -> np.ndarray:
        """
        Filters ``input_signal`` through the difference equation.

        Parameters
        ----------
        input_signal : array_like
            Input sequence ``x[n]``, possibly empty. It is copied, never modified.
        verbose : bool, optional
            If True, prints the total runtime after completion.

        Returns
        -------
        ndarray
            Output ``y[n]`` whose length follows the output-length policy.
        """
        tic: float = perf_counter()
        y = self._evaluate(input_signal, self._L)

        runtime_s: float = perf_counter() - tic
        if verbose:
            print(f"[IIR] Completed in {runtime_s * 1000:.03f} ms")
        return y

    out_signal = filter_signal
    lti_filter = filter_signal

    def impulse_response(
        self,
        n_samples: int = STABILITY_IMPULSE_LENGTH,
        output_length: int = STABILITY_PROBE_LENGTH,
    ) -> np.ndarray:
        """Response to a unit impulse of ``n_samples`` samples, evaluated with ``L=output_length``.

        The filter's own ``output_length`` is left untouched.
        """
        n_samples = check_length(n_samples, "n_samples", owner=self)
        if n_samples == 0:
            raise InvalidArgument(f"{self.__class__.__name__}: 'n_samples' must be positive.")
        output_length = check_length(output_length, "output_length", owner=self)

        x = np.zeros(n_samples, dtype=self._dtype)
        x[0] = 1
        return self._evaluate(x, output_length)

    def stability(self) -> Stability:
        """
        Heuristic stability test from the decay of the impulse response energy.

        A 30-sample unit impulse is filtered with ``L = 31`` and the energy of
        the second half of the response is compared to the first half
        (split at ``len(y) // 2``). The filter is reported unstable when

        .. math::
            E_2 / E_1 \\ge 1.

        This is not a pole-location test: slowly decaying or marginal filters
        can be misclassified.

        Degenerate cases: ``E_1 == 0`` is stable only if ``E_2 == 0`` too, and a
        response that overflows (non-finite energy) is unstable.
        """
        with np.errstate(over="ignore", invalid="ignore"):
            y = self.impulse_response()
            half = y.size // 2
            energy1 = sum_squares(y, 0, half)
            energy2 = sum_squares(y, half, y.size)

        if not (np.isfinite(energy1) and np.isfinite(energy2)):
            result = Stability.UNSTABLE
        elif energy1 == 0.0:
            result = Stability.STABLE if energy2 == 0.0 else Stability.UNSTABLE
        else:
            ratio = energy2 / energy1
            result = Stability.UNSTABLE if ratio >= STABILITY_RATIO_THRESHOLD else Stability.STABLE

        logger.debug("Stability probe: E1=%g E2=%g -> %s", energy1, energy2, result.value)
        return result

    def is_stable(self) -> bool:
        return self.stability() is Stability.STABLE

    def __repr__(self) -> str:
        return (
            f"<IIR b={self._b.tolist()} a={self._a.tolist()} "
            f"L={self._L} dtype={self._dtype}>"
        )
# EOF
