# base.py

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import numpy as np

from pyltifiltering._utils.typing import ArrayLike, DTypeLike
from pyltifiltering._utils.validation import as_vector, resolve_dtype


class LTIFilter(ABC):
    """Abstract base class for the linear time-invariant filters.

    The base class only carries the numeric kind of the filter (``dtype``) and
    the coefficient validation shared by subclasses. Signal helpers such as
    convolution live in :mod:`pyltifiltering._utils.signal` as free functions.

    Parameters
    ----------
    *vectors:
        Coefficient/signal vectors used to infer the numeric kind when
        ``dtype`` is None.
    dtype:
        Numeric kind of every coefficient and signal handled by the filter.

    Notes
    -----
    - Subclasses set ``inexact = True`` when their arithmetic divides, so an
      integer kind is promoted to float64.
    - The kind is fixed for the lifetime of the instance; vectors assigned
      later are cast to it.
    """

    inexact: bool = False

    def __init__(self, *vectors: Optional[ArrayLike], dtype: Optional[DTypeLike] = None) -> None:
        self._dtype: np.dtype = resolve_dtype(*vectors, dtype=dtype, inexact=self.inexact)

    @property
    def dtype(self) -> np.dtype:
        """Numeric kind of the filter."""
        return self._dtype

    def _vector(self, values: ArrayLike, name: str) -> np.ndarray:
        """Validated, non-empty 1D copy of ``values`` in the filter kind."""
        return as_vector(values, name, self._dtype, owner=self)

    @abstractmethod
    def filter_signal(self, input_signal: ArrayLike, **kwargs: Any) -> np.ndarray:
        """Filter an input signal with the current coefficients."""
        raise NotImplementedError
#EOF
