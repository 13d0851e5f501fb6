# ._utils.validation.py

from __future__ import annotations

from functools import wraps
from numbers import Integral
from typing import Any, Callable, Optional, Tuple

import numpy as np

from .typing import ArrayLike, DTypeLike
from pyltifiltering.exceptions import InvalidArgument


def _owner_name(owner: Any) -> str:
    if owner is None:
        return "filter"
    if isinstance(owner, str):
        return owner
    return owner.__class__.__name__


def resolve_dtype(
    *vectors: ArrayLike, dtype: Optional[DTypeLike] = None, inexact: bool = False
) -> np.dtype:
    """Numeric kind for a filter.

    If ``dtype`` is None, it is inferred from the given vectors and is at least
    float64: an integer kind is kept only when requested explicitly. With
    ``inexact=True`` an explicit integer kind is promoted to float64 too
    (division is needed).

    Raises
    ------
    InvalidArgument:
        If the kind is not a number type (booleans and objects included), or
        the vectors have no common kind.
    """
    if dtype is None:
        try:
            arrays = [np.asarray(v) for v in vectors if v is not None]
            dt = np.result_type(np.float64, *arrays)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"Vectors have no common numeric kind: {exc}") from exc
    else:
        try:
            dt = np.dtype(dtype)
        except TypeError as exc:
            raise InvalidArgument(f"Unknown numeric kind: {dtype!r}.") from exc

    if not np.issubdtype(dt, np.number):
        raise InvalidArgument(f"Numeric kind must be a number type. Got {dt}.")

    if inexact and not np.issubdtype(dt, np.inexact):
        dt = np.result_type(dt, np.float64)
    return dt


def as_vector(
    values: ArrayLike,
    name: str,
    dtype: DTypeLike,
    owner: Any = None,
    allow_empty: bool = False,
) -> np.ndarray:
    """Copy ``values`` into a 1D array of the filter numeric kind.

    Raises
    ------
    InvalidArgument:
        If the vector is empty (unless ``allow_empty``), not 1D, or does not
        fit ``dtype`` (complex into real, float into integer).
    """
    who = _owner_name(owner)
    if values is None:
        raise InvalidArgument(f"{who}: vector '{name}' is required.")

    try:
        arr = np.array(values, copy=True)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{who}: vector '{name}' is not a numeric sequence.") from exc
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise InvalidArgument(
            f"{who}: vector '{name}' must be one-dimensional. Got shape={arr.shape}."
        )
    if arr.size == 0:
        if not allow_empty:
            raise InvalidArgument(f"{who}: vector '{name}' cannot be empty.")
        return np.zeros(0, dtype=dtype)
    if not (np.issubdtype(arr.dtype, np.number) or arr.dtype == bool):
        raise InvalidArgument(
            f"{who}: vector '{name}' must hold numbers. Got dtype={arr.dtype}."
        )
    # complex -> real and float -> int would silently drop information
    if not np.can_cast(arr.dtype, dtype, casting="same_kind"):
        raise InvalidArgument(
            f"{who}: vector '{name}' of kind {arr.dtype} does not fit a {np.dtype(dtype)} filter."
        )
    return arr.astype(dtype, copy=False)


def check_length(value: Any, name: str = "L", owner: Any = None) -> int:
    """Validate a non-negative integer length."""
    who = _owner_name(owner)
    if isinstance(value, bool) or not isinstance(value, (Integral, np.integer)):
        raise InvalidArgument(f"{who}: '{name}' must be an integer. Got {value!r}.")
    value = int(value)
    if value < 0:
        raise InvalidArgument(f"{who}: '{name}' cannot be less than zero. Got {value}.")
    return value


def _extract_signal(args: tuple, kwargs: dict) -> Tuple[Optional[Any], str]:
    """Extract the input signal from args/kwargs.

    Supported:
      - positional: (x, ...)
      - named: input_signal
      - named legacy: x
    """
    if "input_signal" in kwargs:
        return kwargs["input_signal"], "input_signal"
    if "x" in kwargs:
        return kwargs["x"], "x"
    if len(args) >= 1:
        return args[0], ""
    return None, ""


def ensure_1d_signal(
    func: Optional[Callable[..., Any]] = None, *, allow_empty: bool = False
) -> Callable[..., Any]:
    """Validate and convert the input signal of a filtering method.

    Works for all calling conventions:
      filter_signal(input_signal=...)
      filter_signal(x=...)
      filter_signal(x)

    Use as ``@ensure_1d_signal`` or ``@ensure_1d_signal(allow_empty=True)``;
    the latter lets an empty signal through as an empty array.

    The signal is copied into a 1D array of the filter numeric kind
    (``self.dtype``), so the caller's data is never aliased.

    Raises
    ------
    InvalidArgument:
        If the signal is missing, not one-dimensional, or empty while
        ``allow_empty`` is False.
    """
    if func is None:
        return lambda f: ensure_1d_signal(f, allow_empty=allow_empty)

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        x, key = _extract_signal(args, kwargs)

        if x is None:
            raise InvalidArgument(
                f"{self.__class__.__name__}: missing input signal (input_signal/x)."
            )

        arr = as_vector(x, "x", self.dtype, owner=self, allow_empty=allow_empty)

        if key:
            kwargs.pop(key)
        else:
            args = args[1:]
        return func(self, arr, *args, **kwargs)

    return wrapper


__all__ = ["resolve_dtype", "as_vector", "check_length", "ensure_1d_signal"]
#EOF
