# pyltifiltering/_utils/signal.py
from __future__ import annotations

from typing import Optional

import numpy as np

from .typing import ArrayLike, DTypeLike
from pyltifiltering.exceptions import InvalidArgument

__all__ = [
    "convolve",
    "sum_squares",
    "next_power_of_two",
    "resize_signal",
    "format_signal",
]


def convolve(f: ArrayLike, g: ArrayLike) -> np.ndarray:
    """
    Linear (full) convolution of two sequences.

    .. math::
        S[i + j] = \\sum f[i]\\, g[j], \\qquad 0 \\le i < N,\\; 0 \\le j < M,

    so the result has ``N + M - 1`` samples. No normalization is applied and
    the output keeps the common numeric kind of both inputs (integer inputs
    give an exact integer result).

    If either sequence is empty the result is an empty array, instead of a
    negative-length buffer.
    """
    f = np.asarray(f).ravel()
    g = np.asarray(g).ravel()
    if f.size == 0 or g.size == 0:
        return np.zeros(0, dtype=np.result_type(f, g))
    return np.convolve(f, g, mode="full")


def sum_squares(y: ArrayLike, start: int, end: int) -> float:
    """Sum of |y[i]|^2 for i in [start, end)."""
    y = np.asarray(y).ravel()
    start = int(start)
    end = int(end)
    if start < 0 or end > y.size or start > end:
        raise InvalidArgument(
            f"Invalid range [{start}, {end}) for a signal of {y.size} samples."
        )
    seg = y[start:end]
    return float(np.sum(np.abs(seg) ** 2))


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 0)."""
    n = int(n)
    if n <= 0:
        return 1
    return 1 << (n - 1).bit_length()


def resize_signal(
    x: ArrayLike, length: int, dtype: Optional[DTypeLike] = None
) -> np.ndarray:
    """
    Return a copy of ``x`` resized to ``length`` samples.

    Missing samples are zero-padded at the end. The caller's array is never
    modified.
    """
    x = np.asarray(x).ravel()
    length = int(length)
    if length < 0:
        raise InvalidArgument(f"Cannot resize a signal to {length} samples.")
    out = np.zeros(length, dtype=x.dtype if dtype is None else dtype)
    n = min(length, x.size)
    out[:n] = x[:n]
    return out


def format_signal(values: ArrayLike) -> str:
    """Human-readable '[a, b, c]' rendering of a sequence."""
    return "[" + ", ".join(str(v) for v in np.asarray(values).ravel().tolist()) + "]"
