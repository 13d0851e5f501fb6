# ._utils.__init__.py

from .signal import (
    convolve,
    format_signal,
    next_power_of_two,
    resize_signal,
    sum_squares,
)

__all__ = [
    "convolve",
    "sum_squares",
    "next_power_of_two",
    "resize_signal",
    "format_signal",
]
