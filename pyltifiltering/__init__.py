# pyltifiltering/__init__.py

from .base import LTIFilter
from .exceptions import DomainError, FilterError, InvalidArgument
from .fir import FIR
from .iir import IIR, Stability
from ._utils.signal import (
    convolve,
    format_signal,
    next_power_of_two,
    resize_signal,
    sum_squares,
)

__version__ = "0.1.0"

__all__ = ["LTIFilter",
    "FIR", "IIR", "Stability",
    "FilterError", "InvalidArgument", "DomainError",
    "convolve", "sum_squares", "next_power_of_two", "resize_signal", "format_signal",
    "info"]


def info():
    """Prints an overview of the library contents."""
    print("\n" + "="*70)
    print("      PyLTI Filtering - Library Overview")
    print("="*70)
    sections = {
        "FIR": "FIR: direct linear convolution of a stored input with h",
        "IIR": "IIR: direct-form difference equation, a[0] normalization, stability heuristic",
        "Helpers": "convolve, sum_squares, next_power_of_two, resize_signal, format_signal",
        "Errors": "InvalidArgument, DomainError (both FilterError)",
    }
    for name, desc in sections.items():
        print(f"\n{name:10}: {desc}")

    print("\n" + "-"*70)
    print("Usage example: from pyltifiltering import IIR")
    print("Documentation: help(pyltifiltering.IIR)")
    print("="*70 + "\n")
