#  fir.__init__.py

from .fir import FIR

__all__ = ["FIR"]
