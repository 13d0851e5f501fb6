#  iir.__init__.py

from .iir import IIR, Stability

__all__ = ["IIR", "Stability"]
