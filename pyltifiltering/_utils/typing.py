# ._utils.typing.py
from __future__ import annotations
from typing import Union, Sequence
import numpy as np
from numpy.typing import DTypeLike

ArrayLike = Union[np.ndarray, Sequence[Union[int, float, complex]]]

__all__ = ["ArrayLike", "DTypeLike"]
