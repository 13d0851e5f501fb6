# pyltifiltering.exceptions.py
"""Exceptions raised by pyltifiltering."""


class FilterError(Exception):
    """Base exception for filter errors."""

    pass


class InvalidArgument(FilterError, ValueError):
    """Raised when an argument is rejected before any state is touched.

    This occurs when:
    - A coefficient or signal vector is empty
    - A signal is not one-dimensional
    - The output length ``L`` is negative or not an integer
    - A ``sum_squares`` index range falls outside the signal
    - The requested numeric kind (dtype) is not a number type
    """

    pass


class DomainError(FilterError, ArithmeticError):
    """Raised when the leading feedback coefficient ``a[0]`` is zero.

    Normalizing the denominator divides every coefficient by ``a[0]``.
    """

    pass


__all__ = ["FilterError", "InvalidArgument", "DomainError"]
