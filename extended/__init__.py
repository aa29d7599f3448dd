"""Extended real numbers: primitive numeric kinds augmented with +inf and -inf."""

from extended.errors import (
    DivisionByZeroError,
    FiniteError,
    IndeterminateFormError,
    NotFiniteError,
    NotInfiniteError,
    UnsupportedKindError,
)
from extended.logger import xlogger
from extended.number import ExtendedNumber, Infinity, State

__all__ = [
    "DivisionByZeroError",
    "ExtendedNumber",
    "FiniteError",
    "IndeterminateFormError",
    "Infinity",
    "NotFiniteError",
    "NotInfiniteError",
    "State",
    "UnsupportedKindError",
    "xlogger",
]
