"""Primitive numeric kinds that can carry the payload of an extended number.

A kind is the class of the payload. Python's own ``int`` and ``float``,
``Fraction`` and ``Decimal`` are accepted, as are numpy's fixed-width scalar
types, which bring wrapping and unsigned arithmetic with them.
"""

from __future__ import annotations

import decimal
import math
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Any

import numpy as np

from extended.errors import UnsupportedKindError

KIND_NAMES: dict[str, type] = {
    "int": int,
    "float": float,
    "int8": np.int8,
    "int16": np.int16,
    "int32": np.int32,
    "int64": np.int64,
    "uint8": np.uint8,
    "uint16": np.uint16,
    "uint32": np.uint32,
    "uint64": np.uint64,
    "float16": np.float16,
    "float32": np.float32,
    "float64": np.float64,
}


def is_payload(value: Any) -> bool:
    """Whether ``value`` is a bare number usable as a payload."""
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(
        value, (bool, np.bool_)
    )


def check_kind(kind: Any) -> type:
    if not isinstance(kind, type):
        raise UnsupportedKindError(f"Extended kind must be a type, got {kind!r}.")
    if issubclass(kind, (bool, np.bool_)):
        raise UnsupportedKindError("Extended kind cannot be bool.")
    if not issubclass(kind, (numbers.Real, Decimal)):
        raise UnsupportedKindError(
            f"Extended kind must be a real numeric type, got {kind.__name__}."
        )
    return kind


def kind_by_name(name: str) -> type:
    try:
        return KIND_NAMES[name]
    except KeyError:
        raise UnsupportedKindError(f"Unknown extended kind name {name!r}.") from None


def is_signed(kind: type) -> bool:
    return not issubclass(kind, np.unsignedinteger)


def is_integral(kind: type) -> bool:
    return issubclass(kind, numbers.Integral)


def cast(value: Any, kind: type) -> Any:
    """Convert ``value`` to ``kind`` following the kind's own casting rules.

    numpy kinds wrap out-of-range integers the way a C cast does, Python kinds
    truncate floats towards zero. No range checking is performed.
    """
    if type(value) is kind:
        return value
    if issubclass(kind, np.generic):
        if issubclass(kind, np.integer) and isinstance(value, int):
            # Reduce into the kind's width first; numpy refuses ints past 64 bits.
            value %= 2 ** (8 * np.dtype(kind).itemsize)
        return np.asarray(value).astype(kind)[()]
    if isinstance(value, np.generic):
        value = value.item()
    if kind is Decimal and isinstance(value, Fraction):
        return Decimal(value.numerator) / Decimal(value.denominator)
    return kind(value)


def zero(kind: type) -> Any:
    return cast(0, kind)


def one(kind: type) -> Any:
    return cast(1, kind)


def sign(value: Any) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def divide(dividend: Any, divisor: Any, kind: type) -> Any:
    # Integral kinds keep their own integer division so the quotient stays in the kind.
    if is_integral(kind):
        return cast(dividend // divisor, kind)
    return cast(dividend / divisor, kind)


def is_finite_payload(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, (float, np.floating)):
        return math.isfinite(value)
    return True


def parse(text: str, kind: type) -> Any:
    """Read a finite payload of ``kind`` from ``text``.

    Raises:
        ValueError: If the text is not a numeral of the kind, or names a
            non-finite number such as ``inf`` or ``nan``.
    """
    stripped = text.strip()
    try:
        value = kind(stripped)
    except (ValueError, TypeError, OverflowError, decimal.InvalidOperation) as error:
        raise ValueError(
            f"Cannot read {text!r} as {kind.__name__}: {error}"
        ) from error

    if not is_finite_payload(value):
        raise ValueError(f"Cannot read a finite {kind.__name__} from {text!r}.")
    return value
