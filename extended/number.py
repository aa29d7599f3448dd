from __future__ import annotations

import operator
import re
from collections.abc import Callable
from contextlib import nullcontext
from enum import Enum
from functools import total_ordering
from typing import Any, Generic, TypeVar

import numpy as np

from extended import kinds
from extended.errors import (
    DivisionByZeroError,
    IndeterminateFormError,
    NotFiniteError,
    NotInfiniteError,
    UnsupportedKindError,
)

T = TypeVar("T")
S = TypeVar("S")

# Fill, alignment and width of a format spec; the rest only applies to numbers.
_FORMAT_LAYOUT = re.compile(r"^(?P<align>.?[<>=^])?[+\- ]?z?#?0?(?P<width>\d*)")


class Infinity(Enum):
    """Sentinel used to construct or assign positive and negative infinity."""

    POS = "+inf"
    NEG = "-inf"

    def __neg__(self) -> Infinity:
        return Infinity.NEG if self is Infinity.POS else Infinity.POS


class State(Enum):
    """Discriminant of an extended number; the value of an infinite state is its sign."""

    FINITE = 0
    POSITIVE_INFINITY = 1
    NEGATIVE_INFINITY = -1

    @property
    def sign(self) -> int:
        return self.value


_STATE_OF: dict[Infinity, State] = {
    Infinity.POS: State.POSITIVE_INFINITY,
    Infinity.NEG: State.NEGATIVE_INFINITY,
}


@total_ordering
class ExtendedNumber(Generic[T]):
    """Represents a number of a primitive kind that can also be positive or negative infinity.

    Arithmetic follows the conventions of measure theory: ``0 * inf == 0``, while
    indeterminate forms such as ``inf - inf`` raise ``FiniteError``.

    The in-place operators (``+=``, ``-=``, ...) together with ``increment``,
    ``decrement``, ``assign`` and ``parse`` mutate the receiver. Every other
    operation returns a new value, so binary operators never change their operands.

    .. note::
       ``increment`` and ``decrement`` touch the stored payload even while the value
       is infinite. This is invisible: state, ordering and text stay the same.
    """

    __slots__ = ("_kind", "_state", "_value")

    def __init__(
        self, value: T | Infinity | None = None, kind: type[T] | None = None
    ) -> None:
        if isinstance(value, Infinity):
            self._kind = kinds.check_kind(kind if kind is not None else int)
            self._state = _STATE_OF[value]
            self._value = kinds.zero(self._kind)
            return

        if value is None:
            self._kind = kinds.check_kind(kind if kind is not None else int)
            self._value = kinds.zero(self._kind)
        else:
            kinds.check_kind(type(value))
            self._kind = kinds.check_kind(kind if kind is not None else type(value))
            self._value = kinds.cast(value, self._kind)
        self._state = State.FINITE

    @classmethod
    def from_finite(cls, value: T, kind: type[T] | None = None) -> ExtendedNumber[T]:
        return cls(value, kind)

    @classmethod
    def from_infinity(cls, sign: Infinity, kind: type[T] = int) -> ExtendedNumber[T]:
        if not isinstance(sign, Infinity):
            raise TypeError(f"Expected an Infinity sentinel, got {sign!r}.")
        return cls(sign, kind)

    @classmethod
    def from_optional(
        cls,
        value: T | None,
        none_as: Infinity,
        kind: type[T] = int,
    ) -> ExtendedNumber[T]:
        return cls(value if value is not None else none_as, kind)

    @classmethod
    def from_text(cls, text: str, kind: type[T] = int) -> ExtendedNumber[T]:
        return cls(kind=kind).parse(text)

    @property
    def kind(self) -> type[T]:
        return self._kind

    @property
    def state(self) -> State:
        return self._state

    def is_finite(self) -> bool:
        return self._state is State.FINITE

    def value(self) -> T:
        if self._state is not State.FINITE:
            raise NotFiniteError("Finite error: This is infinite.")
        return self._value

    def infinity_sign(self) -> Infinity:
        if self._state is State.FINITE:
            raise NotInfiniteError("Finite error: This is finite.")
        return Infinity.POS if self._state is State.POSITIVE_INFINITY else Infinity.NEG

    def to_optional(self) -> T | None:
        return self._value if self.is_finite() else None

    def as_type(self, kind: type[S]) -> ExtendedNumber[S]:
        kind = kinds.check_kind(kind)
        if self.is_finite():
            return ExtendedNumber(kinds.cast(self._value, kind), kind)
        return ExtendedNumber(self.infinity_sign(), kind)

    def copy(self) -> ExtendedNumber[T]:
        duplicate = object.__new__(type(self))
        duplicate._kind = self._kind
        duplicate._state = self._state
        duplicate._value = self._value
        return duplicate

    def __copy__(self) -> ExtendedNumber[T]:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> ExtendedNumber[T]:
        return self.copy()

    def assign(self, value: T | Infinity) -> ExtendedNumber[T]:
        if isinstance(value, Infinity):
            self._state = _STATE_OF[value]
            return self

        if not kinds.is_payload(value):
            raise UnsupportedKindError(
                f"Cannot assign {value!r} to an extended {self._kind.__name__}."
            )
        self._value = kinds.cast(value, self._kind)
        self._state = State.FINITE
        return self

    def parse(self, text: str) -> ExtendedNumber[T]:
        """Read a finite value from ``text``, discarding the current state.

        There is no textual form for infinity: ``"+inf"`` is rejected even though
        it is what ``str`` renders for positive infinity.
        """
        self._value = kinds.parse(text, self._kind)
        self._state = State.FINITE
        return self

    # Operand coercion

    def _coerce(self, other: Any) -> ExtendedNumber[T] | None:
        if isinstance(other, ExtendedNumber):
            if other._kind is not self._kind:
                raise TypeError(
                    f"Cannot combine extended {self._kind.__name__} with extended "
                    f"{other._kind.__name__}; convert one with as_type()."
                )
            return other
        if isinstance(other, Infinity):
            return ExtendedNumber(other, self._kind)
        if kinds.is_payload(other) and isinstance(other, self._kind):
            return ExtendedNumber(other, self._kind)
        return None

    @staticmethod
    def _comparable(other: Any) -> ExtendedNumber[Any] | None:
        if isinstance(other, ExtendedNumber):
            return other
        if isinstance(other, Infinity):
            return ExtendedNumber(other)
        if kinds.is_payload(other):
            return ExtendedNumber(other)
        return None

    def _reflected(
        self,
        other: Any,
        operation: Callable[[ExtendedNumber[T], ExtendedNumber[T]], Any],
    ) -> Any:
        left = self._coerce(other)
        if left is None:
            return NotImplemented
        return operation(left.copy(), self)

    # Comparison

    def __eq__(self, other: object) -> bool:
        other = self._comparable(other)
        if other is None:
            return NotImplemented

        if self.is_finite() and other.is_finite():
            return bool(self._value == other._value)
        return self._state is other._state

    def __lt__(self, other: Any) -> bool:
        other = self._comparable(other)
        if other is None:
            return NotImplemented

        match self._state, other._state:
            case State.FINITE, State.FINITE:
                return bool(self._value < other._value)
            case State.FINITE, _:
                return other._state is State.POSITIVE_INFINITY
            case _, State.FINITE:
                return self._state is State.NEGATIVE_INFINITY
            case _:
                return (
                    self._state is State.NEGATIVE_INFINITY
                    and other._state is State.POSITIVE_INFINITY
                )

    # Unary operators

    def __pos__(self) -> ExtendedNumber[T]:
        return self.copy()

    def __neg__(self) -> ExtendedNumber[T]:
        if not kinds.is_signed(self._kind):
            raise UnsupportedKindError(
                f"Unary negation only works on signed kinds, got {self._kind.__name__}."
            )
        negated = self.copy()
        if self.is_finite():
            negated._value = kinds.cast(-self._value, self._kind)
        else:
            negated._state = State(-self._state.sign)
        return negated

    def __abs__(self) -> ExtendedNumber[T]:
        if self.is_finite():
            return ExtendedNumber(kinds.cast(abs(self._value), self._kind), self._kind)
        return ExtendedNumber(Infinity.POS, self._kind)

    def __bool__(self) -> bool:
        if not self.is_finite():
            return True
        return bool(self._value != kinds.zero(self._kind))

    def __int__(self) -> int:
        return int(self.value())

    def __float__(self) -> float:
        return float(self.value())

    def _step(self, operation: Callable[[Any, Any], Any]) -> ExtendedNumber[T]:
        # The payload behind an infinity is hidden, so it wraps silently.
        quiet = np.errstate(over="ignore") if not self.is_finite() else nullcontext()
        with quiet:
            self._value = kinds.cast(
                operation(self._value, kinds.one(self._kind)), self._kind
            )
        return self

    def increment(self) -> ExtendedNumber[T]:
        return self._step(operator.add)

    def decrement(self) -> ExtendedNumber[T]:
        return self._step(operator.sub)

    def post_increment(self) -> ExtendedNumber[T]:
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> ExtendedNumber[T]:
        previous = self.copy()
        self.decrement()
        return previous

    # Additive arithmetic

    def __iadd__(self, other: Any) -> ExtendedNumber[T]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        match self._state, other._state:
            case State.FINITE, State.FINITE:
                self._value = kinds.cast(self._value + other._value, self._kind)
            case State.FINITE, _:
                self._state = other._state
            case State.POSITIVE_INFINITY, State.NEGATIVE_INFINITY:
                raise IndeterminateFormError("Indeterminate form: +inf + -inf")
            case State.NEGATIVE_INFINITY, State.POSITIVE_INFINITY:
                raise IndeterminateFormError("Indeterminate form: -inf + +inf")
        return self

    def __isub__(self, other: Any) -> ExtendedNumber[T]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        match self._state, other._state:
            case State.FINITE, State.FINITE:
                self._value = kinds.cast(self._value - other._value, self._kind)
            case State.FINITE, _:
                self._state = State(-other._state.sign)
            case State.POSITIVE_INFINITY, State.POSITIVE_INFINITY:
                raise IndeterminateFormError("Indeterminate form: +inf - +inf")
            case State.NEGATIVE_INFINITY, State.NEGATIVE_INFINITY:
                raise IndeterminateFormError("Indeterminate form: -inf - -inf")
        return self

    # Multiplicative arithmetic

    def __imul__(self, other: Any) -> ExtendedNumber[T]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        match self._state, other._state:
            case State.FINITE, State.FINITE:
                self._value = kinds.cast(self._value * other._value, self._kind)
            case State.FINITE, _:
                # A finite zero absorbs infinity.
                finite_sign = kinds.sign(self._value)
                if finite_sign:
                    self._state = State(finite_sign * other._state.sign)
            case _, State.FINITE:
                finite_sign = kinds.sign(other._value)
                if finite_sign:
                    self._state = State(finite_sign * self._state.sign)
                else:
                    self._value = kinds.zero(self._kind)
                    self._state = State.FINITE
            case _:
                self._state = State(self._state.sign * other._state.sign)
        return self

    def __itruediv__(self, other: Any) -> ExtendedNumber[T]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        match self._state, other._state:
            case State.FINITE, State.FINITE:
                if kinds.sign(other._value) == 0:
                    raise DivisionByZeroError(f"Indeterminate form: {self} / 0")
                self._value = kinds.divide(self._value, other._value, self._kind)
            case State.FINITE, _:
                self._value = kinds.zero(self._kind)
            case _, State.FINITE:
                divisor_sign = kinds.sign(other._value)
                if divisor_sign == 0:
                    raise DivisionByZeroError(f"Indeterminate form: {self} / 0")
                self._state = State(divisor_sign * self._state.sign)
            case _:
                raise IndeterminateFormError(f"{self} / {other} indeterminate form.")
        return self

    def __imod__(self, other: Any) -> ExtendedNumber[T]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        if not (self.is_finite() and other.is_finite()):
            raise NotFiniteError(
                "Finite error: modular arithmetic requires finite values."
            )
        if kinds.sign(other._value) == 0:
            raise DivisionByZeroError(f"Indeterminate form: {self} % 0")
        self._value = kinds.cast(self._value % other._value, self._kind)
        return self

    # Bitwise operators

    def _check_bitwise(self, other: ExtendedNumber[T] | None, name: str) -> None:
        if not kinds.is_integral(self._kind):
            raise UnsupportedKindError(
                f"Bitwise {name} requires an integral kind, got {self._kind.__name__}."
            )
        if not (self.is_finite() and (other is None or other.is_finite())):
            raise NotFiniteError(f"Finite error: bitwise {name} requires finite values.")

    def __invert__(self) -> ExtendedNumber[T]:
        self._check_bitwise(None, "not")
        return ExtendedNumber(kinds.cast(~self._value, self._kind), self._kind)

    def __iand__(self, other: Any) -> ExtendedNumber[T]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        self._check_bitwise(other, "and")
        self._value = kinds.cast(self._value & other._value, self._kind)
        return self

    def __ior__(self, other: Any) -> ExtendedNumber[T]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        self._check_bitwise(other, "or")
        self._value = kinds.cast(self._value | other._value, self._kind)
        return self

    def __ixor__(self, other: Any) -> ExtendedNumber[T]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        self._check_bitwise(other, "xor")
        self._value = kinds.cast(self._value ^ other._value, self._kind)
        return self

    def __ilshift__(self, other: Any) -> ExtendedNumber[T]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        self._check_bitwise(other, "leftshift")
        self._value = kinds.cast(self._value << other._value, self._kind)
        return self

    def __irshift__(self, other: Any) -> ExtendedNumber[T]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        self._check_bitwise(other, "rightshift")
        self._value = kinds.cast(self._value >> other._value, self._kind)
        return self

    # Binary forms apply the in-place operator to a copy of the left operand.

    def __add__(self, other: Any) -> ExtendedNumber[T]:
        return self.copy().__iadd__(other)

    def __radd__(self, other: Any) -> ExtendedNumber[T]:
        return self._reflected(other, ExtendedNumber.__iadd__)

    def __sub__(self, other: Any) -> ExtendedNumber[T]:
        return self.copy().__isub__(other)

    def __rsub__(self, other: Any) -> ExtendedNumber[T]:
        return self._reflected(other, ExtendedNumber.__isub__)

    def __mul__(self, other: Any) -> ExtendedNumber[T]:
        return self.copy().__imul__(other)

    def __rmul__(self, other: Any) -> ExtendedNumber[T]:
        return self._reflected(other, ExtendedNumber.__imul__)

    def __truediv__(self, other: Any) -> ExtendedNumber[T]:
        return self.copy().__itruediv__(other)

    def __rtruediv__(self, other: Any) -> ExtendedNumber[T]:
        return self._reflected(other, ExtendedNumber.__itruediv__)

    def __mod__(self, other: Any) -> ExtendedNumber[T]:
        return self.copy().__imod__(other)

    def __rmod__(self, other: Any) -> ExtendedNumber[T]:
        return self._reflected(other, ExtendedNumber.__imod__)

    def __and__(self, other: Any) -> ExtendedNumber[T]:
        return self.copy().__iand__(other)

    def __rand__(self, other: Any) -> ExtendedNumber[T]:
        return self._reflected(other, ExtendedNumber.__iand__)

    def __or__(self, other: Any) -> ExtendedNumber[T]:
        return self.copy().__ior__(other)

    def __ror__(self, other: Any) -> ExtendedNumber[T]:
        return self._reflected(other, ExtendedNumber.__ior__)

    def __xor__(self, other: Any) -> ExtendedNumber[T]:
        return self.copy().__ixor__(other)

    def __rxor__(self, other: Any) -> ExtendedNumber[T]:
        return self._reflected(other, ExtendedNumber.__ixor__)

    def __lshift__(self, other: Any) -> ExtendedNumber[T]:
        return self.copy().__ilshift__(other)

    def __rlshift__(self, other: Any) -> ExtendedNumber[T]:
        return self._reflected(other, ExtendedNumber.__ilshift__)

    def __rshift__(self, other: Any) -> ExtendedNumber[T]:
        return self.copy().__irshift__(other)

    def __rrshift__(self, other: Any) -> ExtendedNumber[T]:
        return self._reflected(other, ExtendedNumber.__irshift__)

    # Text

    def __repr__(self) -> str:
        if self.is_finite():
            return f"ExtendedNumber({self._value!r})"
        return f"ExtendedNumber({self.infinity_sign()}, kind={self._kind.__name__})"

    def __str__(self) -> str:
        if self.is_finite():
            return str(self._value)
        return self.infinity_sign().value

    def __format__(self, format_spec: str) -> str:
        if self.is_finite():
            return format(self._value, format_spec)

        layout = _FORMAT_LAYOUT.match(format_spec)
        align = (layout.group("align") or ">").replace("=", ">")
        return format(str(self), f"{align}{layout.group('width')}")
