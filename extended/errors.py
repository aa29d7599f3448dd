"""This module defines the errors raised by extended number operations."""

import logging


class FiniteError(ArithmeticError):
    message = "An operation was applied against its finiteness precondition."
    log_level = logging.ERROR

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class NotFiniteError(FiniteError):
    message = "Finite error: this value is infinite."
    log_level = logging.ERROR


class NotInfiniteError(FiniteError):
    message = "Finite error: this value is finite."
    log_level = logging.ERROR


class IndeterminateFormError(FiniteError):
    message = "Indeterminate form."
    log_level = logging.WARNING


class DivisionByZeroError(FiniteError):
    message = "Indeterminate form: division by zero."
    log_level = logging.WARNING


class UnsupportedKindError(FiniteError):
    message = "Extended kind must be a non-bool real numeric type."
    log_level = logging.ERROR
