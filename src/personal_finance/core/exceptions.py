"""Custom exceptions for the personal finance calculators."""

from typing import Optional


class PersonalFinanceError(Exception):
    """Base exception."""
    pass


class InvalidInputError(PersonalFinanceError, ValueError):
    """An argument falls outside the domain a calculator is defined on.

    Raised instead of letting a formula produce Infinity/NaN: zero
    denominators, growth rates at or below -100%, negative durations.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ConfigError(PersonalFinanceError):
    pass
