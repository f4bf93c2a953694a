"""Error kinds and the tagged conversion result.

Codecs raise NumeralError; the conversion layer turns it into a
Result so that nothing raises across the public boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    UNKNOWN_SYSTEM = "unknown_system"
    NOT_POSITIVE = "not_positive"
    NEGATIVE = "negative"
    OUT_OF_RANGE = "out_of_range"
    INVALID_DIGIT = "invalid_digit"
    INVALID_ROMAN_NUMERAL = "invalid_roman_numeral"
    INVALID_AEGEAN_NUMERAL = "invalid_aegean_numeral"
    INVALID_ATTIC_NUMERAL = "invalid_attic_numeral"
    INVALID_MAYAN_NUMERAL = "invalid_mayan_numeral"
    INVALID_ETHIOPIC_NUMERAL = "invalid_ethiopic_numeral"
    INVALID_CUNEIFORM_NUMERAL = "invalid_cuneiform_numeral"
    INVALID_HAN_NUMERAL = "invalid_han_numeral"
    NOT_IMPLEMENTED = "not_implemented"
    INVALID_INPUT = "invalid_input"


class NumeralError(ValueError):
    """Raised by a codec when a value or string is outside its system."""

    def __init__(self, kind: ErrorKind, detail: str | None = None):
        self.kind = kind
        message = kind.value if detail is None else f"{kind.value}: {detail}"
        super().__init__(message)


@dataclass(frozen=True)
class Result:
    """Outcome of a conversion: a value or an error kind, never both."""
    value: Any = None
    error: ErrorKind | None = None

    @classmethod
    def success(cls, value) -> Result:
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind) -> Result:
        return cls(error=kind)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self):
        """Return the value, raising NumeralError for a failed result."""
        if self.error is not None:
            raise NumeralError(self.error)
        return self.value
