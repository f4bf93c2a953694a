"""Codec contract shared by every numeral system.

A codec is a stateless object with three operations:

    encode(number, separator=None) -> str
    decode(text, separator=None)   -> int
    detect(text)                   -> bool

encode and decode raise NumeralError for values or strings outside the
system. detect never raises and is False for the empty string.
"""

from abc import ABC, abstractmethod

# Punctuation ignored by positional detection so that grouped numbers
# ("1,234,567") are still claimed without knowing the separator.
TOLERATED_SEPARATORS = ",. "

SIGNS = "+-"


class Codec(ABC):
    """Encoder/decoder/detector for exactly one numeral system."""

    @abstractmethod
    def encode(self, number: int, separator: str | None = None) -> str:
        ...

    @abstractmethod
    def decode(self, text: str, separator: str | None = None) -> int:
        ...

    @abstractmethod
    def detect(self, text: str) -> bool:
        ...


def separator_char(separator: str | None) -> str | None:
    """Return the single grouping character for a separator option."""
    if not separator:
        return None
    return separator[0]


def strip_sign(text: str) -> tuple[str, bool]:
    """Drop one leading '+' or '-'. Returns (rest, negative)."""
    if text and text[0] in SIGNS:
        return text[1:], text[0] == "-"
    return text, False


def strip_tolerated(text: str) -> str:
    """Remove sign and tolerated punctuation before glyph-set membership tests."""
    rest, _ = strip_sign(text)
    return "".join(ch for ch in rest if ch not in TOLERATED_SEPARATORS)


def group_digits(digits: list[str], separator: str | None) -> list[str]:
    """Insert a separator every 3 digits counting from the right.

    digits is least-significant first; the result keeps that order.
    """
    sep = separator_char(separator)
    if sep is None:
        return list(digits)
    grouped = []
    for i, d in enumerate(digits):
        if i and i % 3 == 0:
            grouped.append(sep)
        grouped.append(d)
    return grouped


def base_digits(value: int, radix: int) -> list[int]:
    """Digits of a non-negative value in the given radix, least-significant first."""
    if value == 0:
        return [0]
    digits = []
    while value:
        value, d = divmod(value, radix)
        digits.append(d)
    return digits
