"""Positional codecs: one digit glyph per place value.

PositionalCodec covers every script whose digits occupy a contiguous
code point range starting at zero. DigitTableCodec covers scripts whose
digit glyphs are scattered (Han positional, Suzhou, Pitman duodecimal).
"""

from .codec import (
    Codec,
    base_digits,
    group_digits,
    separator_char,
    strip_sign,
    strip_tolerated,
)
from .errors import ErrorKind, NumeralError


class PositionalCodec(Codec):
    """Digit d is rendered as chr(base + d), for 0 <= d < radix."""

    def __init__(self, base: int, radix: int = 10):
        self.base = base
        self.radix = radix

    def __repr__(self):
        return f"{type(self).__name__}(base=0x{self.base:04X}, radix={self.radix})"

    def digit_glyph(self, d: int) -> str:
        return chr(self.base + d)

    def digit_value(self, ch: str) -> int | None:
        d = ord(ch) - self.base
        if 0 <= d < self.radix:
            return d
        return None

    def encode(self, number: int, separator: str | None = None) -> str:
        """Render digits most-significant first, grouped by the separator if given."""
        glyphs = [self.digit_glyph(d) for d in base_digits(abs(number), self.radix)]
        encoded = "".join(reversed(group_digits(glyphs, separator)))
        return "-" + encoded if number < 0 else encoded

    def decode(self, text: str, separator: str | None = None) -> int:
        """Parse an optional sign and digits, skipping the separator character."""
        rest, negative = strip_sign(text)
        sep = separator_char(separator)
        value = 0
        for ch in rest:
            if ch == sep:
                continue
            d = self.digit_value(ch)
            if d is None:
                raise NumeralError(ErrorKind.INVALID_DIGIT, repr(ch))
            value = value * self.radix + d
        return -value if negative else value

    def detect(self, text: str) -> bool:
        """True if every glyph after the sign and punctuation is a digit."""
        chars = strip_tolerated(text)
        return bool(chars) and all(self.digit_value(ch) is not None for ch in chars)


class VigesimalCodec(PositionalCodec):
    """Base-20 positional codec (Kaktovik, Mayan).

    An unsigned vigesimal system rejects negative numbers and accepts
    nothing but its own digits: no sign, no separator.
    """

    def __init__(self, base: int, signed: bool = True,
                 invalid: ErrorKind = ErrorKind.INVALID_DIGIT):
        super().__init__(base, radix=20)
        self.signed = signed
        self.invalid = invalid

    def encode(self, number: int, separator: str | None = None) -> str:
        if self.signed:
            return super().encode(number, separator)
        if number < 0:
            raise NumeralError(ErrorKind.NEGATIVE)
        return "".join(self.digit_glyph(d) for d in reversed(base_digits(number, 20)))

    def decode(self, text: str, separator: str | None = None) -> int:
        if self.signed:
            return super().decode(text, separator)
        value = 0
        for ch in text:
            d = self.digit_value(ch)
            if d is None:
                raise NumeralError(self.invalid, repr(ch))
            value = value * 20 + d
        return value

    def detect(self, text: str) -> bool:
        if self.signed:
            return super().detect(text)
        return bool(text) and all(self.digit_value(ch) is not None for ch in text)


class DigitTableCodec(PositionalCodec):
    """Positional codec over an explicit digit table.

    The radix is the table length. When marker_digits is given, detect
    only claims strings containing at least one of them, so that a table
    overlapping plain ASCII digits does not shadow Arabic.
    """

    def __init__(self, digits: str, marker_digits: str = ""):
        super().__init__(ord(digits[0]), radix=len(digits))
        self.digits = digits
        self.marker_digits = marker_digits
        self._index = {ch: i for i, ch in enumerate(digits)}

    def __repr__(self):
        return f"{type(self).__name__}({self.digits!r})"

    def digit_glyph(self, d: int) -> str:
        return self.digits[d]

    def digit_value(self, ch: str) -> int | None:
        return self._index.get(ch)

    def detect(self, text: str) -> bool:
        if not super().detect(text):
            return False
        if self.marker_digits:
            return any(ch in self.marker_digits for ch in text)
        return True
