"""Chinese-family numeral systems.

Han            myriad-grouped multiplicative-additive numerals (一万二千...)
Han positional one Han digit per decimal place (二〇二六)
Suzhou         huama digits, positional
Counting rods  positional, vertical and horizontal forms alternate by place
"""

from ..core.codec import Codec, base_digits, strip_sign
from ..core.errors import ErrorKind, NumeralError
from ..core.positional import DigitTableCodec

HAN_DIGITS = "零一二三四五六七八九"
HAN_ZERO = "零"
HAN_CIRCLE_ZERO = "〇"
HAN_NEGATIVE = "负"

# Unit within a myriad group, by decimal place
HAN_UNITS = ("", "十", "百", "千")

# Section glyph for each power of 10,000
HAN_SECTIONS = ("", "万", "亿", "兆", "京", "垓", "秭", "穰", "沟", "涧", "正", "载")

HAN_GLYPHS = frozenset(
    HAN_DIGITS + HAN_CIRCLE_ZERO + HAN_NEGATIVE + "".join(HAN_UNITS + HAN_SECTIONS)
)


def _han_group(group: int) -> str:
    """Render 1-9999 with units, one 零 standing for each run of inner zeros."""
    digits = list(reversed(base_digits(group, 10)))
    out = []
    zero_pending = False
    for i, d in enumerate(digits):
        if d == 0:
            zero_pending = True
            continue
        if zero_pending:
            out.append(HAN_ZERO)
            zero_pending = False
        out.append(HAN_DIGITS[d] + HAN_UNITS[len(digits) - i - 1])
    return "".join(out)


class HanCodec(Codec):
    """Han hybrid numerals.

    Decoding only covers zero and negative zero; the full multiplicative
    grammar is not parsed and reports NOT_IMPLEMENTED.
    """

    def encode(self, number: int, separator: str | None = None) -> str:
        if number == 0:
            return HAN_ZERO
        if number < 0:
            return HAN_NEGATIVE + self.encode(-number)

        groups = base_digits(number, 10_000)
        if len(groups) > len(HAN_SECTIONS):
            raise NumeralError(ErrorKind.OUT_OF_RANGE, "no section glyph")

        out = ""
        zero_needed = False
        for idx in reversed(range(len(groups))):
            if groups[idx] == 0:
                zero_needed = True
                continue
            if zero_needed and out:
                out += HAN_ZERO
            out += _han_group(groups[idx]) + HAN_SECTIONS[idx]
            zero_needed = False

        if out.startswith("一十"):
            out = out[1:]
        return out

    def decode(self, text: str, separator: str | None = None) -> int:
        if text.startswith(HAN_NEGATIVE):
            return -self._decode_unsigned(text[1:])
        return self._decode_unsigned(text)

    def _decode_unsigned(self, text: str) -> int:
        if not text:
            raise NumeralError(ErrorKind.INVALID_HAN_NUMERAL, "empty")
        if text in (HAN_ZERO, HAN_CIRCLE_ZERO):
            return 0
        raise NumeralError(ErrorKind.NOT_IMPLEMENTED, "hybrid Han decoding")

    def detect(self, text: str) -> bool:
        return bool(text) and all(ch in HAN_GLYPHS for ch in text)


def han_positional_codec() -> DigitTableCodec:
    return DigitTableCodec(HAN_CIRCLE_ZERO + HAN_DIGITS[1:])


def suzhou_codec() -> DigitTableCodec:
    # 〇 then 〡 .. 〩
    return DigitTableCodec(HAN_CIRCLE_ZERO + "".join(chr(cp) for cp in range(0x3021, 0x302A)))


ROD_UNITS = 0x1D360   # vertical forms, even powers of ten
ROD_TENS = 0x1D369    # horizontal forms, odd powers of ten


def _rod_value(ch: str) -> int | None:
    if ch == HAN_CIRCLE_ZERO:
        return 0
    cp = ord(ch)
    if ROD_UNITS <= cp < ROD_UNITS + 9:
        return cp - ROD_UNITS + 1
    if ROD_TENS <= cp < ROD_TENS + 9:
        return cp - ROD_TENS + 1
    return None


class RodCodec(Codec):
    """Counting rod numerals with 〇 for an empty place."""

    def encode(self, number: int, separator: str | None = None) -> str:
        glyphs = []
        for place, d in enumerate(base_digits(abs(number), 10)):
            if d == 0:
                glyphs.append(HAN_CIRCLE_ZERO)
            else:
                base = ROD_UNITS if place % 2 == 0 else ROD_TENS
                glyphs.append(chr(base + d - 1))
        encoded = "".join(reversed(glyphs))
        return "-" + encoded if number < 0 else encoded

    def decode(self, text: str, separator: str | None = None) -> int:
        rest, negative = strip_sign(text)
        value = 0
        for ch in rest:
            d = _rod_value(ch)
            if d is None:
                raise NumeralError(ErrorKind.INVALID_DIGIT, repr(ch))
            value = value * 10 + d
        return -value if negative else value

    def detect(self, text: str) -> bool:
        rest, _ = strip_sign(text)
        return bool(rest) and all(_rod_value(ch) is not None for ch in rest)
