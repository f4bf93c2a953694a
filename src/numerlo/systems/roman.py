"""Roman numerals: additive notation with subtractive pairs.

Standard form covers 1-3999. The mapping is ordered by descending value,
subtractive pairs interleaved, so one greedy pass produces the shortest
standard numeral.
"""

from ..core.codec import Codec
from ..core.errors import ErrorKind, NumeralError

MAX_ROMAN = 3999

ROMAN_MAPPING = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

ROMAN_SYMBOLS = frozenset("IVXLCDM")

# Decode lookup: two-character pairs are tried before single symbols
_PAIRS = {symbol: value for value, symbol in ROMAN_MAPPING if len(symbol) == 2}
_SINGLES = {symbol: value for value, symbol in ROMAN_MAPPING if len(symbol) == 1}


class RomanCodec(Codec):
    """Roman numerals in standard form, 1 to 3999."""

    def encode(self, number: int, separator: str | None = None) -> str:
        """Greedy encode; the separator is ignored."""
        if number > MAX_ROMAN:
            raise NumeralError(ErrorKind.OUT_OF_RANGE, f"{number} > {MAX_ROMAN}")
        if number < 1:
            raise NumeralError(ErrorKind.NOT_POSITIVE)
        parts = []
        for value, symbol in ROMAN_MAPPING:
            count, number = divmod(number, value)
            parts.append(symbol * count)
        return "".join(parts)

    def decode(self, text: str, separator: str | None = None) -> int:
        """Sum pairs and single symbols; additive spellings like IIII are accepted."""
        total = 0
        i = 0
        while i < len(text):
            pair = text[i:i + 2]
            if pair in _PAIRS:
                total += _PAIRS[pair]
                i += 2
            elif text[i] in _SINGLES:
                total += _SINGLES[text[i]]
                i += 1
            else:
                raise NumeralError(ErrorKind.INVALID_ROMAN_NUMERAL, repr(text[i:]))
        return total

    def detect(self, text: str) -> bool:
        return bool(text) and all(ch in ROMAN_SYMBOLS for ch in text)
