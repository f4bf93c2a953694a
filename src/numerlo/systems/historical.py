"""Historical additive and hierarchical numeral systems.

Aegean     tally-additive: one glyph per (power of ten, count 1-9)
Attic      acrophonic-additive: glyphs repeated, summed in any order
Ethiopic   hierarchical: tens/ones groups closed by x100 and x10000 glyphs
Cuneiform  sexagesimal positional, each place written additively

Mayan is positional and lives in core.positional as a VigesimalCodec.
"""

from ..core.codec import Codec, base_digits
from ..core.errors import ErrorKind, NumeralError


# ------------------------------------------------------------------
# Aegean
# ------------------------------------------------------------------

# (magnitude, code point for a count of 1); counts 2-9 follow consecutively
AEGEAN_MAPPING = (
    (10_000, 0x1012B),
    (1000, 0x10122),
    (100, 0x10119),
    (10, 0x10110),
    (1, 0x10107),
)

AEGEAN_MAX = 99_999


def _aegean_value(ch: str) -> int | None:
    cp = ord(ch)
    for magnitude, base in AEGEAN_MAPPING:
        if base <= cp < base + 9:
            return (cp - base + 1) * magnitude
    return None


class AegeanCodec(Codec):
    """Aegean numerals, 1 to 99,999."""

    def encode(self, number: int, separator: str | None = None) -> str:
        if number < 1:
            raise NumeralError(ErrorKind.NOT_POSITIVE)
        if number > AEGEAN_MAX:
            raise NumeralError(ErrorKind.OUT_OF_RANGE, f"{number} > {AEGEAN_MAX}")
        glyphs = []
        for magnitude, base in AEGEAN_MAPPING:
            count, number = divmod(number, magnitude)
            if count:
                glyphs.append(chr(base + count - 1))
        return "".join(glyphs)

    def decode(self, text: str, separator: str | None = None) -> int:
        total = 0
        for ch in text:
            value = _aegean_value(ch)
            if value is None:
                raise NumeralError(ErrorKind.INVALID_AEGEAN_NUMERAL, repr(ch))
            total += value
        return total

    def detect(self, text: str) -> bool:
        return bool(text) and all(_aegean_value(ch) is not None for ch in text)


# ------------------------------------------------------------------
# Attic
# ------------------------------------------------------------------

ATTIC_MAPPING = (
    (50_000, "\U00010147"),
    (10_000, "Μ"),
    (5000, "\U00010146"),
    (1000, "Χ"),
    (500, "\U00010145"),
    (100, "Η"),
    (50, "\U00010144"),
    (10, "Δ"),
    (5, "\U00010143"),
    (1, "Ι"),
)

_ATTIC_VALUES = {glyph: value for value, glyph in ATTIC_MAPPING}


class AtticCodec(Codec):
    """Attic acrophonic numerals; positive values only."""

    def encode(self, number: int, separator: str | None = None) -> str:
        if number < 1:
            raise NumeralError(ErrorKind.NOT_POSITIVE)
        parts = []
        for value, glyph in ATTIC_MAPPING:
            count, number = divmod(number, value)
            parts.append(glyph * count)
        return "".join(parts)

    def decode(self, text: str, separator: str | None = None) -> int:
        total = 0
        for ch in text:
            if ch not in _ATTIC_VALUES:
                raise NumeralError(ErrorKind.INVALID_ATTIC_NUMERAL, repr(ch))
            total += _ATTIC_VALUES[ch]
        return total

    def detect(self, text: str) -> bool:
        return bool(text) and all(ch in _ATTIC_VALUES for ch in text)


# ------------------------------------------------------------------
# Ethiopic
# ------------------------------------------------------------------

ETHIOPIC_ONE = 0x1369      # ፩ .. ፱ = 1..9
ETHIOPIC_TEN = 0x1372      # ፲ .. ፺ = 10..90
ETHIOPIC_HUNDRED = "\u137b"
ETHIOPIC_MYRIAD = "\u137c"

# A third myriad closer would compound onto the previous ones on decode
ETHIOPIC_MAX = 10_000 ** 2 - 1


def _ethiopic_small(n: int) -> str:
    """Render 1-99 as an optional tens glyph and an optional ones glyph."""
    tens, ones = divmod(n, 10)
    out = ""
    if tens:
        out += chr(ETHIOPIC_TEN + tens - 1)
    if ones:
        out += chr(ETHIOPIC_ONE + ones - 1)
    return out


def _ethiopic(n: int) -> str:
    for magnitude, closer in ((10_000, ETHIOPIC_MYRIAD), (100, ETHIOPIC_HUNDRED)):
        if n >= magnitude:
            q, r = divmod(n, magnitude)
            prefix = "" if q == 1 else _ethiopic(q)
            return prefix + closer + _ethiopic(r)
    return _ethiopic_small(n)


class EthiopicCodec(Codec):
    """Ge'ez numerals.

    Decoding keeps three accumulators: current (0-99, reset by either
    closer), segment (value since the last x10000 closer) and total.
    A x10000 closer scales the whole running total together with the
    segment coefficient, so "፼፼" reads as (1 * 10000 + 1) * 10000.
    """

    def encode(self, number: int, separator: str | None = None) -> str:
        if number < 1:
            raise NumeralError(ErrorKind.NOT_POSITIVE)
        if number > ETHIOPIC_MAX:
            raise NumeralError(ErrorKind.OUT_OF_RANGE, f"{number} > {ETHIOPIC_MAX}")
        return _ethiopic(number)

    def decode(self, text: str, separator: str | None = None) -> int:
        """Fold tens, ones and closers left to right."""
        current = segment = total = 0
        for ch in text:
            cp = ord(ch)
            if ch == ETHIOPIC_MYRIAD:
                coeff = segment + current or 1
                total = (total + coeff) * 10_000
                current = segment = 0
            elif ch == ETHIOPIC_HUNDRED:
                segment += (current or 1) * 100
                current = 0
            elif ETHIOPIC_TEN <= cp < ETHIOPIC_TEN + 9:
                current += (cp - ETHIOPIC_TEN + 1) * 10
            elif ETHIOPIC_ONE <= cp < ETHIOPIC_ONE + 9:
                current += cp - ETHIOPIC_ONE + 1
            else:
                raise NumeralError(ErrorKind.INVALID_ETHIOPIC_NUMERAL, repr(ch))
        return total + segment + current

    def detect(self, text: str) -> bool:
        return bool(text) and all(ETHIOPIC_ONE <= ord(ch) <= 0x137C for ch in text)


# ------------------------------------------------------------------
# Cuneiform
# ------------------------------------------------------------------

CUNEIFORM_TEN = "\U0001230B"    # 𒌋
CUNEIFORM_ONE = "\U00012079"    # 𒁹
CUNEIFORM_BLANK = " "           # empty place
CUNEIFORM_SEPARATOR = "  "      # between places

_CUNEIFORM_GLYPHS = {CUNEIFORM_TEN: 10, CUNEIFORM_ONE: 1}


def _cuneiform_digit(d: int) -> str:
    if d == 0:
        return CUNEIFORM_BLANK
    tens, ones = divmod(d, 10)
    return CUNEIFORM_TEN * tens + CUNEIFORM_ONE * ones


class CuneiformCodec(Codec):
    """Babylonian sexagesimal numerals.

    Places are separated by two spaces and an empty place is written as a
    single space, so runs of spaces are read left to right: a space that
    is followed by a separator or the end of the string is a blank place,
    otherwise it starts a separator.
    """

    def encode(self, number: int, separator: str | None = None) -> str:
        """Render base-60 places, most-significant first."""
        if number < 0:
            raise NumeralError(ErrorKind.NEGATIVE)
        places = reversed(base_digits(number, 60))
        return CUNEIFORM_SEPARATOR.join(_cuneiform_digit(d) for d in places)

    def decode(self, text: str, separator: str | None = None) -> int:
        value = 0
        i = 0
        n = len(text)
        while True:
            digit = 0
            while i < n and text[i] in _CUNEIFORM_GLYPHS:
                digit += _CUNEIFORM_GLYPHS[text[i]]
                i += 1
            if digit == 0 and text[i:i + 1] == CUNEIFORM_BLANK:
                if i + 1 == n or text[i + 1:i + 3] == CUNEIFORM_SEPARATOR:
                    i += 1
            value = value * 60 + digit
            if i == n:
                return value
            if text[i:i + 2] != CUNEIFORM_SEPARATOR:
                raise NumeralError(ErrorKind.INVALID_CUNEIFORM_NUMERAL, repr(text[i]))
            i += 2

    def detect(self, text: str) -> bool:
        return bool(text) and all(
            ch in _CUNEIFORM_GLYPHS or ch == CUNEIFORM_BLANK for ch in text
        )
