"""Tests for the Aegean, Attic, Ethiopic and Cuneiform codecs."""

import pytest

from numerlo.core.errors import ErrorKind, NumeralError
from numerlo.systems.historical import (
    AEGEAN_MAX,
    ETHIOPIC_MAX,
    AegeanCodec,
    AtticCodec,
    CuneiformCodec,
    EthiopicCodec,
)

TEN = "\U0001230B"
ONE = "\U00012079"


class TestAegean:
    """Test AegeanCodec."""

    def setup_method(self):
        self.codec = AegeanCodec()

    def test_single_powers(self):
        """Each power of ten has its own count-of-one glyph."""
        assert self.codec.encode(1) == chr(0x10107)
        assert self.codec.encode(1000) == chr(0x10122)
        assert self.codec.encode(10000) == chr(0x1012B)

    def test_mixed(self):
        """One glyph per non-zero place, largest first."""
        assert self.codec.encode(42) == chr(0x10113) + chr(0x10108)
        assert self.codec.encode(99_999) == "".join(
            chr(base + 8) for base in (0x1012B, 0x10122, 0x10119, 0x10110, 0x10107)
        )

    def test_zero_place_skipped(self):
        """Empty places produce no glyph."""
        assert self.codec.encode(101) == chr(0x10119) + chr(0x10107)

    def test_not_positive(self):
        """Zero is not_positive."""
        with pytest.raises(NumeralError, match="not_positive"):
            self.codec.encode(0)

    def test_out_of_range(self):
        """Values past 99,999 are out_of_range."""
        with pytest.raises(NumeralError) as exc:
            self.codec.encode(AEGEAN_MAX + 1)
        assert exc.value.kind == ErrorKind.OUT_OF_RANGE

    def test_decode_is_additive(self):
        """Glyph order does not matter on decode."""
        assert self.codec.decode(chr(0x10108) + chr(0x10113)) == 42

    def test_decode_invalid(self):
        """A foreign character is invalid_aegean_numeral."""
        with pytest.raises(NumeralError, match="invalid_aegean_numeral"):
            self.codec.decode(chr(0x10113) + "A")

    def test_detect(self):
        """Only Aegean number glyphs are claimed."""
        assert self.codec.detect(chr(0x10113))
        assert not self.codec.detect("")
        assert not self.codec.detect("42")

    def test_roundtrip(self):
        """Aegean decodes what it encodes."""
        for n in range(1, AEGEAN_MAX + 1, 37):
            assert self.codec.decode(self.codec.encode(n)) == n


class TestAttic:
    """Test AtticCodec."""

    def setup_method(self):
        self.codec = AtticCodec()

    def test_forty_nine(self):
        """49 uses the five glyph and repeated tens and ones."""
        assert self.codec.encode(49) == "ΔΔΔΔ\U00010143ΙΙΙΙ"
        assert self.codec.decode("ΔΔΔΔ\U00010143ΙΙΙΙ") == 49

    def test_thousands(self):
        """Thousands repeat chi."""
        assert self.codec.encode(2001) == "ΧΧΙ"

    def test_fifty_thousand(self):
        """The largest glyph repeats for larger values."""
        assert self.codec.encode(50_000) == "\U00010147"
        assert self.codec.encode(120_000) == "\U00010147\U00010147ΜΜ"

    def test_decode_any_order(self):
        """Decode sums glyphs in any order."""
        assert self.codec.decode("ΙΔ") == 11

    def test_not_positive(self):
        """Negative values are not_positive."""
        with pytest.raises(NumeralError, match="not_positive"):
            self.codec.encode(-3)

    def test_latin_lookalike_rejected(self):
        """Latin X is not Greek chi."""
        with pytest.raises(NumeralError, match="invalid_attic_numeral"):
            self.codec.decode("X")

    def test_detect(self):
        """Only Attic glyphs are claimed."""
        assert self.codec.detect("ΧΗΔΙ")
        assert not self.codec.detect("")
        assert not self.codec.detect("XI")

    def test_roundtrip(self):
        """Attic decodes what it encodes."""
        for n in range(1, 200_000, 97):
            assert self.codec.decode(self.codec.encode(n)) == n


class TestEthiopic:
    """Test EthiopicCodec."""

    def setup_method(self):
        self.codec = EthiopicCodec()

    @pytest.mark.parametrize("number, expected", [
        (1, "፩"),
        (10, "፲"),
        (99, "፺፱"),
        (100, "፻"),
        (2345, "፳፫፻፵፭"),
        (10_000, "፼"),
        (10_001, "፼፩"),
        (20_000, "፪፼"),
        (1_000_000, "፻፼"),
        (10_000_000, "፲፻፼"),
        (12_345_678, "፲፪፻፴፬፼፶፮፻፸፰"),
    ])
    def test_encode(self, number, expected):
        """Known values encode and decode both ways."""
        assert self.codec.encode(number) == expected
        assert self.codec.decode(expected) == number

    def test_myriad_closers_compound(self):
        """A second myriad closer scales the running total."""
        assert self.codec.decode("፼፼") == 100_010_000

    def test_bare_hundred(self):
        """A closer with no coefficient counts as one."""
        assert self.codec.decode("፻") == 100

    def test_not_positive(self):
        """Zero is not_positive."""
        with pytest.raises(NumeralError, match="not_positive"):
            self.codec.encode(0)

    def test_out_of_range(self):
        """Values that would need a third myriad closer are out_of_range."""
        with pytest.raises(NumeralError) as exc:
            self.codec.encode(ETHIOPIC_MAX + 1)
        assert exc.value.kind == ErrorKind.OUT_OF_RANGE

    def test_decode_invalid(self):
        """A foreign character is invalid_ethiopic_numeral."""
        with pytest.raises(NumeralError, match="invalid_ethiopic_numeral"):
            self.codec.decode("፩A")

    def test_detect(self):
        """Only Ethiopic number glyphs are claimed."""
        assert self.codec.detect("፳፫፻፵፭")
        assert not self.codec.detect("")
        assert not self.codec.detect("፩ ")

    def test_roundtrip_small(self):
        """Every value below 20,000 round-trips."""
        for n in range(1, 20_000):
            assert self.codec.decode(self.codec.encode(n)) == n

    @pytest.mark.slow
    def test_roundtrip_sampled(self):
        """Sampled values up to the maximum round-trip."""
        for n in range(1, ETHIOPIC_MAX + 1, 9973):
            assert self.codec.decode(self.codec.encode(n)) == n
        assert self.codec.decode(self.codec.encode(ETHIOPIC_MAX)) == ETHIOPIC_MAX


class TestCuneiform:
    """Test CuneiformCodec."""

    def setup_method(self):
        self.codec = CuneiformCodec()

    def test_units_and_tens(self):
        """A place is tens wedges followed by unit wedges."""
        assert self.codec.encode(1) == ONE
        assert self.codec.encode(23) == TEN * 2 + ONE * 3
        assert self.codec.encode(59) == TEN * 5 + ONE * 9

    def test_zero(self):
        """Zero is a single blank place."""
        assert self.codec.encode(0) == " "
        assert self.codec.decode(" ") == 0

    def test_sixty(self):
        """A trailing empty place is a single space after the separator."""
        assert self.codec.encode(60) == ONE + "   "
        assert self.codec.decode(ONE + "   ") == 60

    def test_consecutive_empty_places(self):
        """Two trailing empty places round-trip."""
        assert self.codec.encode(3600) == ONE + "      "
        assert self.codec.decode(ONE + "      ") == 3600

    def test_five_spaces_read_as_two_places(self):
        """A blank that runs into the end of the string still counts."""
        assert self.codec.decode(ONE + "     ") == 3600

    def test_inner_empty_place(self):
        """An empty place between two non-empty places."""
        assert self.codec.encode(3601) == ONE + "   " + "  " + ONE
        assert self.codec.decode(ONE + "     " + ONE) == 3601

    def test_three_places(self):
        """Places are joined most-significant first."""
        text = ONE * 2 + "  " + TEN * 2 + ONE * 3 + "  " + ONE * 3
        assert self.codec.encode(8583) == text
        assert self.codec.decode(text) == 8583

    def test_negative(self):
        """Negative values are rejected."""
        with pytest.raises(NumeralError, match="negative"):
            self.codec.encode(-60)

    def test_decode_invalid_glyph(self):
        """A foreign character is invalid_cuneiform_numeral."""
        with pytest.raises(NumeralError, match="invalid_cuneiform_numeral"):
            self.codec.decode(ONE + "A")

    def test_decode_single_space_between_places(self):
        """Places must be separated by two spaces."""
        with pytest.raises(NumeralError) as exc:
            self.codec.decode(ONE + " " + ONE)
        assert exc.value.kind == ErrorKind.INVALID_CUNEIFORM_NUMERAL

    def test_detect(self):
        """Only wedges and spaces are claimed."""
        assert self.codec.detect(ONE + "   ")
        assert not self.codec.detect("")
        assert not self.codec.detect(ONE + "1")

    def test_roundtrip(self):
        """Cuneiform decodes what it encodes, including empty places."""
        for n in list(range(0, 4000)) + [216_000, 216_001, 12_960_000, 777_600_061]:
            assert self.codec.decode(self.codec.encode(n)) == n
