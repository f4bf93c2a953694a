"""Catalog of supported numeral systems.

Each entry records the base, structural kind and supported range of a
system with a one-line description. Example strings are rendered by the
system's own codec so they always match what encode produces.
"""

from dataclasses import dataclass
from enum import Enum

from .registry import CODECS, System


class SystemKind(Enum):
    POSITIONAL = "positional"
    ADDITIVE = "additive"
    HYBRID = "hybrid"


# Symbolic ranges; Roman uses an explicit range object
ALL = "all"
NON_NEGATIVE = "non_negative"
POSITIVE = "positive"


@dataclass(frozen=True)
class SystemInfo:
    system: System
    base: int
    kind: SystemKind
    range: object
    sample: int
    description: str

    @property
    def example(self) -> str:
        return f"{CODECS[self.system].encode(self.sample)} ({self.sample:,})"


def _script(system, description, sample=123):
    return SystemInfo(system, 10, SystemKind.POSITIONAL, ALL, sample, description)


_ENTRIES = [
    # Additive and hybrid
    SystemInfo(System.AEGEAN, 10, SystemKind.ADDITIVE, range(1, 100_000), 11_111,
               "Minoan and Mycenaean numerals (Linear A/B); one glyph per count of each power of ten."),
    SystemInfo(System.ATTIC, 10, SystemKind.ADDITIVE, POSITIVE, 27,
               "Greek acrophonic numerals; symbols derive from the initial letter of the number's name."),
    SystemInfo(System.ROMAN, 10, SystemKind.ADDITIVE, range(1, 4000), 2026,
               "Roman numerals with subtractive pairs, standard form 1-3999."),
    SystemInfo(System.ETHIOPIC, 10, SystemKind.HYBRID, range(1, 100_000_000), 2345,
               "Ge'ez numerals: tens and ones grouped under hundred and myriad multipliers."),
    SystemInfo(System.HAN, 10, SystemKind.HYBRID, ALL, 12_345,
               "Chinese/Japanese multiplicative-additive numerals grouped by myriads."),
    # Non-decimal positional
    SystemInfo(System.MAYAN, 20, SystemKind.POSITIONAL, NON_NEGATIVE, 20,
               "Maya vigesimal numerals with a shell for zero."),
    SystemInfo(System.KAKTOVIK, 20, SystemKind.POSITIONAL, ALL, 120,
               "Kaktovik Inupiaq vigesimal numerals."),
    SystemInfo(System.CUNEIFORM, 60, SystemKind.POSITIONAL, NON_NEGATIVE, 83,
               "Babylonian sexagesimal wedges; each place written additively with tens and units."),
    SystemInfo(System.DUODECIMAL, 12, SystemKind.POSITIONAL, ALL, 131,
               "Base twelve with Pitman's digits for ten and eleven."),
    # Chinese positional forms
    _script(System.HAN_POSITIONAL, "Han digits used positionally, as in dates.", 2026),
    _script(System.SUZHOU, "Suzhou (huama) numerals once used in Chinese markets."),
    _script(System.ROD, "Counting rod numerals; vertical and horizontal forms alternate by place."),
    # Specialized digit styles
    _script(System.FULLWIDTH, "Fullwidth digits used in CJK typesetting."),
    _script(System.MATH_BOLD, "Mathematical bold digits."),
    _script(System.MATH_DOUBLE_STRUCK, "Mathematical double-struck digits."),
    _script(System.MATH_MONOSPACE, "Mathematical monospace digits."),
    _script(System.MATH_SANS, "Mathematical sans-serif digits."),
    _script(System.MATH_SANS_BOLD, "Mathematical sans-serif bold digits."),
    # Script digits
    _script(System.ARABIC, "Western Arabic digits 0-9."),
    _script(System.ARABIC_INDIC, "Arabic-Indic digits used across most of the Arab world."),
    _script(System.EXTENDED_ARABIC_INDIC, "Eastern Arabic-Indic digits used for Persian and Urdu."),
    _script(System.DEVANAGARI, "Devanagari digits (Hindi, Marathi, Sanskrit)."),
    _script(System.BENGALI, "Bengali-Assamese digits."),
    _script(System.GURMUKHI, "Gurmukhi digits (Punjabi)."),
    _script(System.GUJARATI, "Gujarati digits."),
    _script(System.ORIYA, "Odia digits."),
    _script(System.TAMIL, "Tamil digits."),
    _script(System.TELUGU, "Telugu digits."),
    _script(System.KANNADA, "Kannada digits."),
    _script(System.MALAYALAM, "Malayalam digits."),
    _script(System.THAI, "Thai digits."),
    _script(System.LAO, "Lao digits."),
    _script(System.TIBETAN, "Tibetan digits."),
    _script(System.BURMESE, "Myanmar digits."),
    _script(System.KHMER, "Khmer digits."),
    _script(System.MONGOLIAN, "Traditional Mongolian digits."),
    _script(System.LIMBU, "Limbu digits (Nepal, Sikkim)."),
    _script(System.NEW_TAI_LUE, "New Tai Lue digits."),
    _script(System.TAI_THAM_HORA, "Tai Tham Hora digits, secular use."),
    _script(System.TAI_THAM_THAM, "Tai Tham Tham digits, religious use."),
    _script(System.BALINESE, "Balinese digits."),
    _script(System.SUNDANESE, "Sundanese digits."),
    _script(System.LEPCHA, "Lepcha digits."),
    _script(System.OL_CHIKI, "Ol Chiki digits (Santali)."),
    _script(System.VAI, "Vai digits (Liberia)."),
    _script(System.SAURASHTRA, "Saurashtra digits."),
    _script(System.KAYAH_LI, "Kayah Li digits."),
    _script(System.JAVANESE, "Javanese digits."),
    _script(System.CHAM, "Cham digits."),
    _script(System.MEETEI_MAYEK, "Meetei Mayek digits (Manipuri)."),
    _script(System.OSMANYA, "Osmanya digits (Somali)."),
    _script(System.BRAHMI, "Brahmi decimal digits."),
    _script(System.SORA_SOMPENG, "Sora Sompeng digits."),
    _script(System.CHAKMA, "Chakma digits."),
    _script(System.SHARADA, "Sharada digits (Kashmir)."),
    _script(System.TIRHUTA, "Tirhuta digits (Maithili)."),
    _script(System.MODI, "Modi digits (historical Marathi)."),
    _script(System.TAKRI, "Takri digits."),
    _script(System.WARANG_CITI, "Warang Citi digits (Ho)."),
    _script(System.GUNJALA_GONDI, "Gunjala Gondi digits."),
    _script(System.MASARAM_GONDI, "Masaram Gondi digits."),
    _script(System.MRO, "Mro digits."),
    _script(System.TANGSA, "Tangsa digits."),
    _script(System.PAHAWH_HMONG, "Pahawh Hmong digits."),
    _script(System.NYIAKENG_PUACHUE_HMONG, "Nyiakeng Puachue Hmong digits."),
    _script(System.WANCHO, "Wancho digits."),
    _script(System.TOTO, "Toto block code points used as digits."),
    _script(System.NAG_MUNDARI, "Nag Mundari digits."),
    _script(System.ADLAM, "Adlam digits (Fulani)."),
    _script(System.N_KO, "N'Ko digits (Manding)."),
]

CATALOG = {info.system: info for info in _ENTRIES}


def systems() -> dict[System, SystemInfo]:
    """Return catalog entries for all supported systems."""
    return CATALOG
