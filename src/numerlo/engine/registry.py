"""System identifiers, the codec registry and the detection priority.

Every numeral system has one stateless codec instance in CODECS.
PRIORITY is the order in which auto-detection asks codecs to claim a
string: systems with unique or structurally distinct glyphs come first,
the plain digit scripts after them, and the generic Arabic family and
duodecimal (which overlaps ASCII digits) last. Review the order whenever
a system is added; tests/test_detection.py checks it.
"""

from enum import Enum

from ..core.codec import Codec
from ..core.errors import ErrorKind
from ..core.positional import DigitTableCodec, PositionalCodec, VigesimalCodec
from ..core.scripts import KAKTOVIK_BASE, MAYAN_BASE, SCRIPT_BASES
from ..systems.cjk import HanCodec, RodCodec, han_positional_codec, suzhou_codec
from ..systems.historical import AegeanCodec, AtticCodec, CuneiformCodec, EthiopicCodec
from ..systems.roman import RomanCodec


class System(Enum):
    ARABIC = "arabic"
    ARABIC_INDIC = "arabic_indic"
    EXTENDED_ARABIC_INDIC = "extended_arabic_indic"
    DEVANAGARI = "devanagari"
    BENGALI = "bengali"
    GURMUKHI = "gurmukhi"
    GUJARATI = "gujarati"
    ORIYA = "oriya"
    TAMIL = "tamil"
    TELUGU = "telugu"
    KANNADA = "kannada"
    MALAYALAM = "malayalam"
    THAI = "thai"
    LAO = "lao"
    TIBETAN = "tibetan"
    BURMESE = "burmese"
    KHMER = "khmer"
    MONGOLIAN = "mongolian"
    LIMBU = "limbu"
    NEW_TAI_LUE = "new_tai_lue"
    TAI_THAM_HORA = "tai_tham_hora"
    TAI_THAM_THAM = "tai_tham_tham"
    BALINESE = "balinese"
    SUNDANESE = "sundanese"
    LEPCHA = "lepcha"
    OL_CHIKI = "ol_chiki"
    VAI = "vai"
    SAURASHTRA = "saurashtra"
    KAYAH_LI = "kayah_li"
    JAVANESE = "javanese"
    CHAM = "cham"
    MEETEI_MAYEK = "meetei_mayek"
    OSMANYA = "osmanya"
    BRAHMI = "brahmi"
    SORA_SOMPENG = "sora_sompeng"
    CHAKMA = "chakma"
    SHARADA = "sharada"
    TIRHUTA = "tirhuta"
    MODI = "modi"
    TAKRI = "takri"
    WARANG_CITI = "warang_citi"
    GUNJALA_GONDI = "gunjala_gondi"
    MASARAM_GONDI = "masaram_gondi"
    KAKTOVIK = "kaktovik"
    MRO = "mro"
    TANGSA = "tangsa"
    PAHAWH_HMONG = "pahawh_hmong"
    NYIAKENG_PUACHUE_HMONG = "nyiakeng_puachue_hmong"
    WANCHO = "wancho"
    TOTO = "toto"
    NAG_MUNDARI = "nag_mundari"
    ADLAM = "adlam"
    N_KO = "n_ko"
    HAN = "han"
    HAN_POSITIONAL = "han_positional"
    SUZHOU = "suzhou"
    ROD = "rod"
    FULLWIDTH = "fullwidth"
    MATH_MONOSPACE = "math_monospace"
    MATH_BOLD = "math_bold"
    MATH_DOUBLE_STRUCK = "math_double_struck"
    MATH_SANS = "math_sans"
    MATH_SANS_BOLD = "math_sans_bold"
    ROMAN = "roman"
    AEGEAN = "aegean"
    ATTIC = "attic"
    MAYAN = "mayan"
    ETHIOPIC = "ethiopic"
    CUNEIFORM = "cuneiform"
    DUODECIMAL = "duodecimal"


def _build_codecs() -> dict[System, Codec]:
    codecs: dict[System, Codec] = {
        System(name): PositionalCodec(base) for name, base in SCRIPT_BASES
    }
    codecs.update({
        System.KAKTOVIK: VigesimalCodec(KAKTOVIK_BASE),
        System.MAYAN: VigesimalCodec(MAYAN_BASE, signed=False,
                                     invalid=ErrorKind.INVALID_MAYAN_NUMERAL),
        System.DUODECIMAL: DigitTableCodec("0123456789↊↋",
                                           marker_digits="↊↋"),
        System.ROMAN: RomanCodec(),
        System.AEGEAN: AegeanCodec(),
        System.ATTIC: AtticCodec(),
        System.ETHIOPIC: EthiopicCodec(),
        System.CUNEIFORM: CuneiformCodec(),
        System.HAN: HanCodec(),
        System.HAN_POSITIONAL: han_positional_codec(),
        System.SUZHOU: suzhou_codec(),
        System.ROD: RodCodec(),
    })
    return codecs


CODECS = _build_codecs()

PRIORITY = (
    # Unique or structurally distinct glyphs
    System.AEGEAN,
    System.ATTIC,
    System.MAYAN,
    System.ETHIOPIC,
    System.CUNEIFORM,
    System.ROMAN,
    # Specialized digit styles
    System.MATH_BOLD,
    System.MATH_DOUBLE_STRUCK,
    System.MATH_SANS,
    System.MATH_SANS_BOLD,
    System.MATH_MONOSPACE,
    System.FULLWIDTH,
    # Script digits
    System.THAI,
    System.LAO,
    System.TIBETAN,
    System.BURMESE,
    System.KHMER,
    System.MONGOLIAN,
    System.LIMBU,
    System.NEW_TAI_LUE,
    System.TAI_THAM_HORA,
    System.TAI_THAM_THAM,
    System.BALINESE,
    System.SUNDANESE,
    System.LEPCHA,
    System.OL_CHIKI,
    System.VAI,
    System.SAURASHTRA,
    System.KAYAH_LI,
    System.JAVANESE,
    System.CHAM,
    System.MEETEI_MAYEK,
    System.OSMANYA,
    System.BRAHMI,
    System.SORA_SOMPENG,
    System.CHAKMA,
    System.SHARADA,
    System.TIRHUTA,
    System.MODI,
    System.TAKRI,
    System.WARANG_CITI,
    System.GUNJALA_GONDI,
    System.MASARAM_GONDI,
    System.KAKTOVIK,
    System.MRO,
    System.TANGSA,
    System.PAHAWH_HMONG,
    System.NYIAKENG_PUACHUE_HMONG,
    System.WANCHO,
    System.TOTO,
    System.NAG_MUNDARI,
    System.ADLAM,
    System.N_KO,
    System.SUZHOU,
    System.ROD,
    System.HAN_POSITIONAL,
    System.HAN,
    System.DEVANAGARI,
    System.BENGALI,
    System.GURMUKHI,
    System.GUJARATI,
    System.ORIYA,
    System.TAMIL,
    System.TELUGU,
    System.KANNADA,
    System.MALAYALAM,
    # Generic digits last; duodecimal overlaps 0-9
    System.ARABIC,
    System.ARABIC_INDIC,
    System.EXTENDED_ARABIC_INDIC,
    System.DUODECIMAL,
)


def lookup_system(name) -> System | None:
    """Resolve a System member or its string value; None if unknown."""
    if isinstance(name, System):
        return name
    try:
        return System(name)
    except ValueError:
        return None


def get_codec(name) -> Codec | None:
    system = lookup_system(name)
    if system is None:
        return None
    return CODECS.get(system)
