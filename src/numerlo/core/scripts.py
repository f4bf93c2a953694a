"""Code point of digit zero for each contiguous-range positional script.

Digit d of a script is chr(base + d). All scripts are decimal except
Kaktovik, which is vigesimal and registered separately.
"""

# (system name, zero code point)
SCRIPT_BASES = [
    ("arabic", 0x0030),
    ("arabic_indic", 0x0660),
    ("extended_arabic_indic", 0x06F0),
    ("n_ko", 0x07C0),
    ("devanagari", 0x0966),
    ("bengali", 0x09E6),
    ("gurmukhi", 0x0A66),
    ("gujarati", 0x0AE6),
    ("oriya", 0x0B66),
    ("tamil", 0x0BE6),
    ("telugu", 0x0C66),
    ("kannada", 0x0CE6),
    ("malayalam", 0x0D66),
    ("thai", 0x0E50),
    ("lao", 0x0ED0),
    ("tibetan", 0x0F20),
    ("burmese", 0x1040),
    ("khmer", 0x17E0),
    ("mongolian", 0x1810),
    ("limbu", 0x1946),
    ("new_tai_lue", 0x19D0),
    ("tai_tham_hora", 0x1A80),
    ("tai_tham_tham", 0x1A90),
    ("balinese", 0x1B50),
    ("sundanese", 0x1BB0),
    ("lepcha", 0x1C40),
    ("ol_chiki", 0x1C50),
    ("vai", 0xA620),
    ("saurashtra", 0xA8D0),
    ("kayah_li", 0xA900),
    ("javanese", 0xA9D0),
    ("cham", 0xAA50),
    ("meetei_mayek", 0xABF0),
    ("fullwidth", 0xFF10),
    ("osmanya", 0x104A0),
    ("brahmi", 0x11066),
    ("sora_sompeng", 0x110F0),
    ("chakma", 0x11136),
    ("sharada", 0x111D0),
    ("tirhuta", 0x114D0),
    ("modi", 0x11650),
    ("takri", 0x116C0),
    ("warang_citi", 0x118E0),
    ("masaram_gondi", 0x11D50),
    ("gunjala_gondi", 0x11DA0),
    ("mro", 0x16A60),
    ("tangsa", 0x16AC0),
    ("pahawh_hmong", 0x16B50),
    ("math_bold", 0x1D7CE),
    ("math_double_struck", 0x1D7D8),
    ("math_sans", 0x1D7E2),
    ("math_sans_bold", 0x1D7EC),
    ("math_monospace", 0x1D7F6),
    ("nyiakeng_puachue_hmong", 0x1E140),
    ("toto", 0x1E290),
    ("wancho", 0x1E2F0),
    ("nag_mundari", 0x1E4F0),
    ("adlam", 0x1E950),
]

KAKTOVIK_BASE = 0x1D2C0
MAYAN_BASE = 0x1D2E0
