"""Conversion entry point: encode, decode, detect and cross-convert.

    convert(2026, to="roman")                       -> Result("MMXXVI")
    convert("MMXXVI", to="integer")                 -> Result(2026)
    convert("१२३", to="thai")                       -> Result("๑๒๓")
    convert([1, 2], to="roman")                     -> Result(["I", "II"])
    convert(1234567, separator=",")                 -> Result("1,234,567")
    convert("IIII", from_="roman", to="integer")    -> Result(4)

Nothing raises across this boundary: codec errors come back as
Result.failure(kind), and the first failure in a chain or a batch ends it.
"""

import logging

from ..core.errors import ErrorKind, NumeralError, Result
from .registry import CODECS, PRIORITY, System, get_codec, lookup_system

logger = logging.getLogger(__name__)

DEFAULT_TARGET = System.ARABIC
AUTO = "auto"
INTEGER = "integer"


def detect_system(text: str) -> System | None:
    """Return the first system in priority order that claims the string."""
    for system in PRIORITY:
        if CODECS[system].detect(text):
            return system
    return None


def encode(number: int, to=DEFAULT_TARGET, separator: str | None = None) -> str:
    """Encode an integer, raising NumeralError on failure."""
    codec = get_codec(to)
    if codec is None:
        raise NumeralError(ErrorKind.UNKNOWN_SYSTEM, repr(to))
    return codec.encode(number, separator)


def decode(text: str, from_=AUTO, separator: str | None = None) -> int:
    """Decode a string to an integer, raising NumeralError on failure."""
    if from_ == AUTO:
        system = detect_system(text)
        if system is None:
            raise NumeralError(ErrorKind.UNKNOWN_SYSTEM, f"no system claims {text!r}")
        logger.debug("detected %s for %r", system.value, text)
    else:
        system = lookup_system(from_)
        if system is None:
            raise NumeralError(ErrorKind.UNKNOWN_SYSTEM, repr(from_))
    return CODECS[system].decode(text, separator)


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _convert(value, to, from_, separator):
    if separator is not None and not isinstance(separator, str):
        raise NumeralError(ErrorKind.INVALID_INPUT, f"separator {separator!r}")

    if _is_integer(value):
        return encode(value, to, separator)

    if isinstance(value, list):
        out = []
        for item in value:
            if not _is_integer(item):
                raise NumeralError(ErrorKind.INVALID_INPUT, f"list item {item!r}")
            out.append(encode(item, to, separator))
        return out

    if isinstance(value, str):
        number = decode(value, from_, separator)
        if to == INTEGER:
            return number
        return encode(number, to, separator)

    raise NumeralError(ErrorKind.INVALID_INPUT, type(value).__name__)


def convert(value, to=DEFAULT_TARGET, from_=AUTO, separator: str | None = None) -> Result:
    """Convert an integer, a list of integers or an encoded string.

    Args:
        value: int to encode, list of ints to encode in order, or str to
               decode (and re-encode unless to="integer").
        to: target System (or its name), or "integer" to decode only.
        from_: source System for string input, or "auto" to detect it.
        separator: digit-group separator for positional systems.

    Returns:
        Result holding a str, a list of str or an int; or the ErrorKind
        of the first failure.
    """
    try:
        return Result.success(_convert(value, to, from_, separator))
    except NumeralError as e:
        logger.debug("conversion of %r to %s failed: %s", value, to, e)
        return Result.failure(e.kind)
