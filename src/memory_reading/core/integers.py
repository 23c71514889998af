"""
Integer Recovery - Reduce 64-bit memory words to signed 32-bit integers.

Coordinate fields in a memory snapshot are serialized from 64-bit words,
while the value the UI uses is the signed 32-bit integer held in the low
half of that word. The numeral may be larger than a double can represent
exactly, so the conversion works on the hexadecimal text of the word.
"""
from __future__ import annotations

import re

from memory_reading.core.errors import InvalidEncoding, InvalidNumeral

WORD_HEX_DIGITS = 16
LOW_WORD_HEX_DIGITS = 8
INT32_SIGN_BIT = 0x80000000

_DECIMAL_MAGNITUDE = re.compile(r"[0-9]+")
_HEX_COMPLEMENT = str.maketrans("0123456789abcdef", "fedcba9876543210")

# int() refuses longer decimal strings on interpreters with a digit limit.
_DECIMAL_CHUNK_DIGITS = 1000


def int32_from_int64_numeral(numeral: str) -> int:
    """
    Recover the signed 32-bit integer stored in the low half of a 64-bit word.

    Args:
        numeral: Decimal text of the stored value, optionally negative,
            of any magnitude.

    Returns:
        The low 32 bits of the value's two's-complement encoding,
        reinterpreted as signed.

    Raises:
        InvalidNumeral: If ``numeral`` is not a decimal integer.
        InvalidEncoding: If a hexadecimal step cannot be completed.
    """
    is_negative = numeral.startswith("-")
    magnitude_text = numeral[1:] if is_negative else numeral

    if not _DECIMAL_MAGNITUDE.fullmatch(magnitude_text):
        raise InvalidNumeral(f"Not a decimal integer numeral: {numeral!r}", numeral=numeral)
    magnitude = decimal_to_int(magnitude_text)

    magnitude_hex = format(magnitude, "x").zfill(WORD_HEX_DIGITS)
    if is_negative:
        word_hex = _negate_hex(magnitude_hex)
    else:
        word_hex = magnitude_hex

    low_word_hex = word_hex[-LOW_WORD_HEX_DIGITS:]
    low_word = _hex_to_int(low_word_hex)
    if low_word >= INT32_SIGN_BIT:
        return -_hex_to_int(_negate_hex(low_word_hex))
    return low_word


def _negate_hex(digits: str) -> str:
    """Two's-complement negation at the width of ``digits``: flip every digit, add one."""
    return _increment_hex(digits.translate(_HEX_COMPLEMENT))


def _increment_hex(digits: str) -> str:
    width = len(digits)
    incremented = format(_hex_to_int(digits) + 1, "x").zfill(width)
    # Carry out of the top digit is dropped, as in fixed-width storage.
    return incremented[-width:]


def _hex_to_int(digits: str) -> int:
    try:
        return int(digits, 16)
    except ValueError as e:
        raise InvalidEncoding(f"Invalid hexadecimal encoding: {digits!r}", encoding=digits) from e


def decimal_to_int(digits: str) -> int:
    """Convert a string of decimal digits to an int, whatever its length."""
    value = 0
    for start in range(0, len(digits), _DECIMAL_CHUNK_DIGITS):
        chunk = digits[start:start + _DECIMAL_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value
