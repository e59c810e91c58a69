"""
Code point specification decoding.

Dictionary keys are written as ``U+XXXX`` or ``XXXX``; combining sequences
append further ``+XXXX`` segments (``U+304B+3099`` is か followed by the
combining voiced sound mark).
"""

import re
import string

from CharacterInformation.errors import FormatError

CODE_POINT_SEPARATOR = "+"
CODE_POINT_PREFIX = "U+"

MAX_CODE_POINT = 0x10FFFF

_HEX_TOKEN = re.compile(r"[0-9A-Fa-f]+")


def decode_code_points(spec: str) -> str:
    """
    Turn a code point specification into the string it denotes.

    Tokens are split on ``+``. A token is only accepted when its first
    character is a hex digit; everything else (the ``U`` of ``U+``, empty
    tokens) is skipped.

    Args:
        spec: Specification such as ``U+9F8D`` or ``U+304B+3099``

    Returns:
        The accepted code points concatenated in order

    Raises:
        FormatError: No token was accepted, a token is not hexadecimal, or a
            code point lies outside the Unicode range
    """
    code_points = []
    for token in spec.split(CODE_POINT_SEPARATOR):
        if not token or token[0] not in string.hexdigits:
            continue
        hex_digits = token.strip()
        if not _HEX_TOKEN.fullmatch(hex_digits):
            raise FormatError(f"invalid code point '{token}'")
        value = int(hex_digits, 16)
        if value > MAX_CODE_POINT:
            raise FormatError(f"code point out of range '{token}'")
        code_points.append(chr(value))

    if not code_points:
        raise FormatError("no code point defined")

    return "".join(code_points)


def format_code_points(chars: str) -> str:
    """Render ``chars`` back as ``U+XXXX[+XXXX...]``."""
    if not chars:
        return ""
    return CODE_POINT_PREFIX + CODE_POINT_SEPARATOR.join(f"{ord(ch):X}" for ch in chars)
