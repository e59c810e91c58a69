"""
Character information dictionary.

Loads a versioned ``U+XXXX,level,nametype,etax,grade,nisa`` dictionary and
answers per-character lookups over arbitrary text, pairing surrogates so
supplementary-plane characters resolve to a single entry.
"""

from .codepoints import decode_code_points, format_code_points
from .dictionary import CharacterLookupTable
from .errors import CharacterInformationError, FormatError, InvalidVersionError
from .record import GradeLevelKanji, InformationRecord, NameCategory, ScriptLevel, parse_record
from .segmenter import iter_user_characters, split_user_characters

__all__ = [
    'CharacterLookupTable',
    'InformationRecord',
    'ScriptLevel',
    'NameCategory',
    'GradeLevelKanji',
    'CharacterInformationError',
    'FormatError',
    'InvalidVersionError',
    'decode_code_points',
    'format_code_points',
    'iter_user_characters',
    'split_user_characters',
    'parse_record',
]
