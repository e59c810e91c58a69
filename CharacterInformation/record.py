"""Attribute records and the parser for one dictionary line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional, Type

from dataclasses_json import dataclass_json

from CharacterInformation.codepoints import decode_code_points
from CharacterInformation.errors import FormatError

FIELD_SEPARATOR = ','


class ScriptLevel(IntEnum):
    """JIS X 0213 level."""
    NONE = 0
    LEVEL1 = 1
    LEVEL2 = 2
    LEVEL3 = 3
    LEVEL4 = 4
    NON_KANJI = 5

    @property
    def label(self) -> str:
        return _SCRIPT_LEVEL_LABELS[self]


class NameCategory(IntEnum):
    """Common-use (jouyou) and personal-name (jinmeiyou) kanji classification."""
    NONE = 0
    COMMON_USE = 1
    PERSONAL_NAME_KANJI = 2  # jinmeiyou kanji that are not also jouyou
    COMMON_USE_VARIANT = 3
    PERSONAL_NAME_NON_KANJI = 4  # non-kanji allowed in a child's given name

    @property
    def label(self) -> str:
        return _NAME_CATEGORY_LABELS[self]


class GradeLevelKanji(IntEnum):
    """Elementary school grade the kanji is taught in."""
    NONE = 0
    GRADE1 = 1
    GRADE2 = 2
    GRADE3 = 3
    GRADE4 = 4
    GRADE5 = 5
    GRADE6 = 6

    @property
    def label(self) -> str:
        return _GRADE_LEVEL_LABELS[self]


# One table per enum, IntEnum members of different types compare equal by value
_SCRIPT_LEVEL_LABELS = {
    ScriptLevel.NONE: "None",
    ScriptLevel.LEVEL1: "Level1",
    ScriptLevel.LEVEL2: "Level2",
    ScriptLevel.LEVEL3: "Level3",
    ScriptLevel.LEVEL4: "Level4",
    ScriptLevel.NON_KANJI: "NonKanji",
}

_NAME_CATEGORY_LABELS = {
    NameCategory.NONE: "None",
    NameCategory.COMMON_USE: "CommonUse",
    NameCategory.PERSONAL_NAME_KANJI: "PersonalNameKanji",
    NameCategory.COMMON_USE_VARIANT: "CommonUseVariant",
    NameCategory.PERSONAL_NAME_NON_KANJI: "PersonalNameNonKanji",
}

_GRADE_LEVEL_LABELS = {
    GradeLevelKanji.NONE: "None",
    GradeLevelKanji.GRADE1: "Grade1",
    GradeLevelKanji.GRADE2: "Grade2",
    GradeLevelKanji.GRADE3: "Grade3",
    GradeLevelKanji.GRADE4: "Grade4",
    GradeLevelKanji.GRADE5: "Grade5",
    GradeLevelKanji.GRADE6: "Grade6",
}


@dataclass_json
@dataclass(frozen=True)
class InformationRecord:
    key: str
    script_level: ScriptLevel = ScriptLevel.NONE
    name_category: NameCategory = NameCategory.NONE
    tax_form_eligible: bool = False  # usable in e-Tax filings
    grade_level_kanji: GradeLevelKanji = GradeLevelKanji.NONE
    investment_account_eligible: bool = False  # usable in NISA account names

    @classmethod
    def placeholder(cls, key: str) -> "InformationRecord":
        """Record handed out for characters the dictionary has no entry for."""
        return cls(key=key)

    @property
    def has_attributes(self) -> bool:
        return (
            self.script_level != ScriptLevel.NONE
            or self.name_category != NameCategory.NONE
            or self.tax_form_eligible
            or self.grade_level_kanji != GradeLevelKanji.NONE
            or self.investment_account_eligible
        )


# Positional layout of a data line after the key field.
# (field index, record attribute, enum type or None for a flag)
_OPTIONAL_FIELDS = (
    (1, "script_level", ScriptLevel),
    (2, "name_category", NameCategory),
    (3, "tax_form_eligible", None),
    (4, "grade_level_kanji", GradeLevelKanji),
    (5, "investment_account_eligible", None),
)


def _parse_int_field(raw: str, name: str) -> Optional[int]:
    value = raw.strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise FormatError(f"invalid number '{value}'", field=name) from None


def _to_enum(enum_type: Type[IntEnum], value: int, name: str) -> IntEnum:
    # Values the enum does not declare are rejected, never stored as raw ints.
    try:
        return enum_type(value)
    except ValueError:
        raise FormatError(f"unknown {enum_type.__name__} value {value}", field=name) from None


def parse_record(line: str, line_number: Optional[int] = None) -> InformationRecord:
    """
    Parse one data line into an InformationRecord.

    Format: ``<codepoints>[,<level>[,<nametype>[,<etax>[,<grade>[,<nisa>]]]]]``.
    Missing or blank trailing fields keep their default, fields past the
    sixth are ignored.

    Raises:
        FormatError: The key cannot be decoded or a present field is not a
            valid number for its attribute
    """
    fields = line.split(FIELD_SEPARATOR)

    try:
        values: Dict[str, Any] = {"key": decode_code_points(fields[0])}
        for index, name, enum_type in _OPTIONAL_FIELDS:
            if len(fields) <= index:
                break
            number = _parse_int_field(fields[index], name)
            if number is None:
                continue
            if enum_type is None:
                values[name] = number != 0
            else:
                values[name] = _to_enum(enum_type, number, name)
    except FormatError as e:
        if line_number is None:
            raise
        raise e.with_line(line_number) from e

    return InformationRecord(**values)
