import dataclasses
import json

import pytest

from CharacterInformation.errors import FormatError
from CharacterInformation.record import (
    GradeLevelKanji,
    InformationRecord,
    NameCategory,
    ScriptLevel,
    parse_record,
)


def test_parse_full_line():
    record = parse_record("U+9F8D,2,1,1,0,1")
    assert record == InformationRecord(
        key="龍",
        script_level=ScriptLevel.LEVEL2,
        name_category=NameCategory.COMMON_USE,
        tax_form_eligible=True,
        grade_level_kanji=GradeLevelKanji.NONE,
        investment_account_eligible=True,
    )


def test_missing_trailing_fields_keep_defaults():
    record = parse_record("U+3042,1")
    assert record.key == "あ"
    assert record.script_level is ScriptLevel.LEVEL1
    assert record.name_category is NameCategory.NONE
    assert record.tax_form_eligible is False
    assert record.grade_level_kanji is GradeLevelKanji.NONE
    assert record.investment_account_eligible is False


def test_key_only_line_has_no_attributes():
    record = parse_record("U+3044")
    assert record.key == "い"
    assert record.has_attributes is False


def test_blank_fields_are_treated_as_absent():
    record = parse_record("U+3042, ,2,,  3 ")
    assert record.script_level is ScriptLevel.NONE
    assert record.name_category is NameCategory.PERSONAL_NAME_KANJI
    assert record.tax_form_eligible is False
    assert record.grade_level_kanji is GradeLevelKanji.GRADE3


def test_flags_are_true_for_any_nonzero_value():
    record = parse_record("U+3042,0,0,2,0,-1")
    assert record.tax_form_eligible is True
    assert record.investment_account_eligible is True


def test_fields_after_the_sixth_are_ignored():
    record = parse_record("U+4E00,1,1,1,1,1,99,not-a-number")
    assert record.grade_level_kanji is GradeLevelKanji.GRADE1


def test_combining_sequence_key():
    assert parse_record("U+304B+309A,5").key == "\u304b\u309a"


def test_non_numeric_field_raises_with_field_name():
    with pytest.raises(FormatError) as excinfo:
        parse_record("U+3042,1,X", line_number=7)
    assert excinfo.value.field == "name_category"
    assert excinfo.value.line_number == 7
    assert "line 7" in str(excinfo.value)


def test_out_of_range_enum_value_raises():
    with pytest.raises(FormatError) as excinfo:
        parse_record("U+3042,9")
    assert excinfo.value.field == "script_level"


def test_empty_key_raises():
    with pytest.raises(FormatError, match="no code point defined"):
        parse_record(",1,1")


def test_record_is_immutable():
    record = parse_record("U+3042,1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.script_level = ScriptLevel.LEVEL2


def test_placeholder_and_json():
    placeholder = InformationRecord.placeholder("う")
    assert placeholder.key == "う"
    assert placeholder.has_attributes is False

    data = json.loads(parse_record("U+6F22,1,1,1,3,1").to_json())
    assert data["key"] == "漢"
    assert data["script_level"] == 1
    assert data["grade_level_kanji"] == 3
    assert data["tax_form_eligible"] is True


def test_enum_labels():
    assert ScriptLevel.NON_KANJI.label == "NonKanji"
    assert NameCategory.COMMON_USE_VARIANT.label == "CommonUseVariant"
    assert GradeLevelKanji.GRADE6.label == "Grade6"


def test_labels_with_the_same_value_stay_distinct_per_enum():
    assert ScriptLevel.LEVEL1.label == "Level1"
    assert NameCategory.COMMON_USE.label == "CommonUse"
    assert GradeLevelKanji.GRADE1.label == "Grade1"
    assert ScriptLevel.NON_KANJI.label == "NonKanji"
    assert GradeLevelKanji.GRADE5.label == "Grade5"
    assert [level.label for level in ScriptLevel] == [
        "None", "Level1", "Level2", "Level3", "Level4", "NonKanji"]
