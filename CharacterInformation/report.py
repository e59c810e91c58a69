"""Text reports over a loaded CharacterLookupTable: statistics and per-character descriptions."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from CharacterInformation.codepoints import format_code_points
from CharacterInformation.dictionary import CharacterLookupTable
from CharacterInformation.record import GradeLevelKanji, InformationRecord, NameCategory, ScriptLevel
from CharacterInformation.segmenter import iter_user_characters

NO_DATA = "no-data"
TAX_FORM_LABEL = "e-Tax"
INVESTMENT_ACCOUNT_LABEL = "NISA"


@dataclass
class AttributeStatistics:
    records: int = 0
    script_levels: Counter = field(default_factory=Counter)
    name_categories: Counter = field(default_factory=Counter)
    tax_form: Counter = field(default_factory=Counter)
    grade_levels: Counter = field(default_factory=Counter)
    investment_account: Counter = field(default_factory=Counter)


def collect_statistics(table: CharacterLookupTable) -> AttributeStatistics:
    stats = AttributeStatistics()
    for record in table.records():
        stats.records += 1
        stats.script_levels[record.script_level] += 1
        stats.name_categories[record.name_category] += 1
        stats.tax_form[record.tax_form_eligible] += 1
        stats.grade_levels[record.grade_level_kanji] += 1
        stats.investment_account[record.investment_account_eligible] += 1
    return stats


def _format_counter(title: str, counter: Counter, default, default_label: str) -> List[str]:
    lines = [title]
    total = without_default = 0
    for value in sorted(counter):
        count = counter[value]
        label = value.label if hasattr(value, "label") else str(value)
        lines.append(f" {label}:{count}")
        total += count
        if value != default:
            without_default += count
    lines.append(" -----")
    lines.append(f" Total:{total} (without {default_label}:{without_default})")
    lines.append("")
    return lines


def format_statistics(table: CharacterLookupTable) -> str:
    """
    Summarize how many records carry each attribute value.

    Every section lists the counts per value, then the overall total and the
    total without the default value.
    """
    stats = collect_statistics(table)
    lines = [
        f"DataVer:{table.version}",
        f"Records:{stats.records}",
        "",
    ]
    lines += _format_counter("ScriptLevel", stats.script_levels, ScriptLevel.NONE, "None")
    lines += _format_counter("NameCategory", stats.name_categories, NameCategory.NONE, "None")
    lines += _format_counter(TAX_FORM_LABEL, stats.tax_form, False, "False")
    lines += _format_counter("GradeLevelKanji", stats.grade_levels, GradeLevelKanji.NONE, "None")
    lines += _format_counter(INVESTMENT_ACCOUNT_LABEL, stats.investment_account, False, "False")
    return "\n".join(lines)


def record_labels(record: InformationRecord) -> List[str]:
    """Labels for every attribute of ``record`` that is not at its default."""
    labels = []
    if record.script_level != ScriptLevel.NONE:
        labels.append(record.script_level.label)
    if record.name_category != NameCategory.NONE:
        labels.append(record.name_category.label)
    if record.tax_form_eligible:
        labels.append(TAX_FORM_LABEL)
    if record.grade_level_kanji != GradeLevelKanji.NONE:
        labels.append(record.grade_level_kanji.label)
    if record.investment_account_eligible:
        labels.append(INVESTMENT_ACCOUNT_LABEL)
    return labels


def describe_character(chars: str, record: Optional[InformationRecord]) -> str:
    line = f"[{chars}]({format_code_points(chars)}):"
    if record is None:
        return f"{line} {NO_DATA}"
    labels = record_labels(record)
    if labels:
        line += " " + " ".join(labels)
    return line


def describe_text(table: CharacterLookupTable, text: str) -> str:
    """The input line followed by one numbered description per user character."""
    lines = [text]
    for index, chars in enumerate(iter_user_characters(text), start=1):
        lines.append(f"[{index}]:{describe_character(chars, table.lookup(chars))}")
    return "\n".join(lines)
