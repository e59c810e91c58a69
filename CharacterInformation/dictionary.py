"""Versioned character information dictionary."""

from __future__ import annotations

import importlib.resources as resources
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from CharacterInformation.errors import InvalidVersionError
from CharacterInformation.record import InformationRecord, parse_record
from CharacterInformation.segmenter import iter_user_characters
from CharacterInformation.util.logging_config import logger

SUPPORTED_MAJOR_VERSION = 1
COMMENT_PREFIX = '#'
VERSION_SEPARATOR = '.'

BUNDLED_DICTIONARY = 'CharacterInformation.txt'

Key = Union[str, int]


def _as_key(key: Key) -> str:
    # An int is a single code point, no surrogate handling.
    if isinstance(key, int):
        try:
            return chr(key)
        except (ValueError, OverflowError):
            # No record is ever stored under the empty key
            return ""
    return key


def parse_version(line: str) -> Tuple[int, int]:
    """
    Parse a ``major.minor`` version line.

    Raises:
        InvalidVersionError: The line is not two integers, or the major
            version is not supported
    """
    fields = line.split(VERSION_SEPARATOR)
    if len(fields) < 2:
        raise InvalidVersionError(f"Malformed version line '{line}'")
    try:
        major = int(fields[0])
    except ValueError:
        raise InvalidVersionError(f"Malformed version line '{line}'") from None
    if major != SUPPORTED_MAJOR_VERSION:
        raise InvalidVersionError(f"Unsupported dictionary version {major}", major=major)
    try:
        minor = int(fields[1])
    except ValueError:
        raise InvalidVersionError(f"Malformed version line '{line}'", major=major) from None
    return major, minor


def _significant_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip('\r\n')
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        yield line_number, line


class CharacterLookupTable:
    """
    Character to attribute lookup built from a dictionary source.

    The source is line oriented: blank lines and ``#`` comments are skipped,
    the first remaining line is the ``major.minor`` version and every line
    after it is a record. A table is replaced wholesale by each load and is
    read-only in between.
    """

    def __init__(self):
        self._major_version = 0
        self._minor_version = 0
        self._entries: Dict[str, InformationRecord] = {}

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "CharacterLookupTable":
        return cls().load(lines)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CharacterLookupTable":
        return cls().load_file(path)

    @classmethod
    def bundled(cls) -> "CharacterLookupTable":
        """Table loaded from the sample dictionary shipped with the package."""
        source = resources.files('CharacterInformation') / 'data' / BUNDLED_DICTIONARY
        return cls().load_text(source.read_text(encoding='utf-8-sig'))

    @property
    def major_version(self) -> int:
        return self._major_version

    @property
    def minor_version(self) -> int:
        return self._minor_version

    @property
    def version(self) -> str:
        return f"{self._major_version}.{self._minor_version}"

    def load(self, lines: Iterable[str]) -> "CharacterLookupTable":
        """
        Replace the table contents with the dictionary in ``lines``.

        Entries are collected separately and swapped in once every line has
        parsed, so a failing source leaves the previous contents in place.

        Raises:
            InvalidVersionError: Missing, malformed or unsupported version line
            FormatError: A record line could not be parsed
        """
        logger.debug("Loading character dictionary")
        version: Optional[Tuple[int, int]] = None
        entries: Dict[str, InformationRecord] = {}

        for line_number, line in _significant_lines(lines):
            if version is None:
                version = parse_version(line)
                continue

            record = parse_record(line, line_number=line_number)
            if record.key in entries:
                logger.warning(f"Duplicate key {record.key!r} on line {line_number}, keeping the later entry")
            entries[record.key] = record

        if version is None:
            raise InvalidVersionError("Dictionary has no version line")

        self._major_version, self._minor_version = version
        self._entries = entries
        logger.info(f"Loaded {len(entries)} character records (data version {self.version})")
        return self

    def load_text(self, text: str) -> "CharacterLookupTable":
        return self.load(text.splitlines())

    def load_file(self, path: Union[str, Path], encoding: str = 'utf-8-sig') -> "CharacterLookupTable":
        path = Path(path)
        logger.debug(f"Reading character dictionary from {path}")
        with path.open('r', encoding=encoding, newline='') as f:
            return self.load(f)

    def lookup(self, key: Key) -> Optional[InformationRecord]:
        """Return the record stored for ``key`` or None."""
        return self._entries.get(_as_key(key))

    def lookup_or_default(self, key: Key) -> InformationRecord:
        """Return the record stored for ``key``, or an attribute-less placeholder for it."""
        key = _as_key(key)
        record = self._entries.get(key)
        if record is not None:
            return record
        return InformationRecord.placeholder(key)

    def lookup_text(self, text: str) -> Iterator[Tuple[str, Optional[InformationRecord]]]:
        """Yield ``(user character, record or None)`` for every character in ``text``."""
        for chars in iter_user_characters(text):
            yield chars, self._entries.get(chars)

    def records(self) -> Iterable[InformationRecord]:
        return self._entries.values()

    def __getitem__(self, key: Key) -> Optional[InformationRecord]:
        return self.lookup(key)

    def __contains__(self, key) -> bool:
        if not isinstance(key, (str, int)):
            return False
        return _as_key(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CharacterLookupTable(version={self.version!r}, records={len(self)})"
