from __future__ import annotations

from typing import Iterator, List

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF


def is_high_surrogate(ch: str) -> bool:
    return len(ch) == 1 and HIGH_SURROGATE_START <= ord(ch) <= HIGH_SURROGATE_END


def is_low_surrogate(ch: str) -> bool:
    return len(ch) == 1 and LOW_SURROGATE_START <= ord(ch) <= LOW_SURROGATE_END


def combine_surrogates(high: str, low: str) -> str:
    """Return the supplementary-plane character encoded by a surrogate pair."""
    return chr(0x10000 + ((ord(high) - HIGH_SURROGATE_START) << 10) + (ord(low) - LOW_SURROGATE_START))


def iter_user_characters(text: str) -> Iterator[str]:
    """
    Yield ``text`` one user character at a time.

    Supplementary characters already held as a single code point are yielded
    as they are. A high surrogate directly followed by a low surrogate (text
    decoded with ``surrogatepass``) is yielded as the one character the pair
    encodes, so it matches dictionary keys. Any other surrogate, including a
    trailing unpaired high surrogate, is yielded on its own.

    Combining marks are not merged with their base character.
    """
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if is_high_surrogate(ch) and i + 1 < length and is_low_surrogate(text[i + 1]):
            yield combine_surrogates(ch, text[i + 1])
            i += 2
            continue
        yield ch
        i += 1


def split_user_characters(text: str) -> List[str]:
    return list(iter_user_characters(text))
