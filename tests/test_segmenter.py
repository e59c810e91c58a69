import types

from CharacterInformation.segmenter import (
    combine_surrogates,
    is_high_surrogate,
    is_low_surrogate,
    iter_user_characters,
    split_user_characters,
)


def _utf16(text):
    return text.encode("utf-16-le", "surrogatepass")


def test_bmp_and_supplementary_characters():
    assert split_user_characters("あ\U00020bb7い") == ["あ", "\U00020bb7", "い"]


def test_explicit_surrogate_pair_is_combined():
    assert split_user_characters("a\ud842\udfb7b") == ["a", "\U00020bb7", "b"]


def test_joined_pieces_reconstruct_the_input():
    for text in ["", "abc", "漢字", "\U00020bb7野家", "x\ud842\udfb7\U00020b9fy"]:
        pieces = split_user_characters(text)
        assert _utf16("".join(pieces)) == _utf16(text)


def test_unpaired_trailing_high_surrogate_is_yielded_alone():
    assert split_user_characters("a\ud842") == ["a", "\ud842"]


def test_lone_low_surrogate_and_high_before_high():
    assert split_user_characters("\udfb7a") == ["\udfb7", "a"]
    assert split_user_characters("\ud842\U00020bb7") == ["\ud842", "\U00020bb7"]


def test_combining_marks_stay_separate():
    assert split_user_characters("\u304b\u3099") == ["\u304b", "\u3099"]


def test_iterator_is_lazy_and_restartable():
    text = "あ\U00020bb7"
    first = iter_user_characters(text)
    assert isinstance(first, types.GeneratorType)
    assert next(first) == "あ"
    assert list(iter_user_characters(text)) == ["あ", "\U00020bb7"]
    assert list(first) == ["\U00020bb7"]


def test_surrogate_predicates():
    assert is_high_surrogate("\ud842") is True
    assert is_high_surrogate("\udfb7") is False
    assert is_low_surrogate("\udfb7") is True
    assert is_low_surrogate("a") is False
    assert is_high_surrogate("") is False
    assert combine_surrogates("\ud842", "\udfb7") == "\U00020bb7"
