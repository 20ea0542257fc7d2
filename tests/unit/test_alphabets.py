"""Tests for character class alphabets."""

from core.models import CharacterClass
from core.passwords.alphabets import (
    AMBIGUOUS_CHARACTERS,
    LOWERCASE,
    NUMBERS,
    SPECIAL,
    UPPERCASE,
    class_alphabet,
    ordered_classes,
    strip_ambiguous,
    union_alphabet,
)


class TestClassAlphabets:
    def test_fixed_alphabets(self):
        assert class_alphabet(CharacterClass.UPPERCASE) == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        assert class_alphabet(CharacterClass.LOWERCASE) == "abcdefghijklmnopqrstuvwxyz"
        assert class_alphabet(CharacterClass.NUMBERS) == "0123456789"
        assert class_alphabet(CharacterClass.SPECIAL) == "!@#$%^&*()_-+=<>?"

    def test_easy_to_read_strips_ambiguous(self):
        assert class_alphabet(CharacterClass.NUMBERS, easy_to_read=True) == "23456789"
        upper = class_alphabet(CharacterClass.UPPERCASE, easy_to_read=True)
        assert "I" not in upper and "O" not in upper
        assert len(upper) == 24
        lower = class_alphabet(CharacterClass.LOWERCASE, easy_to_read=True)
        assert "l" not in lower
        assert len(lower) == 25

    def test_strip_ambiguous_preserves_order(self):
        assert strip_ambiguous("a1bIc0dOelf") == "abcdef"

    def test_every_filtered_alphabet_is_non_empty(self):
        for cls in CharacterClass:
            filtered = class_alphabet(cls, easy_to_read=True)
            assert filtered
            assert not set(filtered) & AMBIGUOUS_CHARACTERS


class TestUnionAlphabet:
    def test_canonical_order_regardless_of_input_order(self):
        enabled = [CharacterClass.SPECIAL, CharacterClass.NUMBERS, CharacterClass.UPPERCASE]
        assert union_alphabet(enabled) == UPPERCASE + NUMBERS + SPECIAL

    def test_all_classes(self):
        assert union_alphabet(list(CharacterClass)) == UPPERCASE + LOWERCASE + NUMBERS + SPECIAL

    def test_empty_falls_back_to_lowercase_and_numbers(self):
        assert union_alphabet([]) == LOWERCASE + NUMBERS

    def test_empty_fallback_is_filtered_too(self):
        assert union_alphabet([], easy_to_read=True) == strip_ambiguous(LOWERCASE + NUMBERS)

    def test_ordered_classes_drops_duplicates(self):
        classes = ordered_classes([CharacterClass.NUMBERS, CharacterClass.NUMBERS])
        assert classes == [CharacterClass.NUMBERS]
