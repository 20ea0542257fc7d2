"""
Character class alphabets.

Each class has a fixed alphabet. The union alphabet is always assembled in
canonical order (uppercase, lowercase, numbers, special) so the same random
stream yields the same password.
"""

import string
from typing import Dict, Iterable, List

from core.models.generation import CharacterClass

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SPECIAL = "!@#$%^&*()_-+=<>?"

# Glyphs that are easily confused with one another in most fonts
AMBIGUOUS_CHARACTERS = frozenset("1lI0O|")

CANONICAL_ORDER: List[CharacterClass] = [
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.NUMBERS,
    CharacterClass.SPECIAL,
]

_ALPHABETS: Dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: UPPERCASE,
    CharacterClass.LOWERCASE: LOWERCASE,
    CharacterClass.NUMBERS: NUMBERS,
    CharacterClass.SPECIAL: SPECIAL,
}

# Used when no class is enabled
DEFAULT_CLASSES = (CharacterClass.LOWERCASE, CharacterClass.NUMBERS)


def strip_ambiguous(alphabet: str) -> str:
    """Remove visually ambiguous characters, preserving order."""
    return "".join(ch for ch in alphabet if ch not in AMBIGUOUS_CHARACTERS)


def class_alphabet(char_class: CharacterClass, easy_to_read: bool = False) -> str:
    """Alphabet for a single class, optionally easy-to-read filtered."""
    alphabet = _ALPHABETS[char_class]
    return strip_ambiguous(alphabet) if easy_to_read else alphabet


def ordered_classes(enabled: Iterable[CharacterClass]) -> List[CharacterClass]:
    """Enabled classes in canonical order, duplicates removed."""
    enabled = set(enabled)
    return [cls for cls in CANONICAL_ORDER if cls in enabled]


def union_alphabet(enabled: Iterable[CharacterClass], easy_to_read: bool = False) -> str:
    """
    Concatenate the alphabets of the enabled classes.

    Falls back to lowercase + numbers when nothing is enabled. Callers that
    want the substitution to be visible should enable a class themselves.
    """
    classes = ordered_classes(enabled) or list(DEFAULT_CLASSES)
    return "".join(class_alphabet(cls, easy_to_read) for cls in classes)
