"""
Random password generation.

Characters are drawn with `randrange`, which rejection-samples internally,
so every index into the alphabet is equally likely. The default source is
`secrets.SystemRandom`; a seeded `random.Random` can be passed for
reproducible output in tests.
"""

import logging
import secrets
from typing import Iterable, List, Optional, Protocol

from core.models.generation import CharacterClass
from core.passwords.alphabets import class_alphabet, ordered_classes, union_alphabet
from core.passwords.errors import GeneratorEnvironmentError

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that yields unbiased integers in [0, n)"""

    def randrange(self, stop: int) -> int:
        ...


# SystemRandom reads os.urandom and is safe to share between threads
_system_random = secrets.SystemRandom()


def _draw(rng: RandomSource, n: int) -> int:
    try:
        return rng.randrange(n)
    except (OSError, NotImplementedError) as e:
        raise GeneratorEnvironmentError(f"Random source unavailable: {e}") from e


def generate_password(
    length: int,
    enabled_classes: Iterable[CharacterClass],
    easy_to_read: bool = False,
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Generate one random password.

    Args:
        length: Number of characters (validated by the caller)
        enabled_classes: Character classes to draw from; may be empty
        easy_to_read: Strip ambiguous characters from every alphabet
        rng: Random source (default: system CSPRNG)

    Returns:
        Password of exactly `length` characters from the union alphabet

    Coverage of each enabled class is approximate: one random position per
    class is overwritten with a character of that class, and a later class
    may land on the position an earlier one used.
    """
    rng = rng or _system_random
    classes = ordered_classes(enabled_classes)
    alphabet = union_alphabet(classes, easy_to_read)

    password: List[str] = [alphabet[_draw(rng, len(alphabet))] for _ in range(length)]

    # Force at least one character from each enabled class
    for char_class in classes:
        class_chars = class_alphabet(char_class, easy_to_read)
        position = _draw(rng, length)
        password[position] = class_chars[_draw(rng, len(class_chars))]

    return "".join(password)
