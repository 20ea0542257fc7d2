"""
Generation Models

Models for password generation requests and their results.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, FrozenSet
from enum import Enum


class CharacterClass(Enum):
    """Character classes, declared in canonical alphabet order"""
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SPECIAL = "special"


@dataclass(frozen=True)
class GenerationOptions:
    """Character class toggles plus the easy-to-read filter"""
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    special: bool = True
    easy_to_read: bool = False

    @property
    def enabled_classes(self) -> FrozenSet[CharacterClass]:
        flags = {
            CharacterClass.UPPERCASE: self.uppercase,
            CharacterClass.LOWERCASE: self.lowercase,
            CharacterClass.NUMBERS: self.numbers,
            CharacterClass.SPECIAL: self.special,
        }
        return frozenset(cls for cls, enabled in flags.items() if enabled)

    def to_dict(self) -> Dict:
        return {
            "uppercase": self.uppercase,
            "lowercase": self.lowercase,
            "numbers": self.numbers,
            "special": self.special,
            "easyToRead": self.easy_to_read,
        }


@dataclass(frozen=True)
class GenerationRequest:
    """
    A request for a batch of passwords.
    Ranges are enforced by the batch orchestrator, not here.
    """
    count: int = 5
    length: int = 12
    cost_factor: int = 10
    options: GenerationOptions = field(default_factory=GenerationOptions)

    def to_dict(self) -> Dict:
        return {
            "count": self.count,
            "length": self.length,
            "costFactor": self.cost_factor,
            "options": self.options.to_dict(),
        }


@dataclass(frozen=True)
class GeneratedPassword:
    """One plaintext password and its bcrypt hash"""
    password: str
    hash: str

    def to_dict(self) -> Dict:
        return {"password": self.password, "hash": self.hash}


@dataclass
class BatchResult:
    """
    Ordered output of a batch run.
    Notices report non-error conditions such as a substituted default class.
    """
    passwords: List[GeneratedPassword] = field(default_factory=list)
    notices: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.passwords)

    def to_dict(self) -> Dict:
        return {
            "generatedPasswords": [p.to_dict() for p in self.passwords],
            "notices": list(self.notices),
        }


@dataclass
class StoredPassword:
    """A persisted generation output"""
    plaintext: str
    hash: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: Optional[int] = None

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "plaintext": self.plaintext,
            "hash": self.hash,
            "created_at": self.created_at.isoformat(),
        }
