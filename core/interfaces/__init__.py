"""
Core Interfaces - The contracts that enable modularity

Persistence is an injected capability; the generation core never depends
on it.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from core.models.generation import StoredPassword


class IPasswordStore(ABC):
    """Interface for generated password persistence"""

    @abstractmethod
    async def save_password(self, password: StoredPassword) -> StoredPassword:
        """Persist an entry and return it with its assigned id"""
        pass

    @abstractmethod
    async def save_passwords(self, passwords: List[StoredPassword]) -> List[StoredPassword]:
        """Persist a batch of entries; either all are stored or none are"""
        pass

    @abstractmethod
    async def get_password(self, password_id: int) -> Optional[StoredPassword]:
        """Get a stored entry by id"""
        pass

    @abstractmethod
    async def get_passwords(self) -> List[StoredPassword]:
        """Get all stored entries in insertion order"""
        pass
