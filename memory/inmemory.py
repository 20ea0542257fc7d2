"""
Memory System

In-memory persistence for generated passwords.
"""

from dataclasses import replace
from typing import Dict, List, Optional
import asyncio
import logging

from core.interfaces import IPasswordStore
from core.models import StoredPassword

logger = logging.getLogger(__name__)


class InMemoryPasswordStore(IPasswordStore):
    """
    Simple in-memory storage.

    Note: Data is lost on restart.
    """

    def __init__(self):
        self._passwords: Dict[int, StoredPassword] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

        logger.info("In-memory password store initialized")

    async def save_password(self, password: StoredPassword) -> StoredPassword:
        """Persist an entry and return it with its assigned id"""
        async with self._lock:
            stored = replace(password, id=self._next_id)
            self._passwords[stored.id] = stored
            self._next_id += 1

        logger.debug(f"Stored password entry #{stored.id}")
        return stored

    async def save_passwords(self, passwords: List[StoredPassword]) -> List[StoredPassword]:
        """Persist a batch of entries; either all are stored or none are"""
        async with self._lock:
            stored = [
                replace(password, id=self._next_id + offset)
                for offset, password in enumerate(passwords)
            ]
            self._passwords.update((entry.id, entry) for entry in stored)
            self._next_id += len(stored)

        logger.debug(f"Stored {len(stored)} password entries")
        return stored

    async def get_password(self, password_id: int) -> Optional[StoredPassword]:
        """Get a stored entry by id"""
        return self._passwords.get(password_id)

    async def get_passwords(self) -> List[StoredPassword]:
        """Get all stored entries in insertion order"""
        return list(self._passwords.values())
