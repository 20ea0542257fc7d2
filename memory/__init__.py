"""
Memory System

Persistence for generated passwords.
"""

from memory.inmemory import InMemoryPasswordStore

__all__ = ["InMemoryPasswordStore"]
