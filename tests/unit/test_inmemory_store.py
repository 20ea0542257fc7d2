"""Tests for the in-memory password store."""

import pytest

from core.models import StoredPassword
from memory import InMemoryPasswordStore


@pytest.mark.asyncio
async def test_save_assigns_incrementing_ids():
    store = InMemoryPasswordStore()

    first = await store.save_password(StoredPassword(plaintext="a" * 8, hash="h1"))
    second = await store.save_password(StoredPassword(plaintext="b" * 8, hash="h2"))

    assert first.id == 1
    assert second.id == 2


@pytest.mark.asyncio
async def test_get_and_list():
    store = InMemoryPasswordStore()
    saved = await store.save_password(StoredPassword(plaintext="abcdefgh", hash="h"))

    assert await store.get_password(saved.id) == saved
    assert await store.get_password(99) is None
    assert await store.get_passwords() == [saved]


@pytest.mark.asyncio
async def test_save_does_not_mutate_input():
    store = InMemoryPasswordStore()
    entry = StoredPassword(plaintext="abcdefgh", hash="h")

    await store.save_password(entry)

    assert entry.id is None


@pytest.mark.asyncio
async def test_save_passwords_assigns_contiguous_ids():
    store = InMemoryPasswordStore()
    await store.save_password(StoredPassword(plaintext="first123", hash="h0"))

    saved = await store.save_passwords([
        StoredPassword(plaintext="a" * 8, hash="h1"),
        StoredPassword(plaintext="b" * 8, hash="h2"),
    ])

    assert [entry.id for entry in saved] == [2, 3]
    assert [entry.id for entry in await store.get_passwords()] == [1, 2, 3]


@pytest.mark.asyncio
async def test_save_passwords_empty_batch():
    store = InMemoryPasswordStore()

    assert await store.save_passwords([]) == []
    saved = await store.save_password(StoredPassword(plaintext="abcdefgh", hash="h"))
    assert saved.id == 1
