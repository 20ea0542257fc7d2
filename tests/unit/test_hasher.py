"""Tests for bcrypt hashing."""

import pytest

from core.passwords.errors import GeneratorEnvironmentError
from core.passwords.hasher import get_cost_factor, hash_password, verify_password


class TestHashPassword:
    def test_self_describing_format(self):
        hashed = hash_password("Correct-Horse-9", 10)

        assert hashed.startswith("$2b$10$")
        # $2b$ + 2-digit cost + $ + 22 salt chars + 31 digest chars
        assert len(hashed) == 60
        assert get_cost_factor(hashed) == 10

    def test_verify_round_trip(self):
        hashed = hash_password("Correct-Horse-9", 10)

        assert verify_password("Correct-Horse-9", hashed) is True
        assert verify_password("correct-horse-9", hashed) is False
        assert verify_password("", hashed) is False

    def test_fresh_salt_each_call(self):
        first = hash_password("same-password", 10)
        second = hash_password("same-password", 10)

        assert first != second
        assert verify_password("same-password", first)
        assert verify_password("same-password", second)

    def test_cost_factor_encoded(self):
        assert get_cost_factor(hash_password("abcdefgh", 11)) == 11

    @pytest.mark.parametrize("cost_factor", [3, 32])
    def test_unsupported_cost_factor_is_environment_error(self, cost_factor):
        with pytest.raises(GeneratorEnvironmentError, match="Unsupported bcrypt cost factor"):
            hash_password("abcdefgh", cost_factor)


class TestVerifyPassword:
    def test_malformed_hash_is_false(self):
        assert verify_password("abcdefgh", "not-a-bcrypt-hash") is False

    def test_get_cost_factor_rejects_non_bcrypt(self):
        with pytest.raises(ValueError):
            get_cost_factor("plain-text")
