"""
Password hashing utilities.
"""

import bcrypt

from core.passwords.errors import GeneratorEnvironmentError


def hash_password(password: str, cost_factor: int) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password
        cost_factor: log2 of the bcrypt iteration count

    Returns:
        Self-describing hash ($2b$<cost>$<salt><digest>)

    Raises:
        GeneratorEnvironmentError: If bcrypt rejects the cost factor
    """
    try:
        salt = bcrypt.gensalt(rounds=cost_factor)
    except ValueError as e:
        raise GeneratorEnvironmentError(
            f"Unsupported bcrypt cost factor {cost_factor}: {e}"
        ) from e
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(password: str, hashed: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        password: Plain text password to verify
        hashed: Bcrypt hash to compare against

    Returns:
        True if password matches, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(password.encode('utf-8'), hashed.encode('utf-8'))
    except ValueError:
        return False


def get_cost_factor(hashed: str) -> int:
    """Read the cost factor back out of a bcrypt hash."""
    parts = hashed.split("$")
    if len(parts) != 4 or not parts[2].isdigit():
        raise ValueError("Not a bcrypt hash")
    return int(parts[2])
