"""
Password generation module.

Provides:
- Random password generation over configurable character classes
- Password hashing and verification (bcrypt)
- Validated batch generation
- CSV / text exports of a batch
"""

from .errors import (
    PasswordGenerationError,
    InvalidRequestError,
    GeneratorEnvironmentError,
    PartialBatchError,
)
from .generator import generate_password
from .hasher import hash_password, verify_password, get_cost_factor
from .batch import PasswordBatchGenerator, generate_batch, validate_request
from .export import to_csv, to_text, to_clipboard_text

__all__ = [
    # Errors
    "PasswordGenerationError",
    "InvalidRequestError",
    "GeneratorEnvironmentError",
    "PartialBatchError",
    # Generation
    "generate_password",
    # Hashing
    "hash_password",
    "verify_password",
    "get_cost_factor",
    # Batch
    "PasswordBatchGenerator",
    "generate_batch",
    "validate_request",
    # Export
    "to_csv",
    "to_text",
    "to_clipboard_text",
]
