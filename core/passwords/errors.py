"""
Password generation errors.

Validation problems, environment failures and aborted batches are kept
distinct so callers can map them to different outcomes.
"""

from typing import Any, Dict, List, Optional


class PasswordGenerationError(Exception):
    """Base class for password generation failures."""


class InvalidRequestError(PasswordGenerationError, ValueError):
    """
    A request field is outside its documented range.

    Attributes:
        field: Name of the first offending field
        value: Value supplied for that field
        errors: Every problem found, as {"field", "value", "message"} dicts
    """

    def __init__(self, errors: List[Dict[str, Any]]):
        if not errors:
            raise ValueError("InvalidRequestError needs at least one error")
        self.errors = errors
        first = errors[0]
        self.field: str = first["field"]
        self.value: Any = first.get("value")
        self.message: str = first["message"]
        super().__init__(f"{self.field}: {self.message}")


class GeneratorEnvironmentError(PasswordGenerationError, RuntimeError):
    """Random source failure or hashing primitive misconfiguration."""


class PartialBatchError(PasswordGenerationError, RuntimeError):
    """A single cycle failed, so the whole batch was abandoned."""

    def __init__(self, index: int, count: int, cause: Optional[BaseException] = None):
        self.index = index
        self.count = count
        self.cause = cause
        super().__init__(
            f"Batch aborted at password {index + 1} of {count}: {cause}"
        )
