"""
Pydantic models for the password generation API.

Field names follow the JSON wire format (camelCase). Numeric ranges are left
to the batch orchestrator so range errors are reported the same way for
every caller.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt
from datetime import datetime
from typing import List, Optional

from core.config.settings import GenerationDefaults
from core.models.generation import BatchResult, GenerationOptions, GenerationRequest


class GenerationOptionsModel(BaseModel):
    """Character class toggles. Omitted flags take the configured defaults."""
    uppercase: Optional[StrictBool] = None
    lowercase: Optional[StrictBool] = None
    numbers: Optional[StrictBool] = None
    special: Optional[StrictBool] = None
    easy_to_read: Optional[StrictBool] = Field(default=None, alias="easyToRead")

    model_config = ConfigDict(populate_by_name=True)


class GeneratePasswordsRequest(BaseModel):
    """Request model for batch generation."""
    count: Optional[StrictInt] = None
    length: Optional[StrictInt] = None
    cost_factor: Optional[StrictInt] = Field(default=None, alias="costFactor")
    options: GenerationOptionsModel = Field(default_factory=GenerationOptionsModel)

    model_config = ConfigDict(populate_by_name=True)

    def to_domain(self, defaults: GenerationDefaults) -> GenerationRequest:
        """Fill omitted fields from `defaults`."""
        def pick(value, default):
            return default if value is None else value

        opts = self.options
        return GenerationRequest(
            count=pick(self.count, defaults.count),
            length=pick(self.length, defaults.length),
            cost_factor=pick(self.cost_factor, defaults.cost_factor),
            options=GenerationOptions(
                uppercase=pick(opts.uppercase, defaults.uppercase),
                lowercase=pick(opts.lowercase, defaults.lowercase),
                numbers=pick(opts.numbers, defaults.numbers),
                special=pick(opts.special, defaults.special),
                easy_to_read=pick(opts.easy_to_read, defaults.easy_to_read),
            ),
        )


class GeneratedPasswordModel(BaseModel):
    """One password and its bcrypt hash."""
    password: str
    hash: str


class GeneratePasswordsResponse(BaseModel):
    """Response model for batch generation."""
    generated_passwords: List[GeneratedPasswordModel] = Field(alias="generatedPasswords")
    notices: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_result(cls, result: BatchResult) -> "GeneratePasswordsResponse":
        return cls(
            generated_passwords=[
                GeneratedPasswordModel(password=p.password, hash=p.hash)
                for p in result.passwords
            ],
            notices=result.notices,
        )


class StoredPasswordModel(BaseModel):
    """A persisted generation output."""
    id: int
    plaintext: str
    hash: str
    created_at: datetime


class FieldErrorModel(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error body for failed generation requests."""
    message: str
    errors: List[FieldErrorModel] = Field(default_factory=list)
