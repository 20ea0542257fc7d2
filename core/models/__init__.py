# Core models
from core.models.generation import (
    CharacterClass,
    GenerationOptions,
    GenerationRequest,
    GeneratedPassword,
    BatchResult,
    StoredPassword,
)
