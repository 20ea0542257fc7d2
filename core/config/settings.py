"""
Configuration System

Centralized configuration: request limits, request defaults, batch
concurrency, persistence and server settings.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
import yaml
import logging

from core.models.generation import GenerationOptions, GenerationRequest

logger = logging.getLogger(__name__)

# Work factors bcrypt itself accepts
BCRYPT_MIN_ROUNDS = 4
BCRYPT_MAX_ROUNDS = 31


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_bool_or(name: str, fallback: bool) -> bool:
    """Environment value when the variable is set, otherwise `fallback`"""
    if os.getenv(name) is None:
        return bool(fallback)
    return _env_bool(name)


@dataclass
class GenerationLimits:
    """Inclusive ranges accepted for each request field"""
    min_count: int = 1
    max_count: int = 100
    min_length: int = 8
    max_length: int = 32
    min_cost_factor: int = 10
    max_cost_factor: int = 14

    def __post_init__(self):
        for name, (low, high) in self.ranges().items():
            if low > high:
                raise ValueError(f"Invalid {name} limits: {low} > {high}")
        if self.min_count < 1 or self.min_length < 1:
            raise ValueError("count and length limits must be positive")
        if self.min_cost_factor < BCRYPT_MIN_ROUNDS or self.max_cost_factor > BCRYPT_MAX_ROUNDS:
            raise ValueError(
                f"Cost factor limits must stay within bcrypt's "
                f"{BCRYPT_MIN_ROUNDS}..{BCRYPT_MAX_ROUNDS}"
            )

    def ranges(self) -> Dict[str, Tuple[int, int]]:
        """Field name -> (min, max), keyed by wire field names"""
        return {
            "count": (self.min_count, self.max_count),
            "length": (self.min_length, self.max_length),
            "costFactor": (self.min_cost_factor, self.max_cost_factor),
        }


@dataclass
class GenerationDefaults:
    """Values used when a request omits a field"""
    count: int = 5
    length: int = 12
    cost_factor: int = 10
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    special: bool = True
    easy_to_read: bool = False

    def to_request(self) -> GenerationRequest:
        return GenerationRequest(
            count=self.count,
            length=self.length,
            cost_factor=self.cost_factor,
            options=GenerationOptions(
                uppercase=self.uppercase,
                lowercase=self.lowercase,
                numbers=self.numbers,
                special=self.special,
                easy_to_read=self.easy_to_read,
            ),
        )


@dataclass
class ConcurrencyConfig:
    """Batch execution. max_workers=1 runs cycles sequentially."""
    max_workers: int = 1

    def __post_init__(self):
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")

    @classmethod
    def from_env(cls) -> "ConcurrencyConfig":
        return cls(max_workers=int(os.getenv("MAX_WORKERS", "1")))


@dataclass
class StorageConfig:
    """Whether generated passwords are handed to the password store"""
    persist_generated: bool = False

    @classmethod
    def from_env(cls) -> "StorageConfig":
        return cls(persist_generated=_env_bool("PERSIST_PASSWORDS"))


@dataclass
class ServerConfig:
    """HTTP server settings"""
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False

    @classmethod
    def from_env(cls) -> "ServerConfig":
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8080")),
            debug=_env_bool("DEBUG"),
        )


@dataclass
class Settings:
    """
    Master settings object.
    Combines all configuration into one place.
    """
    limits: GenerationLimits = field(default_factory=GenerationLimits)
    defaults: GenerationDefaults = field(default_factory=GenerationDefaults)
    concurrency: ConcurrencyConfig = field(default_factory=ConcurrencyConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    # Logging
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from environment variables"""
        return cls(
            concurrency=ConcurrencyConfig.from_env(),
            storage=StorageConfig.from_env(),
            server=ServerConfig.from_env(),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    @classmethod
    def from_yaml(cls, path: str) -> "Settings":
        """Load settings from YAML file"""
        with open(path) as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}

        concurrency_data = data.get("concurrency", {})
        storage_data = data.get("storage", {})
        server_data = data.get("server", {})
        env_server = ServerConfig.from_env()

        return cls(
            limits=GenerationLimits(**data.get("limits", {})),
            defaults=GenerationDefaults(**data.get("defaults", {})),
            concurrency=ConcurrencyConfig(
                max_workers=int(os.getenv("MAX_WORKERS", concurrency_data.get("max_workers", 1)))
            ),
            storage=StorageConfig(
                persist_generated=_env_bool_or(
                    "PERSIST_PASSWORDS", storage_data.get("persist_generated", False)
                )
            ),
            # Values from the environment win, as deployments set them
            server=ServerConfig(
                host=os.getenv("HOST", server_data.get("host", env_server.host)),
                port=int(os.getenv("PORT", server_data.get("port", env_server.port))),
                debug=_env_bool_or("DEBUG", server_data.get("debug", False)),
            ),
            log_level=os.getenv("LOG_LEVEL", data.get("log_level", "INFO")),
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings"""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def init_settings(config_path: str = None) -> Settings:
    """Initialize settings from a config file, CONFIG_PATH, or config/default.yaml"""
    global _settings
    config_path = config_path or os.getenv("CONFIG_PATH")
    if config_path:
        _settings = Settings.from_yaml(config_path)
    else:
        yaml_path = os.path.join(
            os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
            "config",
            "default.yaml"
        )
        if os.path.exists(yaml_path):
            logger.info(f"Loading config from {yaml_path}")
            _settings = Settings.from_yaml(yaml_path)
        else:
            logger.info(f"No YAML config found at {yaml_path}, using defaults")
            _settings = Settings.load()
    return _settings
