from core.config.settings import (
    Settings,
    GenerationLimits,
    GenerationDefaults,
    ConcurrencyConfig,
    StorageConfig,
    ServerConfig,
    get_settings,
    init_settings,
)
