"""設定管理モジュール"""

from dyansu.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
from dyansu.config.models import (
    DEFAULT_APOLOGY_MESSAGE,
    DEFAULT_SYSTEM_PROMPT,
    Config,
    DiscordConfig,
    LLMConfig,
    LoggingConfig,
    PersonaConfig,
    ResponseConfig,
)

__all__ = [
    "DEFAULT_APOLOGY_MESSAGE",
    "DEFAULT_SYSTEM_PROMPT",
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "DiscordConfig",
    "EnvironmentVariableError",
    "LLMConfig",
    "LoggingConfig",
    "PersonaConfig",
    "ResponseConfig",
    "expand_env_vars",
    "load_config",
]
