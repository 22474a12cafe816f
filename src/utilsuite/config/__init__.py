"""設定管理モジュール"""

from utilsuite.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
from utilsuite.config.models import (
    CalculatorConfig,
    Config,
    LoggingConfig,
    StorageConfig,
)

__all__ = [
    "CalculatorConfig",
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "EnvironmentVariableError",
    "LoggingConfig",
    "StorageConfig",
    "expand_env_vars",
    "load_config",
]
