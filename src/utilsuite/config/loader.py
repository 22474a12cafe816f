"""YAML設定ファイルの読み込みと環境変数展開"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from utilsuite.config.models import (
    CalculatorConfig,
    Config,
    LoggingConfig,
    StorageConfig,
)


class ConfigError(Exception):
    """設定関連の基底例外"""


class ConfigValidationError(ConfigError):
    """設定値のバリデーションエラー"""


class EnvironmentVariableError(ConfigError):
    """環境変数が見つからないエラー"""


# 環境変数パターン: ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def expand_env_vars(value: str) -> str:
    """文字列中の ${VAR_NAME} を環境変数の値に置換する

    Args:
        value: 置換対象の文字列

    Returns:
        環境変数が展開された文字列

    Raises:
        EnvironmentVariableError: 環境変数が未設定
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise EnvironmentVariableError(
                f"Environment variable '{var_name}' is not set"
            )
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    """データ構造を再帰的に走査し、文字列中の環境変数を展開する

    Args:
        data: 展開対象のデータ（dict, list, str, その他）

    Returns:
        環境変数が展開されたデータ
    """
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _validate_required_field(data: dict[str, Any], field: str, parent: str = "") -> Any:
    """必須フィールドの存在を検証する

    Args:
        data: 検証対象のdict
        field: フィールド名
        parent: 親フィールド名（エラーメッセージ用）

    Returns:
        フィールドの値

    Raises:
        ConfigValidationError: フィールドが存在しない
    """
    if field not in data or data[field] is None:
        full_path = f"{parent}.{field}" if parent else field
        raise ConfigValidationError(f"Required field '{full_path}' is missing")
    return data[field]


def _parse_storage(storage_data: dict[str, Any]) -> StorageConfig:
    defaults = StorageConfig(database_path="")
    return StorageConfig(
        database_path=str(
            _validate_required_field(storage_data, "database_path", "storage")
        ),
        history_key=storage_data.get("history_key", defaults.history_key),
        notes_key=storage_data.get("notes_key", defaults.notes_key),
        tasks_key=storage_data.get("tasks_key", defaults.tasks_key),
    )


def _parse_calculator(calculator_data: dict[str, Any] | None) -> CalculatorConfig:
    if not calculator_data:
        return CalculatorConfig()

    history_limit = calculator_data.get("history_limit", 50)
    if (
        isinstance(history_limit, bool)
        or not isinstance(history_limit, int)
        or history_limit < 1
    ):
        raise ConfigValidationError(
            "'calculator.history_limit' must be a positive integer"
        )
    return CalculatorConfig(history_limit=history_limit)


def load_config(path: str | Path) -> Config:
    """設定ファイルを読み込む

    Args:
        path: config.yaml のパス

    Returns:
        Config オブジェクト

    Raises:
        FileNotFoundError: ファイルが存在しない
        ConfigValidationError: 必須項目が欠落、または値が不正
        EnvironmentVariableError: 環境変数が未設定
        yaml.YAMLError: YAML構文エラー
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f)

    if not isinstance(raw_data, dict):
        raise ConfigValidationError("Config file must contain a mapping")

    # 環境変数を展開
    data = _expand_recursive(raw_data)

    # StorageConfig (必須)
    storage = _parse_storage(_validate_required_field(data, "storage"))

    # CalculatorConfig (optional)
    calculator = _parse_calculator(data.get("calculator"))

    # LoggingConfig (optional)
    logging_config: LoggingConfig | None = None
    logging_data = data.get("logging")
    if logging_data:
        logging_config = LoggingConfig(
            level=logging_data.get("level", "INFO"),
            format=logging_data.get(
                "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ),
            loggers=logging_data.get("loggers"),
        )

    return Config(storage=storage, calculator=calculator, logging=logging_config)
