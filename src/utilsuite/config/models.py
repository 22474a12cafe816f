"""設定データクラス"""

from dataclasses import dataclass, field


@dataclass
class StorageConfig:
    """永続化設定

    キーの既定値は以前のリリースと同じ保存先を指す。
    """

    database_path: str
    history_key: str = "CalculatorHistory"
    notes_key: str = "SavedNotes"
    tasks_key: str = "SavedTodos"


@dataclass
class CalculatorConfig:
    """電卓設定"""

    history_limit: int = 50


@dataclass
class LoggingConfig:
    """ログ設定"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    loggers: dict[str, str] | None = None


@dataclass
class Config:
    """アプリケーション設定"""

    storage: StorageConfig
    calculator: CalculatorConfig = field(default_factory=CalculatorConfig)
    logging: LoggingConfig | None = None
