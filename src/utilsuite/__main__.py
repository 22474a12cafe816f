"""アプリケーションのエントリポイント"""

import logging
import os
import sys
from pathlib import Path

from utilsuite.application.services import UtilitySuite
from utilsuite.config import ConfigError, LoggingConfig, load_config
from utilsuite.infrastructure.persistence import DatabaseManager, SQLiteSlotRepository

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "UTILSUITE_CONFIG"


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, uses defaults.
    """
    if config is None:
        return

    # Get root logger
    root_logger = logging.getLogger()

    # Set root level
    level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Update handler format if specified
    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    # Configure individual loggers
    if config.loggers:
        for logger_name, logger_level in config.loggers.items():
            individual_logger = logging.getLogger(logger_name)
            individual_level = getattr(logging, logger_level.upper(), logging.INFO)
            individual_logger.setLevel(individual_level)
            logger.debug(
                "Set logger '%s' to level %s", logger_name, logger_level.upper()
            )


def main() -> None:
    """設定を読み込み、永続データを開いて各ツールを初期化する"""
    config_path = Path(os.environ.get(CONFIG_ENV_VAR, "config.yaml"))
    if not config_path.exists():
        logger.error("%s not found", config_path)
        sys.exit(1)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        logger.error("Failed to load config: %s", e)
        sys.exit(1)

    # Apply logging configuration
    configure_logging(config.logging)

    # Initialize database
    db_manager = DatabaseManager(config.storage.database_path)
    db_manager.create_tables()

    try:
        slot = SQLiteSlotRepository(db_manager.get_session)
        suite = UtilitySuite.create(config, slot)
        suite.load()

        stats = suite.tasks.stats()
        logger.info(
            "Ready: %d calculations, %d notes, %d tasks (%d pending, %d done)",
            len(suite.history),
            len(suite.notes),
            stats.total,
            stats.pending,
            stats.completed,
        )
    finally:
        db_manager.close()


def run() -> None:
    """Run the main function."""
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
