"""エントリポイントのテスト"""

import logging
from pathlib import Path
from typing import Generator

import pytest

from utilsuite.__main__ import CONFIG_ENV_VAR, configure_logging, main
from utilsuite.config import LoggingConfig
from utilsuite.infrastructure.persistence import DatabaseManager, SQLiteSlotRepository


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """ルートロガーと個別ロガーのレベルを元に戻すフィクスチャ"""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_formatters = [h.formatter for h in root_logger.handlers]
    sql_logger = logging.getLogger("sqlalchemy.engine")
    original_sql_level = sql_logger.level

    yield

    root_logger.setLevel(original_level)
    for handler, formatter in zip(root_logger.handlers, original_formatters):
        handler.setFormatter(formatter)
    sql_logger.setLevel(original_sql_level)


class TestConfigureLogging:
    """configure_logging関数のテスト"""

    def test_none_keeps_defaults(self, restore_logging: None) -> None:
        """設定がない場合はレベルを変更しない"""
        before = logging.getLogger().level

        configure_logging(None)

        assert logging.getLogger().level == before

    def test_sets_levels(self, restore_logging: None) -> None:
        """ルートと個別ロガーのレベルが設定される"""
        configure_logging(
            LoggingConfig(level="debug", loggers={"sqlalchemy.engine": "warning"})
        )

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, restore_logging: None) -> None:
        """不明なレベル名はINFOとして扱う"""
        configure_logging(LoggingConfig(level="verbose"))

        assert logging.getLogger().level == logging.INFO


class TestMain:
    """main関数のテスト"""

    def test_missing_config_exits(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """設定ファイルがない場合は終了コード1で終了する"""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_invalid_config_exits(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """設定が不正な場合は終了コード1で終了する"""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("calculator:\n  history_limit: 5\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_initializes_database(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """データベースを作成して保存済みデータを読み込む"""
        db_path = tmp_path / "data" / "utilsuite.db"
        seeded = DatabaseManager(str(db_path))
        seeded.create_tables()
        SQLiteSlotRepository(seeded.get_session).write("SavedNotes", b"[]")
        seeded.close()

        config_path = tmp_path / "config.yaml"
        config_path.write_text(f"storage:\n  database_path: \"{db_path}\"\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))

        with caplog.at_level(logging.INFO):
            main()

        assert db_path.exists()
        assert "Ready: 0 calculations, 0 notes, 0 tasks" in caplog.text
