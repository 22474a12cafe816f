"""SQLite implementation of PersistentSlot."""

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from utilsuite.infrastructure.persistence.models import SlotModel

logger = logging.getLogger(__name__)


class SQLiteSlotRepository:
    """SQLite 版 PersistentSlot 実装

    キーごとにシリアライズ済みのコレクションを1行として保存する。
    読み書きの失敗は例外にせず、ログを出して None / False を返す。
    """

    def __init__(
        self,
        session_factory: Callable[[], AbstractContextManager[Session]],
    ) -> None:
        """初期化

        Args:
            session_factory: セッション生成関数
        """
        self._session_factory = session_factory

    def read(self, key: str) -> bytes | None:
        """キーに保存されたデータを読み込む

        Args:
            key: スロットのキー

        Returns:
            保存されたバイト列、未保存または読み込み失敗の場合 None
        """
        try:
            with self._session_factory() as session:
                model = session.get(SlotModel, key)
                if model is None:
                    return None
                return bytes(model.data)
        except SQLAlchemyError as e:
            logger.warning("Failed to read slot %s: %s", key, e)
            return None

    def write(self, key: str, data: bytes) -> bool:
        """キーにデータを書き込む（upsert）

        Args:
            key: スロットのキー
            data: 保存するバイト列

        Returns:
            書き込みに成功した場合 True
        """
        try:
            with self._session_factory() as session:
                model = SlotModel(
                    key=key,
                    data=data,
                    updated_at=datetime.now(timezone.utc),
                )
                session.merge(model)
                session.commit()
        except SQLAlchemyError as e:
            logger.warning("Failed to write slot %s: %s", key, e)
            return False
        logger.debug("Wrote slot %s (%d bytes)", key, len(data))
        return True

    def delete(self, key: str) -> bool:
        """スロットを削除する

        Args:
            key: 削除するスロットのキー

        Returns:
            削除した場合 True、存在しないか失敗した場合 False
        """
        try:
            with self._session_factory() as session:
                model = session.get(SlotModel, key)
                if model is None:
                    return False
                session.delete(model)
                session.commit()
        except SQLAlchemyError as e:
            logger.warning("Failed to delete slot %s: %s", key, e)
            return False
        return True

    def keys(self) -> list[str]:
        """保存済みスロットのキーを昇順で返す

        Returns:
            キーのリスト、読み込みに失敗した場合は空リスト
        """
        try:
            with self._session_factory() as session:
                result = session.exec(select(SlotModel.key).order_by(SlotModel.key))
                return list(result.all())
        except SQLAlchemyError as e:
            logger.warning("Failed to list slots: %s", e)
            return []
