"""Best-effort persistence of one record collection in one slot."""

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

from utilsuite.domain.exceptions import RecordDecodeError, RecordEncodeError
from utilsuite.domain.repositories import PersistentSlot, RecordCodec

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PersistedCollection(Generic[T]):
    """スロットのキーとコーデックの組

    読み込みに失敗した場合は空のコレクションとして扱い、書き込みに失敗した
    場合は書き込みを諦める（再試行しない）。どちらも例外は送出しない。
    """

    def __init__(
        self,
        slot: PersistentSlot,
        key: str,
        codec: RecordCodec[T],
    ) -> None:
        """初期化

        Args:
            slot: 永続スロット
            key: このコレクションのキー
            codec: レコード列のシリアライザ
        """
        self._slot = slot
        self._key = key
        self._codec = codec

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[T]:
        """保存済みのレコード列を読み込む

        Returns:
            レコードのリスト（未保存・破損時は空リスト）
        """
        data = self._slot.read(self._key)
        if data is None:
            logger.debug("Slot %s is empty", self._key)
            return []
        try:
            records = self._codec.decode(data)
        except RecordDecodeError as e:
            logger.warning("Discarding unreadable data in slot %s: %s", self._key, e)
            return []
        logger.debug("Loaded %d records from slot %s", len(records), self._key)
        return records

    def save(self, records: Sequence[T]) -> bool:
        """レコード列全体を書き込む

        Args:
            records: 保存するレコード列

        Returns:
            書き込みに成功した場合 True
        """
        try:
            data = self._codec.encode(records)
        except RecordEncodeError as e:
            logger.warning("Skipping write to slot %s: %s", self._key, e)
            return False
        if not self._slot.write(self._key, data):
            logger.warning(
                "Write to slot %s failed; changes kept in memory only", self._key
            )
            return False
        return True
