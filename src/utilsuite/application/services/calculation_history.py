"""Bounded, persisted calculator history."""

import logging
from collections import deque

from utilsuite.application.stores.persisted_collection import PersistedCollection
from utilsuite.domain.entities import CalculationRecord
from utilsuite.domain.entities.calculation import create_calculation_record
from utilsuite.domain.services.clock import Clock, utc_now

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50


class CalculationHistory:
    """計算履歴

    新しい記録を先頭に挿入し、容量を超えた分は末尾（最も古いもの）から
    捨てる固定容量のバッファ。変更のたびに永続化する。
    """

    def __init__(
        self,
        collection: PersistedCollection[CalculationRecord],
        capacity: int = DEFAULT_HISTORY_LIMIT,
        clock: Clock = utc_now,
    ) -> None:
        """初期化

        Args:
            collection: 履歴の永続化先
            capacity: 保持する最大件数
            clock: 現在時刻を返す関数

        Raises:
            ValueError: capacity が 1 未満の場合
        """
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self._collection = collection
        self._capacity = capacity
        self._clock = clock
        self._entries: deque[CalculationRecord] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def entries(self) -> list[CalculationRecord]:
        """記録（新しい順）"""
        return list(self._entries)

    def load(self) -> None:
        """保存済みの履歴を読み込む（容量を超える古い記録は捨てる）"""
        records = self._collection.load()
        self._entries = deque(records[: self._capacity], maxlen=self._capacity)
        logger.info("Loaded %d calculations", len(self._entries))

    def record(self, expression: str, result: str) -> CalculationRecord:
        """計算結果を先頭に記録して保存する

        Args:
            expression: 計算式
            result: 整形済みの結果

        Returns:
            記録した CalculationRecord
        """
        entry = create_calculation_record(expression, result, now=self._clock())
        self._entries.appendleft(entry)
        self._collection.save(list(self._entries))
        return entry

    def clear(self) -> None:
        """履歴をすべて消去して保存する"""
        self._entries.clear()
        self._collection.save([])
