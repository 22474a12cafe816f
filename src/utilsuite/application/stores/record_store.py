"""Generic in-memory record collection mirrored to a durable slot."""

import logging
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar
from uuid import UUID

from utilsuite.application.stores.persisted_collection import PersistedCollection

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordStore(Generic[T]):
    """識別子で一意なレコードのコレクション

    変更のたびにコレクション全体をスロットへ書き込む。保持順は挿入順だが、
    表示順は呼び出し側が projection で決める。
    """

    def __init__(
        self,
        collection: PersistedCollection[T],
        identify: Callable[[T], UUID],
    ) -> None:
        """初期化

        Args:
            collection: 永続化先
            identify: レコードから識別子を取り出す関数
        """
        self._collection = collection
        self._identify = identify
        self._records: list[T] = []

    def __len__(self) -> int:
        return len(self._records)

    def load(self) -> None:
        """スロットからコレクションを読み込む（失敗時は空）"""
        self._records = self._collection.load()

    def save(self) -> bool:
        """コレクション全体をスロットへ書き込む

        Returns:
            書き込みに成功した場合 True（失敗は許容される）
        """
        return self._collection.save(self._records)

    def all(self) -> list[T]:
        return list(self._records)

    def get(self, record_id: UUID) -> T | None:
        """識別子でレコードを検索する

        Args:
            record_id: レコードの識別子

        Returns:
            見つかったレコード、または None
        """
        for record in self._records:
            if self._identify(record) == record_id:
                return record
        return None

    def add(self, record: T) -> bool:
        """レコードを追加して保存する

        Args:
            record: 追加するレコード

        Returns:
            追加した場合 True、同じ識別子が既にある場合 False
        """
        record_id = self._identify(record)
        if self.get(record_id) is not None:
            logger.warning(
                "Record %s already exists in %s", record_id, self._collection.key
            )
            return False
        self._records.append(record)
        self.save()
        return True

    def update(self, record: T) -> bool:
        """同じ識別子のレコードを置き換えて保存する

        Args:
            record: 新しい内容のレコード

        Returns:
            置き換えた場合 True、該当レコードがない場合 False（保存しない）
        """
        record_id = self._identify(record)
        for index, existing in enumerate(self._records):
            if self._identify(existing) == record_id:
                self._records[index] = record
                self.save()
                return True
        logger.debug("Update ignored, record %s not found", record_id)
        return False

    def delete(self, record_id: UUID) -> int:
        """識別子が一致するレコードをすべて削除して保存する

        Returns:
            削除した件数
        """
        return self.delete_many([record_id])

    def delete_many(self, record_ids: Iterable[UUID]) -> int:
        """複数の識別子のレコードをまとめて削除して保存する

        Returns:
            削除した件数
        """
        targets = set(record_ids)
        before = len(self._records)
        self._records = [r for r in self._records if self._identify(r) not in targets]
        self.save()
        return before - len(self._records)

    def projection(
        self,
        where: Callable[[T], bool] | None = None,
        key: Callable[[T], Any] | None = None,
        reverse: bool = False,
    ) -> list[T]:
        """絞り込みと並び替えを適用したレコードのリストを返す

        Args:
            where: 残すレコードの条件（省略時は全件）
            key: 並び替えキー（省略時は保持順）
            reverse: 降順にする場合 True

        Returns:
            新しいリスト（コレクション自体は変更しない）
        """
        records = [r for r in self._records if where is None or where(r)]
        if key is not None:
            records.sort(key=key, reverse=reverse)
        return records
