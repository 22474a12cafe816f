"""Task collection with completion lifecycle and sort strategies."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from uuid import UUID

from utilsuite.application.stores.persisted_collection import PersistedCollection
from utilsuite.application.stores.record_store import RecordStore
from utilsuite.domain.entities import Priority, Task
from utilsuite.domain.entities.task import create_task
from utilsuite.domain.services.clock import Clock, utc_now
from utilsuite.domain.services.task_ordering import (
    TaskSortOption,
    by_date_completed,
    sort_tasks,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskStats:
    """タスク件数の集計

    Attributes:
        total: 全件数
        pending: 未完了の件数
        completed: 完了済みの件数
    """

    total: int
    pending: int
    completed: int


class TaskStore:
    """タスクストア

    RecordStore[Task] を内包し、完了状態の切り替えと並び替えを提供する。
    """

    def __init__(
        self,
        collection: PersistedCollection[Task],
        clock: Clock = utc_now,
    ) -> None:
        """初期化

        Args:
            collection: タスクの永続化先
            clock: 現在時刻を返す関数
        """
        self._store: RecordStore[Task] = RecordStore(collection, lambda task: task.id)
        self._clock = clock

    def __len__(self) -> int:
        return len(self._store)

    def load(self) -> None:
        self._store.load()
        logger.info("Loaded %d tasks", len(self._store))

    def save(self) -> bool:
        return self._store.save()

    def all(self) -> list[Task]:
        return self._store.all()

    def get(self, task_id: UUID) -> Task | None:
        return self._store.get(task_id)

    def add(self, task: Task) -> bool:
        return self._store.add(task)

    def update(self, task: Task) -> bool:
        return self._store.update(task)

    def delete(self, task_id: UUID) -> int:
        return self._store.delete(task_id)

    def delete_many(self, task_ids: Iterable[UUID]) -> int:
        return self._store.delete_many(task_ids)

    def add_task(self, title: str, priority: Priority = Priority.MEDIUM) -> Task | None:
        """未完了のタスクを作成して追加する

        Args:
            title: タイトル（前後の空白は除去）
            priority: 優先度

        Returns:
            作成したタスク、タイトルが空の場合 None
        """
        title = title.strip()
        if not title:
            logger.debug("Ignoring task with empty title")
            return None
        task = create_task(title, priority=priority, now=self._clock())
        self._store.add(task)
        return task

    def toggle_completion(self, task_id: UUID) -> Task | None:
        """完了状態を切り替える

        完了にする場合は完了日時を現在時刻に、未完了に戻す場合は消去する。

        Args:
            task_id: 対象タスクの ID

        Returns:
            更新後のタスク、該当タスクがない場合 None
        """
        task = self._store.get(task_id)
        if task is None:
            return None
        toggled = task.toggled(now=self._clock())
        self._store.update(toggled)
        return toggled

    def pending(
        self, sort_option: TaskSortOption = TaskSortOption.PRIORITY
    ) -> list[Task]:
        """未完了のタスクを指定の順序で返す"""
        return sort_tasks(
            self._store.projection(where=lambda t: not t.is_completed), sort_option
        )

    def completed(self) -> list[Task]:
        """完了済みのタスクを完了日時の降順で返す"""
        return by_date_completed(
            self._store.projection(where=lambda t: t.is_completed), now=self._clock()
        )

    def sorted_by(self, sort_option: TaskSortOption) -> list[Task]:
        """全タスクを指定の順序で返す"""
        return sort_tasks(self._store.all(), sort_option)

    def stats(self) -> TaskStats:
        tasks = self._store.all()
        completed = sum(1 for t in tasks if t.is_completed)
        return TaskStats(
            total=len(tasks),
            pending=len(tasks) - completed,
            completed=completed,
        )
