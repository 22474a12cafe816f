"""Task entity for the to-do list."""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class Priority(Enum):
    """タスクの優先度"""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def rank(self) -> int:
        """並び替え用の順位（高いほど小さい）"""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


@dataclass(frozen=True)
class Task:
    """タスクエンティティ

    Attributes:
        id: タスクの一意識別子（UUID）
        title: タイトル
        is_completed: 完了済みかどうか
        date_created: 作成日時
        date_completed: 完了日時（未完了の場合は None）
        priority: 優先度
    """

    id: UUID
    title: str
    is_completed: bool
    date_created: datetime
    date_completed: datetime | None
    priority: Priority

    def __post_init__(self) -> None:
        """バリデーション"""
        if self.is_completed != (self.date_completed is not None):
            raise ValueError("date_completed must be set if and only if completed")

    def toggled(self, now: datetime) -> "Task":
        """完了状態を反転したタスクを返す

        Args:
            now: 完了にする場合の完了日時

        Returns:
            新しい Task（未完了に戻す場合 date_completed は None）
        """
        if self.is_completed:
            return replace(self, is_completed=False, date_completed=None)
        return replace(self, is_completed=True, date_completed=now)


def create_task(
    title: str,
    priority: Priority = Priority.MEDIUM,
    now: datetime | None = None,
) -> Task:
    """未完了の Task エンティティを生成する

    Args:
        title: タイトル
        priority: 優先度（省略時は MEDIUM）
        now: 作成日時（省略時は現在時刻）

    Returns:
        Task エンティティ
    """
    return Task(
        id=uuid4(),
        title=title,
        is_completed=False,
        date_created=now or datetime.now(timezone.utc),
        date_completed=None,
        priority=priority,
    )
