"""Note entity for free-text notes."""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Note:
    """ノートエンティティ

    Attributes:
        id: ノートの一意識別子（UUID、編集しても変わらない）
        title: タイトル
        content: 本文
        date_created: 作成日時
        date_modified: 最終更新日時（作成日時以降）
    """

    id: UUID
    title: str
    content: str
    date_created: datetime
    date_modified: datetime

    def __post_init__(self) -> None:
        """バリデーション"""
        if self.date_modified < self.date_created:
            raise ValueError("date_modified must not be earlier than date_created")

    def matches(self, query: str) -> bool:
        """タイトルまたは本文に query が含まれるか（大文字小文字を区別しない）

        Args:
            query: 検索文字列

        Returns:
            空文字列、またはどちらかに含まれる場合 True
        """
        if not query:
            return True
        needle = query.casefold()
        return needle in self.title.casefold() or needle in self.content.casefold()

    def edited(self, title: str, content: str, now: datetime) -> "Note":
        """タイトルと本文を差し替えたノートを返す

        Args:
            title: 新しいタイトル
            content: 新しい本文
            now: 更新日時

        Returns:
            date_modified を更新した新しい Note
        """
        return replace(self, title=title, content=content, date_modified=now)


def create_note(
    title: str,
    content: str,
    now: datetime | None = None,
) -> Note:
    """Note エンティティを生成する

    Args:
        title: タイトル
        content: 本文
        now: 作成日時（省略時は現在時刻）

    Returns:
        作成日時と更新日時が同じ Note
    """
    now = now or datetime.now(timezone.utc)
    return Note(
        id=uuid4(),
        title=title,
        content=content,
        date_created=now,
        date_modified=now,
    )
