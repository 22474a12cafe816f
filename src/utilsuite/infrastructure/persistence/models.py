"""SQLModel table definitions."""

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class SlotModel(SQLModel, table=True):
    """永続スロットテーブル

    1行が1つのコレクション（計算履歴・ノート・タスク）に対応する。
    """

    __tablename__ = "slots"

    key: str = Field(primary_key=True)
    data: bytes  # JSON-encoded record list
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
