"""Note collection with free-text search."""

import logging
from collections.abc import Iterable
from uuid import UUID

from utilsuite.application.stores.persisted_collection import PersistedCollection
from utilsuite.application.stores.record_store import RecordStore
from utilsuite.domain.entities import Note
from utilsuite.domain.entities.note import create_note
from utilsuite.domain.services.clock import Clock, utc_now

logger = logging.getLogger(__name__)


class NoteStore:
    """ノートストア

    RecordStore[Note] を内包し、ノート固有の作成・編集・検索を提供する。
    タイトルと本文がどちらも空白のみのノートは作成・保存しない。
    """

    def __init__(
        self,
        collection: PersistedCollection[Note],
        clock: Clock = utc_now,
    ) -> None:
        """初期化

        Args:
            collection: ノートの永続化先
            clock: 現在時刻を返す関数
        """
        self._store: RecordStore[Note] = RecordStore(collection, lambda note: note.id)
        self._clock = clock

    def __len__(self) -> int:
        return len(self._store)

    def load(self) -> None:
        self._store.load()
        logger.info("Loaded %d notes", len(self._store))

    def save(self) -> bool:
        return self._store.save()

    def all(self) -> list[Note]:
        return self._store.all()

    def get(self, note_id: UUID) -> Note | None:
        return self._store.get(note_id)

    def add(self, note: Note) -> bool:
        return self._store.add(note)

    def update(self, note: Note) -> bool:
        return self._store.update(note)

    def delete(self, note_id: UUID) -> int:
        return self._store.delete(note_id)

    def delete_many(self, note_ids: Iterable[UUID]) -> int:
        return self._store.delete_many(note_ids)

    def add_note(self, title: str, content: str) -> Note | None:
        """ノートを作成して追加する

        Args:
            title: タイトル（前後の空白は除去）
            content: 本文（前後の空白は除去）

        Returns:
            作成したノート、タイトルと本文がどちらも空の場合 None
        """
        title, content = title.strip(), content.strip()
        if not title and not content:
            logger.debug("Ignoring empty note")
            return None
        note = create_note(title, content, now=self._clock())
        self._store.add(note)
        return note

    def edit_note(self, note_id: UUID, title: str, content: str) -> Note | None:
        """ノートのタイトルと本文を更新する

        Args:
            note_id: 対象ノートの ID
            title: 新しいタイトル（前後の空白は除去）
            content: 新しい本文（前後の空白は除去）

        Returns:
            更新後のノート、該当ノートがないか内容が空の場合 None
        """
        title, content = title.strip(), content.strip()
        if not title and not content:
            return None
        note = self._store.get(note_id)
        if note is None:
            return None
        edited = note.edited(title, content, now=max(self._clock(), note.date_created))
        self._store.update(edited)
        return edited

    def search(self, query: str) -> list[Note]:
        """タイトルまたは本文に query を含むノートを返す（大文字小文字を区別しない）

        Args:
            query: 検索文字列（空文字列なら全件）

        Returns:
            一致したノートのリスト（保持順）
        """
        return self._store.projection(where=lambda note: note.matches(query))

    def filtered(self, query: str = "") -> list[Note]:
        """検索結果を更新日時の降順で返す"""
        return self._store.projection(
            where=lambda note: note.matches(query),
            key=lambda note: note.date_modified,
            reverse=True,
        )
