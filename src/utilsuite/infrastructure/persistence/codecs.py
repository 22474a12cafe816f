"""JSON codecs for persisted record collections.

Field names are the stable on-disk schema shared with earlier releases of
the app, so they stay camelCase regardless of the Python attribute names.
"""

import json
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar
from uuid import UUID

from utilsuite.domain.entities import CalculationRecord, Note, Priority, Task
from utilsuite.domain.exceptions import RecordDecodeError, RecordEncodeError
from utilsuite.infrastructure.persistence.datetime_utils import parse_iso, to_iso

T = TypeVar("T")


class JsonRecordCodec(Generic[T]):
    """レコード列を JSON 配列として読み書きする RecordCodec 実装"""

    def __init__(
        self,
        to_dict: Callable[[T], dict[str, Any]],
        from_dict: Callable[[dict[str, Any]], T],
    ) -> None:
        """初期化

        Args:
            to_dict: レコードを JSON オブジェクトに変換する関数
            from_dict: JSON オブジェクトをレコードに変換する関数
        """
        self._to_dict = to_dict
        self._from_dict = from_dict

    def encode(self, records: Sequence[T]) -> bytes:
        """レコード列を UTF-8 の JSON にシリアライズする

        Raises:
            RecordEncodeError: シリアライズできない値が含まれる場合
        """
        try:
            payload = [self._to_dict(record) for record in records]
            return json.dumps(payload, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError, AttributeError) as e:
            raise RecordEncodeError(f"Failed to encode records: {e}") from e

    def decode(self, data: bytes) -> list[T]:
        """JSON をレコード列に復元する

        Raises:
            RecordDecodeError: JSON が壊れているか、スキーマに合わない場合
        """
        try:
            payload = json.loads(data.decode("utf-8"))
            if not isinstance(payload, list):
                raise TypeError(f"Expected a JSON array, got {type(payload).__name__}")
            return [self._from_dict(item) for item in payload]
        except (
            KeyError,
            TypeError,
            ValueError,
            AttributeError,
            RecursionError,
        ) as e:
            raise RecordDecodeError(f"Failed to decode records: {e}") from e


def note_to_dict(note: Note) -> dict[str, Any]:
    return {
        "id": str(note.id),
        "title": note.title,
        "content": note.content,
        "dateCreated": to_iso(note.date_created),
        "dateModified": to_iso(note.date_modified),
    }


def note_from_dict(data: dict[str, Any]) -> Note:
    return Note(
        id=UUID(data["id"]),
        title=_require_str(data, "title"),
        content=_require_str(data, "content"),
        date_created=parse_iso(data["dateCreated"]),
        date_modified=parse_iso(data["dateModified"]),
    )


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": str(task.id),
        "title": task.title,
        "isCompleted": task.is_completed,
        "dateCreated": to_iso(task.date_created),
        "dateCompleted": (
            to_iso(task.date_completed) if task.date_completed is not None else None
        ),
        "priority": task.priority.value,
    }


def task_from_dict(data: dict[str, Any]) -> Task:
    date_completed = data.get("dateCompleted")
    is_completed = data["isCompleted"]
    if not isinstance(is_completed, bool):
        raise TypeError("isCompleted must be a boolean")
    return Task(
        id=UUID(data["id"]),
        title=_require_str(data, "title"),
        is_completed=is_completed,
        date_created=parse_iso(data["dateCreated"]),
        date_completed=(
            parse_iso(date_completed) if date_completed is not None else None
        ),
        priority=Priority(data["priority"]),
    )


def calculation_to_dict(record: CalculationRecord) -> dict[str, Any]:
    return {
        "id": str(record.id),
        "expression": record.expression,
        "result": record.result,
        "timestamp": to_iso(record.timestamp),
    }


def calculation_from_dict(data: dict[str, Any]) -> CalculationRecord:
    return CalculationRecord(
        id=UUID(data["id"]),
        expression=_require_str(data, "expression"),
        result=_require_str(data, "result"),
        timestamp=parse_iso(data["timestamp"]),
    )


def _require_str(data: dict[str, Any], field: str) -> str:
    value = data[field]
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string")
    return value


NOTE_CODEC: JsonRecordCodec[Note] = JsonRecordCodec(note_to_dict, note_from_dict)
TASK_CODEC: JsonRecordCodec[Task] = JsonRecordCodec(task_to_dict, task_from_dict)
CALCULATION_CODEC: JsonRecordCodec[CalculationRecord] = JsonRecordCodec(
    calculation_to_dict, calculation_from_dict
)
