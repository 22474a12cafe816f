"""RecordCodec Protocol."""

from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RecordCodec(Protocol[T]):
    """レコード列とバイト列の相互変換"""

    def encode(self, records: Sequence[T]) -> bytes:
        """レコード列をシリアライズする

        Raises:
            RecordEncodeError: シリアライズに失敗した場合
        """
        ...

    def decode(self, data: bytes) -> list[T]:
        """バイト列をレコード列に復元する

        Raises:
            RecordDecodeError: データが壊れている場合
        """
        ...
