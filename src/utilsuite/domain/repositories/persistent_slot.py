"""PersistentSlot Protocol."""

from typing import Protocol


class PersistentSlot(Protocol):
    """キー単位の永続ストレージ

    コレクション（計算履歴・ノート・タスク）ごとに1つのキーを使い、
    シリアライズ済みのバイト列をまとめて読み書きする。
    """

    def read(self, key: str) -> bytes | None:
        """キーに保存されたデータを読み込む

        Args:
            key: スロットのキー

        Returns:
            保存されたバイト列、または未保存の場合 None
        """
        ...

    def write(self, key: str, data: bytes) -> bool:
        """キーにデータを書き込む

        Args:
            key: スロットのキー
            data: 保存するバイト列

        Returns:
            書き込みに成功した場合 True、失敗した場合 False
        """
        ...
