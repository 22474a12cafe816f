"""In-memory implementation of PersistentSlot."""


class InMemorySlotRepository:
    """プロセス内だけで保持する PersistentSlot 実装

    テストや一時的な実行で使用する。
    """

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}

    def read(self, key: str) -> bytes | None:
        return self._data.get(key)

    def write(self, key: str, data: bytes) -> bool:
        self._data[key] = bytes(data)
        return True

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> list[str]:
        return sorted(self._data)
