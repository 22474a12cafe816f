"""Domain exceptions."""


class PersistenceError(Exception):
    """Base exception for persistence-related errors."""


class RecordEncodeError(PersistenceError):
    """レコード列をシリアライズできない場合に発生する例外"""


class RecordDecodeError(PersistenceError):
    """保存済みデータを復元できない場合に発生する例外

    データが壊れている場合や、スキーマが変わった場合などに発生する。
    """
