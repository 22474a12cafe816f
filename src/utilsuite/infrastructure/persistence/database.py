"""Database management."""

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Import models to register them with SQLModel metadata
from utilsuite.infrastructure.persistence import models as _models  # noqa: F401


class DatabaseManager:
    """データベース管理

    SQLite データベースの初期化、エンジン生成、セッション管理を行う。
    """

    def __init__(self, database_path: str) -> None:
        """初期化

        Args:
            database_path: SQLite データベースファイルのパス
                          ":memory:" を指定するとインメモリDBを使用
        """
        self._database_path = database_path
        self._engine: Engine | None = None

    def get_engine(self) -> Engine:
        """SQLAlchemy エンジンを取得する

        エンジンは遅延初期化され、キャッシュされる。
        データベースファイルの親ディレクトリが存在しない場合は自動作成する。

        Returns:
            Engine インスタンス
        """
        if self._engine is not None:
            return self._engine

        if self._database_path != ":memory:":
            db_path = Path(self._database_path)
            db_path.parent.mkdir(parents=True, exist_ok=True)
            self._engine = create_engine(f"sqlite:///{self._database_path}")
        else:
            # All sessions must share one connection to see the same in-memory DB
            self._engine = create_engine(
                "sqlite://",
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return self._engine

    def create_tables(self) -> None:
        """テーブルを作成する

        既存のテーブルがある場合は何もしない。
        """
        SQLModel.metadata.create_all(self.get_engine())

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """セッションを取得する（context manager）

        Yields:
            Session インスタンス
        """
        with Session(self.get_engine(), expire_on_commit=False) as session:
            yield session

    def close(self) -> None:
        """エンジンのコネクションプールを破棄する"""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
