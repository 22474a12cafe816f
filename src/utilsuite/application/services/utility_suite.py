"""Composition of the calculator, converter, notes and tasks."""

import logging
from dataclasses import dataclass

from utilsuite.application.services.calculation_history import CalculationHistory
from utilsuite.application.services.converter_session import ConverterSession
from utilsuite.application.stores import NoteStore, PersistedCollection, TaskStore
from utilsuite.config import Config
from utilsuite.domain.repositories import PersistentSlot
from utilsuite.domain.services.calculator import ArithmeticEngine
from utilsuite.domain.services.clock import Clock, utc_now
from utilsuite.infrastructure.persistence.codecs import (
    CALCULATION_CODEC,
    NOTE_CODEC,
    TASK_CODEC,
)

logger = logging.getLogger(__name__)


@dataclass
class UtilitySuite:
    """4つのツールをまとめたアプリケーションのルート

    Attributes:
        calculator: 電卓
        history: 電卓の計算履歴
        converter: 単位変換の選択状態
        notes: ノートストア
        tasks: タスクストア
    """

    calculator: ArithmeticEngine
    history: CalculationHistory
    converter: ConverterSession
    notes: NoteStore
    tasks: TaskStore

    @classmethod
    def create(
        cls,
        config: Config,
        slot: PersistentSlot,
        clock: Clock = utc_now,
    ) -> "UtilitySuite":
        """設定とスロットから各コンポーネントを組み立てる

        Args:
            config: アプリケーション設定
            slot: 永続スロット
            clock: 現在時刻を返す関数

        Returns:
            未読み込みの UtilitySuite（load() で永続データを読み込む）
        """
        storage = config.storage
        history = CalculationHistory(
            PersistedCollection(slot, storage.history_key, CALCULATION_CODEC),
            capacity=config.calculator.history_limit,
            clock=clock,
        )
        return cls(
            calculator=ArithmeticEngine(history),
            history=history,
            converter=ConverterSession(),
            notes=NoteStore(
                PersistedCollection(slot, storage.notes_key, NOTE_CODEC), clock=clock
            ),
            tasks=TaskStore(
                PersistedCollection(slot, storage.tasks_key, TASK_CODEC), clock=clock
            ),
        )

    def load(self) -> None:
        """永続データを読み込む（プロセス起動時に1回呼ぶ）"""
        self.history.load()
        self.notes.load()
        self.tasks.load()
        logger.debug(
            "Suite loaded: %d calculations, %d notes, %d tasks",
            len(self.history),
            len(self.notes),
            len(self.tasks),
        )
