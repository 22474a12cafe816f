"""Calculator state and history record entities."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class Operation(Enum):
    """電卓の演算子"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    PERCENT = "percent"
    EQUALS = "equals"
    NONE = "none"

    @property
    def symbol(self) -> str:
        """表示用の記号（EQUALS / NONE は空文字列）"""
        return _SYMBOLS.get(self, "")


_SYMBOLS = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "−",
    Operation.MULTIPLY: "×",
    Operation.DIVIDE: "÷",
    Operation.PERCENT: "%",
}


@dataclass(frozen=True)
class CalculatorState:
    """電卓の表示状態（永続化しない）

    Attributes:
        display: 表示中の文字列
        accumulator: 直前に確定した値
        pending_operation: 次のオペランド入力後に適用する演算子
        is_entering_operand: 数値を入力中かどうか
        expression_preview: 表示上部の式プレビュー（例: "5 +"）
    """

    display: str = "0"
    accumulator: float = 0.0
    pending_operation: Operation = Operation.NONE
    is_entering_operand: bool = False
    expression_preview: str = ""


@dataclass(frozen=True)
class CalculationRecord:
    """計算履歴エンティティ

    Attributes:
        id: 一意識別子（UUID）
        expression: 計算式（例: "5 + 3"）
        result: 整形済みの結果
        timestamp: 計算日時
    """

    id: UUID
    expression: str
    result: str
    timestamp: datetime


def create_calculation_record(
    expression: str,
    result: str,
    now: datetime | None = None,
) -> CalculationRecord:
    """CalculationRecord エンティティを生成する"""
    return CalculationRecord(
        id=uuid4(),
        expression=expression,
        result=result,
        timestamp=now or datetime.now(timezone.utc),
    )
