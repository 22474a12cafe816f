"""Arithmetic state machine behind the calculator keypad."""

import logging
from dataclasses import replace

from utilsuite.domain.entities import CalculationRecord, CalculatorState, Operation
from utilsuite.domain.services.number_format import format_result
from utilsuite.domain.services.protocols import HistoryLog

logger = logging.getLogger(__name__)

MAX_ENTRY_LENGTH = 9
# A decimal point is only accepted while the entry is shorter than this.
MAX_DECIMAL_ENTRY_LENGTH = 8

DIGITS = frozenset("0123456789")


def calculate(first: float, second: float, operation: Operation) -> float:
    """Evaluate a binary operation.

    Division by zero yields 0 instead of raising.

    Args:
        first: Left operand (the accumulator).
        second: Right operand (the current entry).
        operation: Operation to apply.

    Returns:
        The evaluated value. EQUALS and NONE return the right operand.
    """
    if operation is Operation.ADD:
        return first + second
    if operation is Operation.SUBTRACT:
        return first - second
    if operation is Operation.MULTIPLY:
        return first * second
    if operation is Operation.DIVIDE:
        return first / second if second != 0 else 0.0
    if operation is Operation.PERCENT:
        return first / 100
    return second


class ArithmeticEngine:
    """電卓の状態機械

    表示状態 (CalculatorState) はこのインスタンスが所有し、コマンドごとに
    新しい値へ置き換える。二項演算が確定するたびに履歴へ記録する。
    """

    def __init__(self, history: HistoryLog) -> None:
        """初期化

        Args:
            history: 計算履歴の記録先
        """
        self._history = history
        self._state = CalculatorState()

    @property
    def state(self) -> CalculatorState:
        """現在の表示状態"""
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    @property
    def expression_preview(self) -> str:
        return self._state.expression_preview

    @property
    def history(self) -> list[CalculationRecord]:
        """計算履歴（新しい順）"""
        return self._history.entries

    def press_digit(self, digit: str) -> None:
        """数字キーを押す

        入力中なら末尾に追加し（9文字まで）、そうでなければ表示を置き換えて
        入力中にする。

        Args:
            digit: "0" から "9" のいずれか
        """
        if digit not in DIGITS:
            logger.debug("Ignoring non-digit key: %r", digit)
            return

        state = self._state
        if state.is_entering_operand:
            if len(state.display) < MAX_ENTRY_LENGTH:
                self._state = replace(state, display=state.display + digit)
        else:
            self._state = replace(state, display=digit, is_entering_operand=True)

    def press_decimal_point(self) -> None:
        """小数点キーを押す"""
        state = self._state
        if not state.is_entering_operand:
            self._state = replace(state, display="0.", is_entering_operand=True)
            return
        if "." not in state.display and len(state.display) < MAX_DECIMAL_ENTRY_LENGTH:
            self._state = replace(state, display=state.display + ".")

    def press_operator(self, operation: Operation) -> None:
        """演算子キーを押す

        入力中かつ保留中の演算子がある場合は先に評価して履歴に記録する。
        表示が数値として解釈できない場合は何もしない。

        Args:
            operation: 押された演算子（NONE は無視する）
        """
        if operation is Operation.NONE:
            return

        state = self._state
        try:
            value = float(state.display)
        except ValueError:
            logger.debug("Display is not numeric, ignoring %s", operation.value)
            return

        display = state.display
        accumulator = state.accumulator

        if state.is_entering_operand and state.pending_operation is not Operation.NONE:
            result = calculate(accumulator, value, state.pending_operation)
            display = format_result(result)
            expression = (
                f"{format_result(accumulator)} "
                f"{state.pending_operation.symbol} {state.display}"
            )
            self._history.record(expression, display)
            logger.debug("Evaluated %s = %s", expression, display)
            accumulator = result
        else:
            accumulator = value

        if operation is Operation.EQUALS:
            pending = Operation.NONE
            preview = ""
        elif operation is Operation.PERCENT:
            accumulator = accumulator / 100
            display = format_result(accumulator)
            pending = Operation.NONE
            preview = ""
        else:
            pending = operation
            preview = f"{format_result(accumulator)} {operation.symbol}"

        self._state = CalculatorState(
            display=display,
            accumulator=accumulator,
            pending_operation=pending,
            is_entering_operand=False,
            expression_preview=preview,
        )

    def toggle_sign(self) -> None:
        """表示中の数値の符号を反転する（"0" の場合は何もしない）"""
        display = self._state.display
        if display == "0":
            return
        if display.startswith("-"):
            display = display[1:]
        else:
            display = "-" + display
        self._state = replace(self._state, display=display)

    def clear(self) -> None:
        """表示状態を初期化する（履歴は残す）"""
        self._state = CalculatorState()

    def clear_history(self) -> None:
        """計算履歴を消去する"""
        self._history.clear()
