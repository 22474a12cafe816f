"""Tests for ArithmeticEngine."""

import random

import pytest

from utilsuite.application.services.calculation_history import CalculationHistory
from utilsuite.application.stores.persisted_collection import PersistedCollection
from utilsuite.domain.entities import CalculatorState, Operation
from utilsuite.domain.services.calculator import (
    MAX_ENTRY_LENGTH,
    ArithmeticEngine,
    calculate,
)
from utilsuite.infrastructure.persistence import (
    CALCULATION_CODEC,
    InMemorySlotRepository,
)


@pytest.fixture
def history(slot: InMemorySlotRepository) -> CalculationHistory:
    """Create history backed by an in-memory slot."""
    return CalculationHistory(
        PersistedCollection(slot, "CalculatorHistory", CALCULATION_CODEC)
    )


@pytest.fixture
def engine(history: CalculationHistory) -> ArithmeticEngine:
    """Create test engine."""
    return ArithmeticEngine(history)


def press(engine: ArithmeticEngine, keys: str) -> None:
    """Type a sequence of digits and decimal points."""
    for key in keys:
        if key == ".":
            engine.press_decimal_point()
        else:
            engine.press_digit(key)


class TestCalculate:
    """calculate function tests."""

    @pytest.mark.parametrize(
        ("operation", "expected"),
        [
            (Operation.ADD, 12.0),
            (Operation.SUBTRACT, 8.0),
            (Operation.MULTIPLY, 20.0),
            (Operation.DIVIDE, 5.0),
            (Operation.PERCENT, 0.1),
            (Operation.EQUALS, 2.0),
            (Operation.NONE, 2.0),
        ],
    )
    def test_operations(self, operation: Operation, expected: float) -> None:
        """Test each binary operation."""
        assert calculate(10.0, 2.0, operation) == pytest.approx(expected)

    def test_divide_by_zero_is_zero(self) -> None:
        """Test division by zero yields 0."""
        assert calculate(7.0, 0.0, Operation.DIVIDE) == 0.0


class TestInitialState:
    """Initial state tests."""

    def test_initial_state(self, engine: ArithmeticEngine) -> None:
        """Test the engine starts from the reset state."""
        assert engine.state == CalculatorState(
            display="0",
            accumulator=0.0,
            pending_operation=Operation.NONE,
            is_entering_operand=False,
            expression_preview="",
        )
        assert engine.history == []


class TestPressDigit:
    """press_digit tests."""

    def test_first_digit_replaces_display(self, engine: ArithmeticEngine) -> None:
        """Test first digit replaces the initial zero."""
        engine.press_digit("7")

        assert engine.display == "7"
        assert engine.state.is_entering_operand is True

    def test_digits_append(self, engine: ArithmeticEngine) -> None:
        """Test subsequent digits append."""
        press(engine, "123")

        assert engine.display == "123"

    def test_entry_capped(self, engine: ArithmeticEngine) -> None:
        """Test digits beyond the cap are ignored."""
        press(engine, "12345678901")

        assert engine.display == "123456789"

    @pytest.mark.parametrize("key", ["a", "", "12", "-", "."])
    def test_non_digit_ignored(self, engine: ArithmeticEngine, key: str) -> None:
        """Test non-digit keys are ignored."""
        engine.press_digit(key)

        assert engine.state == CalculatorState()


class TestPressDecimalPoint:
    """press_decimal_point tests."""

    def test_starts_new_entry(self, engine: ArithmeticEngine) -> None:
        """Test decimal point outside of entry starts with 0."""
        engine.press_decimal_point()

        assert engine.display == "0."
        assert engine.state.is_entering_operand is True

    def test_only_one_point(self, engine: ArithmeticEngine) -> None:
        """Test a second decimal point is ignored."""
        press(engine, "1.2.3")

        assert engine.display == "1.23"

    def test_point_rejected_at_length_limit(self, engine: ArithmeticEngine) -> None:
        """Test the decimal point is not accepted at 8 characters."""
        press(engine, "12345678")
        engine.press_decimal_point()

        assert engine.display == "12345678"

    def test_point_accepted_below_limit(self, engine: ArithmeticEngine) -> None:
        """Test the decimal point is accepted below 8 characters."""
        press(engine, "1234567.")

        assert engine.display == "1234567."


class TestPressOperator:
    """press_operator tests."""

    def test_simple_addition(self, engine: ArithmeticEngine) -> None:
        """Test 5 + 3 = 8 records one history entry."""
        engine.press_digit("5")
        engine.press_operator(Operation.ADD)
        engine.press_digit("3")
        engine.press_operator(Operation.EQUALS)

        assert engine.display == "8"
        assert len(engine.history) == 1
        assert engine.history[0].expression == "5 + 3"
        assert engine.history[0].result == "8"

    def test_preview_after_operator(self, engine: ArithmeticEngine) -> None:
        """Test preview shows accumulator and symbol."""
        press(engine, "12")
        engine.press_operator(Operation.MULTIPLY)

        assert engine.expression_preview == "12 ×"
        assert engine.state.pending_operation is Operation.MULTIPLY
        assert engine.state.is_entering_operand is False

    def test_equals_clears_preview(self, engine: ArithmeticEngine) -> None:
        """Test equals clears the pending operation and preview."""
        press(engine, "9")
        engine.press_operator(Operation.SUBTRACT)
        press(engine, "4")
        engine.press_operator(Operation.EQUALS)

        assert engine.display == "5"
        assert engine.expression_preview == ""
        assert engine.state.pending_operation is Operation.NONE
        assert engine.history[0].expression == "9 − 4"

    def test_chained_operations(self, engine: ArithmeticEngine) -> None:
        """Test 2 + 3 × 4 evaluates left to right."""
        press(engine, "2")
        engine.press_operator(Operation.ADD)
        press(engine, "3")
        engine.press_operator(Operation.MULTIPLY)

        assert engine.display == "5"
        assert engine.expression_preview == "5 ×"

        press(engine, "4")
        engine.press_operator(Operation.EQUALS)

        assert engine.display == "20"
        assert [h.expression for h in engine.history] == ["5 × 4", "2 + 3"]

    def test_divide_by_zero(self, engine: ArithmeticEngine) -> None:
        """Test division by zero shows 0."""
        press(engine, "8")
        engine.press_operator(Operation.DIVIDE)
        press(engine, "0")
        engine.press_operator(Operation.EQUALS)

        assert engine.display == "0"
        assert engine.history[0].expression == "8 ÷ 0"
        assert engine.history[0].result == "0"

    def test_fractional_result(self, engine: ArithmeticEngine) -> None:
        """Test fractional results are formatted with at most 6 digits."""
        press(engine, "1")
        engine.press_operator(Operation.DIVIDE)
        press(engine, "3")
        engine.press_operator(Operation.EQUALS)

        assert engine.display == "0.333333"

    def test_second_operand_uses_display_text(self, engine: ArithmeticEngine) -> None:
        """Test the expression keeps the operand as typed."""
        press(engine, "1.5")
        engine.press_operator(Operation.ADD)
        press(engine, "2.50")
        engine.press_operator(Operation.EQUALS)

        assert engine.history[0].expression == "1.5 + 2.50"
        assert engine.display == "4"

    def test_percent(self, engine: ArithmeticEngine) -> None:
        """Test percent divides by 100 without recording history."""
        press(engine, "50")
        engine.press_operator(Operation.PERCENT)

        assert engine.display == "0.5"
        assert engine.state.accumulator == pytest.approx(0.5)
        assert engine.state.pending_operation is Operation.NONE
        assert engine.expression_preview == ""
        assert engine.history == []

    def test_percent_after_pending(self, engine: ArithmeticEngine) -> None:
        """Test percent evaluates the pending operation first."""
        press(engine, "200")
        engine.press_operator(Operation.ADD)
        press(engine, "100")
        engine.press_operator(Operation.PERCENT)

        assert engine.display == "3"
        assert len(engine.history) == 1
        assert engine.history[0].result == "300"

    def test_operator_without_new_entry_does_not_evaluate(
        self, engine: ArithmeticEngine
    ) -> None:
        """Test pressing operators twice only changes the pending operation."""
        press(engine, "6")
        engine.press_operator(Operation.ADD)
        engine.press_operator(Operation.SUBTRACT)

        assert engine.history == []
        assert engine.expression_preview == "6 −"

    def test_equals_repeated_is_stable(self, engine: ArithmeticEngine) -> None:
        """Test pressing equals again does not record anything new."""
        press(engine, "2")
        engine.press_operator(Operation.ADD)
        press(engine, "2")
        engine.press_operator(Operation.EQUALS)
        engine.press_operator(Operation.EQUALS)

        assert engine.display == "4"
        assert len(engine.history) == 1

    def test_none_operator_ignored(self, engine: ArithmeticEngine) -> None:
        """Test the NONE operation is not a command."""
        press(engine, "5")
        engine.press_operator(Operation.ADD)
        before = engine.state

        engine.press_operator(Operation.NONE)

        assert engine.state == before

    def test_overflow_shows_error_and_blocks_operators(
        self, engine: ArithmeticEngine
    ) -> None:
        """Test an infinite result renders as Error and later operators no-op."""
        press(engine, "9")
        engine.press_operator(Operation.MULTIPLY)
        for _ in range(40):
            press(engine, "999999999")
            engine.press_operator(Operation.MULTIPLY)
        assert engine.display == "Error"

        before = engine.state
        engine.press_operator(Operation.ADD)

        assert engine.state == before


class TestToggleSign:
    """toggle_sign tests."""

    def test_toggle(self, engine: ArithmeticEngine) -> None:
        """Test toggling adds and removes the minus sign."""
        press(engine, "42")

        engine.toggle_sign()
        assert engine.display == "-42"

        engine.toggle_sign()
        assert engine.display == "42"

    def test_zero_unchanged(self, engine: ArithmeticEngine) -> None:
        """Test zero is never negated."""
        engine.toggle_sign()

        assert engine.display == "0"

    def test_negative_operand(self, engine: ArithmeticEngine) -> None:
        """Test negative operands evaluate."""
        press(engine, "3")
        engine.toggle_sign()
        engine.press_operator(Operation.ADD)
        press(engine, "1")
        engine.press_operator(Operation.EQUALS)

        assert engine.display == "-2"
        assert engine.history[0].expression == "-3 + 1"


class TestClear:
    """clear and clear_history tests."""

    def test_clear_resets_state(self, engine: ArithmeticEngine) -> None:
        """Test clear restores the initial state but keeps history."""
        press(engine, "5")
        engine.press_operator(Operation.ADD)
        press(engine, "5")
        engine.press_operator(Operation.ADD)

        engine.clear()

        assert engine.state == CalculatorState()
        assert len(engine.history) == 1

    def test_clear_history(
        self, engine: ArithmeticEngine, slot: InMemorySlotRepository
    ) -> None:
        """Test clear_history empties and persists the history."""
        press(engine, "1")
        engine.press_operator(Operation.ADD)
        press(engine, "1")
        engine.press_operator(Operation.EQUALS)

        engine.clear_history()

        assert engine.history == []
        assert slot.read("CalculatorHistory") == b"[]"


class TestHistoryCap:
    """History capacity tests."""

    def test_51_evaluations_keep_latest_50(self, engine: ArithmeticEngine) -> None:
        """Test history keeps the 50 most recent evaluations, newest first."""
        engine.press_digit("0")
        engine.press_operator(Operation.ADD)
        for _ in range(51):
            engine.press_digit("1")
            engine.press_operator(Operation.ADD)

        history = engine.history
        assert len(history) == 50
        assert history[0].expression == "50 + 1"
        assert history[0].result == "51"
        assert history[-1].expression == "1 + 1"

    def test_history_persisted_after_each_evaluation(
        self, engine: ArithmeticEngine, history: CalculationHistory
    ) -> None:
        """Test every evaluation is written to the slot."""
        press(engine, "2")
        engine.press_operator(Operation.MULTIPLY)
        press(engine, "3")
        engine.press_operator(Operation.EQUALS)

        history.load()

        assert [h.result for h in history.entries] == ["6"]


class TestDisplayLength:
    """Display length outside of typed entries."""

    def test_negated_full_entry_is_ten_characters(
        self, engine: ArithmeticEngine
    ) -> None:
        """Test the minus sign does not count toward the entry cap."""
        press(engine, "123456789")

        engine.toggle_sign()

        assert engine.display == "-123456789"
        assert len(engine.display) == MAX_ENTRY_LENGTH + 1

        engine.press_digit("0")
        assert engine.display == "-123456789"

    def test_result_may_exceed_entry_cap(self, engine: ArithmeticEngine) -> None:
        """Test evaluated results are shown in full even past the cap."""
        press(engine, "99999")
        engine.press_operator(Operation.MULTIPLY)
        press(engine, "99999")
        engine.press_operator(Operation.EQUALS)

        assert engine.display == "9999800001"
        assert len(engine.display) > MAX_ENTRY_LENGTH
        assert engine.history[0].result == "9999800001"


class TestDisplayInvariants:
    """Randomized key sequence tests."""

    KEYS = [*"0123456789", ".", "+", "-", "*", "/", "%", "=", "±"]
    OPERATORS = {
        "+": Operation.ADD,
        "-": Operation.SUBTRACT,
        "*": Operation.MULTIPLY,
        "/": Operation.DIVIDE,
        "%": Operation.PERCENT,
        "=": Operation.EQUALS,
    }

    @pytest.mark.parametrize("seed", range(25))
    def test_entry_never_exceeds_cap(self, engine: ArithmeticEngine, seed: int) -> None:
        """Test typed entries stay within the cap and hold at most one point."""
        rng = random.Random(seed)
        for _ in range(200):
            key = rng.choice(self.KEYS)
            if key in self.OPERATORS:
                engine.press_operator(self.OPERATORS[key])
            elif key == ".":
                engine.press_decimal_point()
            elif key == "±":
                engine.toggle_sign()
            else:
                engine.press_digit(key)

            display = engine.display
            assert display.count(".") <= 1
            if engine.state.is_entering_operand:
                assert len(display.lstrip("-")) <= MAX_ENTRY_LENGTH
