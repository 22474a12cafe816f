"""Selection state for the unit converter screen."""

import logging

from utilsuite.domain.entities import ConversionCategory, ConverterSelection
from utilsuite.domain.services.unit_converter import convert_text

logger = logging.getLogger(__name__)


class ConverterSession:
    """単位変換の選択状態を保持する

    カテゴリを切り替えると単位の選択と入力値をリセットする。
    """

    def __init__(
        self, category: ConversionCategory = ConversionCategory.LENGTH
    ) -> None:
        self._selection = ConverterSelection.for_category(category)

    @property
    def selection(self) -> ConverterSelection:
        return self._selection

    @property
    def units(self) -> tuple[str, ...]:
        """選択中カテゴリの単位名"""
        return self._selection.category.units

    def select_category(self, category: ConversionCategory) -> None:
        if category is not self._selection.category:
            logger.debug("Switching converter category to %s", category.value)
        self._selection = self._selection.with_category(category)

    def select_units(self, from_unit: str, to_unit: str) -> None:
        self._selection = self._selection.with_units(from_unit, to_unit)

    def swap_units(self) -> None:
        """変換元と変換先を入れ替える（どちらかが未選択なら何もしない）"""
        if not self._selection.from_unit or not self._selection.to_unit:
            return
        self._selection = self._selection.swapped()

    def set_input(self, text: str) -> None:
        self._selection = self._selection.with_input(text)

    def result(self) -> str:
        """現在の選択での変換結果（表示用文字列）

        Returns:
            変換できない入力では ""、NaN / 無限大では "Error"
        """
        return convert_text(self._selection.request())
