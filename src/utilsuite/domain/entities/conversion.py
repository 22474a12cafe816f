"""Conversion request and converter selection entities."""

from dataclasses import dataclass, replace
from enum import Enum


class ConversionCategory(Enum):
    """変換カテゴリ"""

    LENGTH = "Length"
    WEIGHT = "Weight"
    TEMPERATURE = "Temperature"
    VOLUME = "Volume"

    @property
    def units(self) -> tuple[str, ...]:
        """表示順の単位名リスト"""
        return _UNITS[self]


_UNITS: dict[ConversionCategory, tuple[str, ...]] = {
    ConversionCategory.LENGTH: (
        "Meters",
        "Kilometers",
        "Centimeters",
        "Millimeters",
        "Inches",
        "Feet",
        "Yards",
        "Miles",
    ),
    ConversionCategory.WEIGHT: (
        "Kilograms",
        "Grams",
        "Pounds",
        "Ounces",
        "Tons",
        "Stones",
    ),
    ConversionCategory.TEMPERATURE: ("Celsius", "Fahrenheit", "Kelvin"),
    ConversionCategory.VOLUME: (
        "Liters",
        "Milliliters",
        "Gallons",
        "Quarts",
        "Pints",
        "Cups",
        "Fluid Ounces",
    ),
}


@dataclass(frozen=True)
class ConversionRequest:
    """単位変換リクエスト（永続化しない）

    Attributes:
        category: 変換カテゴリ
        from_unit: 変換元の単位名
        to_unit: 変換先の単位名
        input_value: 入力された値（未パースの文字列）
    """

    category: ConversionCategory
    from_unit: str
    to_unit: str
    input_value: str


@dataclass(frozen=True)
class ConverterSelection:
    """単位変換画面の選択状態

    カテゴリごとに単位名の集合が異なるため、カテゴリを切り替えると
    単位の選択と入力値はリセットされる。

    Attributes:
        category: 選択中のカテゴリ
        from_unit: 変換元の単位名
        to_unit: 変換先の単位名
        input_text: 入力中の値
    """

    category: ConversionCategory
    from_unit: str
    to_unit: str
    input_text: str = ""

    @classmethod
    def for_category(cls, category: ConversionCategory) -> "ConverterSelection":
        """カテゴリの既定選択（先頭の単位 → 2番目の単位、入力は空）を返す"""
        units = category.units
        from_unit = units[0] if units else ""
        to_unit = units[1] if len(units) > 1 else from_unit
        return cls(category=category, from_unit=from_unit, to_unit=to_unit)

    def with_category(self, category: ConversionCategory) -> "ConverterSelection":
        """カテゴリを切り替えた選択を返す（同じカテゴリなら変更なし）"""
        if category is self.category:
            return self
        return ConverterSelection.for_category(category)

    def with_units(self, from_unit: str, to_unit: str) -> "ConverterSelection":
        return replace(self, from_unit=from_unit, to_unit=to_unit)

    def with_input(self, text: str) -> "ConverterSelection":
        return replace(self, input_text=text)

    def swapped(self) -> "ConverterSelection":
        """変換元と変換先を入れ替えた選択を返す"""
        return replace(self, from_unit=self.to_unit, to_unit=self.from_unit)

    def request(self) -> ConversionRequest:
        return ConversionRequest(
            category=self.category,
            from_unit=self.from_unit,
            to_unit=self.to_unit,
            input_value=self.input_text,
        )
