"""
Sanity-тест для модуля единиц длины

Проверяет:
1. Корректность конверсий mm / cm ↔ m
2. Разбор меток единиц
3. Culture-invariant разбор и форматирование чисел
"""

import pytest

from src.core.domain.errors import BoxFormatError
from src.core.domain.units import (
    UNITS_PER_METER,
    UnitOfMeasure,
    format_invariant_float,
    from_meters,
    parse_invariant_float,
    parse_unit,
    to_meters,
)


class TestConversions:
    """Тесты конверсий единиц"""

    def test_units_per_meter(self) -> None:
        """Множители единиц"""
        assert UNITS_PER_METER[UnitOfMeasure.MILLIMETER] == 1000.0
        assert UNITS_PER_METER[UnitOfMeasure.CENTIMETER] == 100.0
        assert UNITS_PER_METER[UnitOfMeasure.METER] == 1.0

    def test_to_meters(self) -> None:
        """Конверсия в метры"""
        assert to_meters(1500, UnitOfMeasure.MILLIMETER) == 1.5
        assert to_meters(250, UnitOfMeasure.CENTIMETER) == 2.5
        assert to_meters(3.0, UnitOfMeasure.METER) == 3.0

    def test_from_meters(self) -> None:
        """Конверсия из метров"""
        assert from_meters(1.5, UnitOfMeasure.MILLIMETER) == 1500.0
        assert from_meters(2.5, UnitOfMeasure.CENTIMETER) == 250.0
        assert from_meters(3.0, UnitOfMeasure.METER) == 3.0

    def test_label_accepted(self) -> None:
        """Единица может быть передана меткой"""
        assert to_meters(100, "cm") == 1.0  # type: ignore[arg-type]

    def test_roundtrip(self) -> None:
        """Инвариант: m → unit → m возвращает исходное значение"""
        for unit in UnitOfMeasure:
            assert to_meters(from_meters(0.125, unit), unit) == pytest.approx(0.125, abs=1e-12)


class TestParseUnit:
    """Тесты разбора меток единиц"""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("m", UnitOfMeasure.METER),
            ("M", UnitOfMeasure.METER),
            ("cm", UnitOfMeasure.CENTIMETER),
            ("Cm", UnitOfMeasure.CENTIMETER),
            ("mm", UnitOfMeasure.MILLIMETER),
            ("MM", UnitOfMeasure.MILLIMETER),
        ],
    )
    def test_valid(self, token: str, expected: UnitOfMeasure) -> None:
        """Метки распознаются регистронезависимо"""
        assert parse_unit(token) is expected

    @pytest.mark.parametrize("token", ["km", "", "meter", "xx"])
    def test_invalid(self, token: str) -> None:
        """Неизвестная метка → BoxFormatError"""
        with pytest.raises(BoxFormatError) as exc_info:
            parse_unit(token)
        assert exc_info.value.token == token


class TestInvariantNumbers:
    """Тесты invariant разбора и форматирования чисел"""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("1", 1.0),
            ("1.5", 1.5),
            ("-2", -2.0),
            ("+3.", 3.0),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("1E-3", 0.001),
        ],
    )
    def test_parse_valid(self, token: str, expected: float) -> None:
        """Допустимые литералы"""
        assert parse_invariant_float(token) == expected

    @pytest.mark.parametrize(
        "token",
        ["1,5", "1_000", "inf", "NaN", "", "abc", "1.2.3", "1 000", "١", "١.٥", "３"],
    )
    def test_parse_invalid(self, token: str) -> None:
        """Недопустимые литералы → BoxFormatError"""
        with pytest.raises(BoxFormatError):
            parse_invariant_float(token)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1000.0, "1000"),
            (12.5, "12.5"),
            (0.001, "0.001"),
            (0.7000000000000001, "0.7"),
            (-0.0, "0"),
            (0.0001, "0"),
        ],
    )
    def test_format(self, value: float, expected: str) -> None:
        """Формат без локали, без лишнего .0"""
        assert format_invariant_float(value) == expected
