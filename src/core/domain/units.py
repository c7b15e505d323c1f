"""
Units — Централизованный модуль единиц длины

Единственный допустимый способ преобразований между:
- миллиметрами (mm)
- сантиметрами (cm)
- метрами (m), каноническая внутренняя единица

Единицы используются только на границе (конструктор, форматирование, разбор).
Внутри модели все размеры хранятся в метрах.
"""

import logging
import re
from enum import Enum
from typing import Final

from src.core.domain.errors import BoxFormatError
from src.core.math.numerical_safeguards import strip_float_noise

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class UnitOfMeasure(str, Enum):
    """Единица измерения длины (значение = текстовая метка)"""

    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Сколько единиц в одном метре
UNITS_PER_METER: Final[dict[UnitOfMeasure, float]] = {
    UnitOfMeasure.MILLIMETER: 1000.0,
    UnitOfMeasure.CENTIMETER: 100.0,
    UnitOfMeasure.METER: 1.0,
}

# Количество знаков после запятой при выводе (точность размеров: 1 мм)
DISPLAY_DECIMALS: Final[int] = 3

# Invariant float literal: знак, цифры, опциональная дробь и экспонента.
# Без разделителей тысяч, без "_", без inf/nan, только ASCII цифры.
_FLOAT_LITERAL_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?",
    re.ASCII,
)


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def to_meters(value: float, unit: UnitOfMeasure) -> float:
    """
    Конверсия: значение в unit → метры.

    Args:
        value: Длина в исходной единице
        unit: Исходная единица

    Returns:
        Длина в метрах (без округления)
    """
    return value / UNITS_PER_METER[UnitOfMeasure(unit)]


def from_meters(value_m: float, unit: UnitOfMeasure) -> float:
    """
    Конверсия: метры → значение в unit.

    Args:
        value_m: Длина в метрах
        unit: Целевая единица

    Returns:
        Длина в целевой единице (без округления)
    """
    return value_m * UNITS_PER_METER[UnitOfMeasure(unit)]


# =============================================================================
# ТЕКСТОВЫЕ ПРЕОБРАЗОВАНИЯ
# =============================================================================


def parse_unit(token: str) -> UnitOfMeasure:
    """
    Разбор метки единицы (регистронезависимо): "m", "cm", "mm".

    Raises:
        BoxFormatError: Если метка не распознана
    """
    try:
        return UnitOfMeasure(token.lower())
    except ValueError:
        logger.debug("Rejected unit token %r", token)
        raise BoxFormatError(f"Invalid unit of measure: {token}", token=token) from None


def parse_invariant_float(token: str) -> float:
    """
    Разбор числа в culture-invariant формате ("." как десятичный разделитель).

    Examples:
        >>> parse_invariant_float("2.5")
        2.5
        >>> parse_invariant_float("-1e3")
        -1000.0

    Raises:
        BoxFormatError: Если токен не является числом ("1,5", "abc", "nan")
    """
    if not _FLOAT_LITERAL_RE.fullmatch(token):
        logger.debug("Rejected numeric token %r", token)
        raise BoxFormatError(f"Could not parse number: {token}", token=token)
    return float(token)


def format_invariant_float(value: float) -> str:
    """
    Форматирование числа без зависимости от локали.

    Целые значения выводятся без ".0" (1000.0 → "1000"), дробные в
    кратчайшем round-trip представлении после удаления двоичного шума.

    Examples:
        >>> format_invariant_float(1000.0)
        '1000'
        >>> format_invariant_float(0.7000000000000001)
        '0.7'
    """
    clean = strip_float_noise(value, DISPLAY_DECIMALS)
    if clean.is_integer():
        return str(int(clean))
    return repr(clean)
