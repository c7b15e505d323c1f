"""
Numerical Safeguards — Float primitives для геометрии коробки

Модуль обеспечивает численную корректность операций над размерами:
- Проверка валидности float (NaN/Inf никогда не попадают в модель)
- Десятичное округление (round half to even)
- Проверка полуоткрытого диапазона (min, max]
- Удаление двоичного "шума" после масштабирования единиц

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf всегда считаются невалидными значениями
2. Округление детерминировано и воспроизводимо
3. Внутренние вычисления ведутся на неокруглённых значениях
"""

import math
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимальная точность округления, поддерживаемая моделью
# (volume округляется до 9 знаков, больше не требуется)
MAX_ROUND_DECIMALS: Final[int] = 12


# =============================================================================
# ВАЛИДНОСТЬ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_to_decimals(value: float, decimals: int) -> float:
    """
    Округление до заданного количества десятичных знаков.

    Используется round half to even (banker's rounding), как у встроенного
    round: границы вида 0.5 дают детерминированный результат.

    Args:
        value: Значение для округления
        decimals: Количество знаков после запятой (0..MAX_ROUND_DECIMALS)

    Returns:
        Округлённое значение (float)

    Raises:
        ValueError: Если decimals вне допустимого диапазона

    Examples:
        >>> round_to_decimals(1.23456, 3)
        1.235
        >>> round_to_decimals(24.0000000001, 9)
        24.0
    """
    if decimals < 0 or decimals > MAX_ROUND_DECIMALS:
        raise ValueError(
            f"decimals must be in [0, {MAX_ROUND_DECIMALS}], got {decimals}"
        )
    return float(round(value, decimals))


def strip_float_noise(value: float, decimals: int) -> float:
    """
    Удаление двоичного шума после умножения на множитель единицы.

    Например 0.007 * 100 = 0.7000000000000001 → 0.7.
    Отрицательный ноль нормализуется в 0.0.
    """
    result = round_to_decimals(value, decimals)
    if result == 0.0:
        return 0.0
    return result


# =============================================================================
# ВАЛИДАЦИЯ ДИАПАЗОНА
# =============================================================================


def is_in_half_open_range(value: float, min_exclusive: float, max_inclusive: float) -> bool:
    """
    Проверка min_exclusive < value <= max_inclusive.

    NaN/Inf всегда вне диапазона.

    Examples:
        >>> is_in_half_open_range(0.0, 0.0, 10.0)
        False
        >>> is_in_half_open_range(10.0, 0.0, 10.0)
        True
        >>> is_in_half_open_range(float("nan"), 0.0, 10.0)
        False
    """
    if not is_valid_float(value):
        return False
    return min_exclusive < value <= max_inclusive
