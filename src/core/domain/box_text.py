"""
Box text format — Текстовое представление размеров коробки

Формат: "{A} {unit} × {B} {unit} × {C} {unit}"
- unit: m / cm / mm (регистронезависимо)
- разделитель "×" (U+00D7), ровно один пробел вокруг каждого токена
- числа в culture-invariant формате

Разбор допускает пробелы и "×" в любом количестве между токенами,
но после разбиения должно остаться ровно 6 токенов:
num1 unit1 num2 unit2 num3 unit3.
"""

import logging
import re
from dataclasses import dataclass
from typing import Final, NamedTuple

from src.core.domain.errors import BoxFormatError
from src.core.domain.units import (
    UnitOfMeasure,
    format_invariant_float,
    from_meters,
    parse_invariant_float,
    parse_unit,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Знак умножения между размерами
DIMENSION_SEPARATOR: Final[str] = "×"

# Ожидаемое количество токенов при разборе (3 числа + 3 единицы)
TEXT_TOKEN_COUNT: Final[int] = 6

# Разделители токенов: пробел и знак умножения
_TOKEN_SPLIT_RE: Final[re.Pattern[str]] = re.compile(f"[ {DIMENSION_SEPARATOR}]+")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BoxTextConfig:
    """Конфигурация текстового формата.

    trailing_unit_only=True воспроизводит legacy-поведение: для всех трёх
    чисел используется единица последнего терма ("1 m 2 cm 3 mm" → всё в mm).
    По умолчанию каждое число читается в своей единице.
    """

    default_spec: str = UnitOfMeasure.METER.value
    trailing_unit_only: bool = False


# =============================================================================
# RESULT
# =============================================================================


class ParsedDimensions(NamedTuple):
    """Результат разбора строки: три числа и их единицы (в порядке a, b, c)."""

    values: tuple[float, float, float]
    units: tuple[UnitOfMeasure, UnitOfMeasure, UnitOfMeasure]


# =============================================================================
# FORMAT
# =============================================================================


def resolve_format_spec(spec: str | None, config: BoxTextConfig | None = None) -> UnitOfMeasure:
    """
    Преобразование format spec в единицу.

    Пустой или None spec → config.default_spec ("m").

    Raises:
        BoxFormatError: Если spec не m/cm/mm
    """
    config = config or BoxTextConfig()
    if not spec:
        spec = config.default_spec
    try:
        return UnitOfMeasure(spec.lower())
    except ValueError:
        raise BoxFormatError(f"Invalid format: {spec}", token=spec) from None


def format_dimensions(
    edges_m: tuple[float, float, float],
    spec: str | None = None,
    config: BoxTextConfig | None = None,
) -> str:
    """
    Форматирование трёх размеров (в метрах) в строку.

    Args:
        edges_m: Размеры в метрах (уже округлённые до 3 знаков)
        spec: "m" / "cm" / "mm" (регистронезависимо), default "m"
        config: Конфигурация формата (опционально)

    Returns:
        Строка вида "100 cm × 200 cm × 300 cm"

    Raises:
        BoxFormatError: Если spec не распознан
    """
    unit = resolve_format_spec(spec, config)
    terms = [f"{format_invariant_float(from_meters(edge, unit))} {unit.value}" for edge in edges_m]
    return f" {DIMENSION_SEPARATOR} ".join(terms)


# =============================================================================
# PARSE
# =============================================================================


def tokenize(text: str) -> list[str]:
    """Разбиение строки по пробелам и "×" с отбрасыванием пустых токенов."""
    return [token for token in _TOKEN_SPLIT_RE.split(text) if token]


def parse_dimensions(text: str, config: BoxTextConfig | None = None) -> ParsedDimensions:
    """
    Разбор строки "num unit num unit num unit".

    Args:
        text: Входная строка
        config: Конфигурация формата (опционально)

    Returns:
        ParsedDimensions с числами и единицами (диапазон НЕ проверяется,
        это делает конструктор Box)

    Raises:
        BoxFormatError: Неверное количество токенов, невалидное число или единица
    """
    config = config or BoxTextConfig()
    tokens = tokenize(text)
    if len(tokens) != TEXT_TOKEN_COUNT:
        logger.debug("Rejected box text %r: %d tokens", text, len(tokens))
        raise BoxFormatError(
            f"Invalid input format: expected {TEXT_TOKEN_COUNT} tokens, got {len(tokens)}",
            token=text,
        )

    values = []
    units = []
    for i in range(0, TEXT_TOKEN_COUNT, 2):
        values.append(parse_invariant_float(tokens[i]))
        units.append(parse_unit(tokens[i + 1]))

    if config.trailing_unit_only:
        units = [units[-1]] * len(units)

    return ParsedDimensions(values=tuple(values), units=tuple(units))
