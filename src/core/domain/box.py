"""
Box — Модель прямоугольной коробки

Immutable Pydantic модель с тремя размерами, хранящимися в метрах без
округления. Публичные размеры (edge_a/b/c) округляются до 3 знаков (1 мм).

Операции:
- Конструирование с конверсией единиц и проверкой диапазона (0, 10] м
- Объём (9 знаков) и площадь поверхности (6 знаков) на неокруглённых значениях
- Равенство независимо от порядка осей (сравнение отсортированных размеров)
- Bounding combination (покомпонентный максимум, позиционно)
- Текстовый формат / разбор в m, cm, mm
- JSON контракт (contracts/schema/box.json)

Любое "изменение" коробки создаёт новый экземпляр.
"""

import json
import logging
from collections.abc import Iterator
from typing import Any, Final

from pydantic import BaseModel, Field, ValidationError

from src.core.contracts.validators import validate_box_contract
from src.core.domain.box_text import (
    BoxTextConfig,
    format_dimensions,
    parse_dimensions,
)
from src.core.domain.errors import BoxRangeError
from src.core.domain.units import UnitOfMeasure, to_meters
from src.core.math.numerical_safeguards import is_in_half_open_range, round_to_decimals

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Размер по умолчанию для каждого не переданного параметра (в единице unit,
# т.е. Box(unit=MILLIMETER) даёт 0.1 mm)
DEFAULT_EDGE_M: Final[float] = 0.1

# Максимальный размер (м), включительно
MAX_EDGE_M: Final[float] = 10.0

# Точность округления публичных значений
EDGE_DECIMALS: Final[int] = 3
VOLUME_DECIMALS: Final[int] = 9
SURFACE_AREA_DECIMALS: Final[int] = 6

# Версия JSON контракта
CONTRACT_SCHEMA_VERSION: Final[str] = "1"

# Имена полей модели (путь model_validate)
FIELD_NAMES: Final[tuple[str, str, str]] = ("a_m", "b_m", "c_m")

# Маркер "параметр не передан"
_UNSET: Final[Any] = object()


# =============================================================================
# BOX MODEL
# =============================================================================


class Box(BaseModel):
    """
    Модель прямоугольной коробки.

    Immutable модель (frozen=True). Размеры a_m, b_m, c_m хранятся в метрах
    в переданном порядке; порядок важен для вывода и combine, но не для
    равенства.

    Examples:
        >>> Box(1, 2, 3) == Box(3, 1, 2)
        True
        >>> format(Box(100, 200, 300, UnitOfMeasure.CENTIMETER), "mm")
        '1000 mm × 2000 mm × 3000 mm'
    """

    a_m: float = Field(..., gt=0, le=MAX_EDGE_M, allow_inf_nan=False, description="Размер a (м)")
    b_m: float = Field(..., gt=0, le=MAX_EDGE_M, allow_inf_nan=False, description="Размер b (м)")
    c_m: float = Field(..., gt=0, le=MAX_EDGE_M, allow_inf_nan=False, description="Размер c (м)")

    model_config = {"frozen": True}  # Immutable

    def __init__(
        self,
        a: float = _UNSET,
        b: float = _UNSET,
        c: float = _UNSET,
        unit: UnitOfMeasure = _UNSET,
        **fields: Any,
    ):
        """
        Конструирование коробки.

        Args:
            a, b, c: Размеры в единице unit (default: 0.1 в единице unit)
            unit: Единица измерения входных размеров (default: METER)
            fields: Имена полей (a_m, b_m, c_m) в метрах: путь
                model_validate/model_validate_json, проверяется ограничениями Field

        Raises:
            BoxRangeError: Если размер после конверсии в метры вне (0, 10];
                index указывает первый невалидный размер (1, 2 или 3)
            TypeError: Если размеры (a, b, c, unit) смешаны с именами полей
            ValidationError: Если путь имён полей не проходит ограничения Field
        """
        if fields:
            explicit = [name for name, value in zip("abc", (a, b, c)) if value is not _UNSET]
            if unit is not _UNSET:
                explicit.append("unit")
            if explicit:
                raise TypeError(
                    f"Box() cannot mix dimensions {explicit} with field names {sorted(fields)}"
                )
            super().__init__(**fields)
            return

        a, b, c = (DEFAULT_EDGE_M if value is _UNSET else value for value in (a, b, c))
        unit = UnitOfMeasure.METER if unit is _UNSET else UnitOfMeasure(unit)
        edges_m = [to_meters(value, unit) for value in (a, b, c)]

        for index, edge_m in enumerate(edges_m, start=1):
            if not is_in_half_open_range(edge_m, 0.0, MAX_EDGE_M):
                logger.debug("Rejected box dimension %d: %r m", index, edge_m)
                raise BoxRangeError(index=index, value_m=edge_m)

        super().__init__(a_m=edges_m[0], b_m=edges_m[1], c_m=edges_m[2])

    # -------------------------------------------------------------------------
    # Pydantic валидация по именам полей
    # -------------------------------------------------------------------------

    @classmethod
    def _require_field_names(cls, data: Any) -> None:
        # Box() без аргументов даёт коробку по умолчанию, поэтому пустой или
        # неполный dict отклоняется до вызова __init__
        if not isinstance(data, dict):
            return
        missing = [name for name in FIELD_NAMES if name not in data]
        if missing:
            raise ValidationError.from_exception_data(
                cls.__name__,
                [{"type": "missing", "loc": (name,), "input": data} for name in missing],
            )

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> "Box":
        """
        Валидация dict с полями a_m, b_m, c_m (метры).

        Raises:
            ValidationError: Если поле отсутствует или нарушает ограничения Field
        """
        cls._require_field_names(obj)
        return super().model_validate(obj, **kwargs)

    @classmethod
    def model_validate_json(cls, json_data: str | bytes | bytearray, **kwargs: Any) -> "Box":
        """
        Валидация JSON с полями a_m, b_m, c_m (метры).

        Raises:
            ValidationError: Если поле отсутствует или нарушает ограничения Field
        """
        try:
            data = json.loads(json_data)
        except ValueError:
            data = None  # невалидный JSON отклоняет сам pydantic
        cls._require_field_names(data)
        return super().model_validate_json(json_data, **kwargs)

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_millimeters(cls, dimensions: tuple[int, int, int]) -> "Box":
        """
        Коробка из целочисленного кортежа в миллиметрах.

        Эквивалентно Box(a, b, c, UnitOfMeasure.MILLIMETER).

        Raises:
            TypeError: Если элементы кортежа не целые числа
            BoxRangeError: Если размер вне диапазона
        """
        if len(dimensions) != 3:
            raise TypeError(f"Expected 3 dimensions, got {len(dimensions)}")
        for value in dimensions:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Millimeter dimensions must be integers, got {value!r}")
        a, b, c = dimensions
        return cls(a, b, c, UnitOfMeasure.MILLIMETER)

    @classmethod
    def parse(cls, text: str, config: BoxTextConfig | None = None) -> "Box":
        """
        Разбор строки вида "1 m × 2 m × 3 m".

        Каждое число читается в своей единице (если config.trailing_unit_only
        не включён).

        Raises:
            BoxFormatError: Невалидная строка, число или единица
            BoxRangeError: Размер вне диапазона
        """
        parsed = parse_dimensions(text, config)
        a, b, c = (to_meters(value, unit) for value, unit in zip(parsed.values, parsed.units))
        return cls(a, b, c)

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "Box":
        """
        Коробка из JSON контракта (contracts/schema/box.json).

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        validate_box_contract(data)
        return cls(data["a_m"], data["b_m"], data["c_m"])

    # -------------------------------------------------------------------------
    # Размеры и производные величины
    # -------------------------------------------------------------------------

    @property
    def edge_a(self) -> float:
        """Размер a в метрах, округлённый до 3 знаков."""
        return round_to_decimals(self.a_m, EDGE_DECIMALS)

    @property
    def edge_b(self) -> float:
        """Размер b в метрах, округлённый до 3 знаков."""
        return round_to_decimals(self.b_m, EDGE_DECIMALS)

    @property
    def edge_c(self) -> float:
        """Размер c в метрах, округлённый до 3 знаков."""
        return round_to_decimals(self.c_m, EDGE_DECIMALS)

    @property
    def volume(self) -> float:
        """Объём (м³), по неокруглённым размерам, округлён до 9 знаков."""
        return round_to_decimals(self.a_m * self.b_m * self.c_m, VOLUME_DECIMALS)

    @property
    def surface_area(self) -> float:
        """Площадь поверхности (м²), по неокруглённым размерам, округлена до 6 знаков."""
        a, b, c = self.a_m, self.b_m, self.c_m
        return round_to_decimals(2 * (a * b + a * c + b * c), SURFACE_AREA_DECIMALS)

    def to_array(self) -> list[float]:
        """[edge_a, edge_b, edge_c]: новый список при каждом вызове."""
        return [self.edge_a, self.edge_b, self.edge_c]

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        yield self.edge_a
        yield self.edge_b
        yield self.edge_c

    def __len__(self) -> int:
        return 3

    # -------------------------------------------------------------------------
    # Bounding combination
    # -------------------------------------------------------------------------

    def combine(self, other: "Box") -> "Box":
        """
        Наименьшая коробка, покрывающая обе (покомпонентно, позиционно).

        Размеры НЕ сортируются: a сравнивается с a, b с b, c с c.
        Результат проходит полную валидацию конструктора.
        """
        return Box(
            max(self.edge_a, other.edge_a),
            max(self.edge_b, other.edge_b),
            max(self.edge_c, other.edge_c),
        )

    def __add__(self, other: object) -> "Box":
        if not isinstance(other, Box):
            return NotImplemented
        return self.combine(other)

    # -------------------------------------------------------------------------
    # Равенство
    # -------------------------------------------------------------------------

    def _canonical_edges(self) -> tuple[float, float, float]:
        a, b, c = sorted(self.to_array())
        return (a, b, c)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self._canonical_edges() == other._canonical_edges()

    def __hash__(self) -> int:
        # Хеш по отсортированным размерам: равные коробки имеют равные хеши
        return hash(self._canonical_edges())

    # -------------------------------------------------------------------------
    # Текстовое представление
    # -------------------------------------------------------------------------

    def format(self, spec: str | None = None, config: BoxTextConfig | None = None) -> str:
        """
        Строка вида "1 m × 2 m × 3 m" в единице spec (m/cm/mm).

        Raises:
            BoxFormatError: Если spec не распознан
        """
        return format_dimensions((self.edge_a, self.edge_b, self.edge_c), spec, config)

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def __str__(self) -> str:
        return self.format()

    # -------------------------------------------------------------------------
    # JSON контракт
    # -------------------------------------------------------------------------

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализация в JSON контракт (неокруглённые метры).

        Returns:
            {"schema_version": "1", "a_m": ..., "b_m": ..., "c_m": ...}
        """
        return {"schema_version": CONTRACT_SCHEMA_VERSION, **self.model_dump()}


def combine_boxes(box1: Box, box2: Box) -> Box:
    """Bounding combination двух коробок (см. Box.combine)."""
    return box1.combine(box2)
