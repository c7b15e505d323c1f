"""
Исключения доменной модели Box.

Два различимых вида ошибок:
- BoxRangeError: размер вне диапазона (0, 10] м после конверсии
- BoxFormatError: невалидный format spec или строка для разбора

Оба наследуют ValueError, поэтому код, ловящий ValueError, продолжает работать.
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BoxRangeError(ValueError):
    """
    Размер коробки вне допустимого диапазона.

    Attributes:
        index: Номер размера (1, 2 или 3) в порядке a, b, c
        value_m: Значение размера после конверсии в метры
    """

    def __init__(self, index: int, value_m: float, message: str | None = None):
        self.index = index
        self.value_m = value_m
        super().__init__(
            message or f"Dimension {index} is out of range: {value_m!r} m (expected 0 < edge <= 10 m)"
        )


class BoxFormatError(ValueError):
    """
    Невалидный format spec или входная строка.

    Attributes:
        token: Проблемный токен (spec, число, единица или вся строка)
    """

    def __init__(self, message: str, token: str | None = None):
        self.token = token
        super().__init__(message)
