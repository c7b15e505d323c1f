"""
Domain models and value objects.

Contains the Box value type, units of measure and the box text format.
"""

from src.core.domain.box import (
    CONTRACT_SCHEMA_VERSION,
    DEFAULT_EDGE_M,
    EDGE_DECIMALS,
    MAX_EDGE_M,
    SURFACE_AREA_DECIMALS,
    VOLUME_DECIMALS,
    Box,
    combine_boxes,
)
from src.core.domain.box_text import (
    DIMENSION_SEPARATOR,
    TEXT_TOKEN_COUNT,
    BoxTextConfig,
    ParsedDimensions,
    format_dimensions,
    parse_dimensions,
)
from src.core.domain.errors import BoxFormatError, BoxRangeError
from src.core.domain.units import (
    UNITS_PER_METER,
    UnitOfMeasure,
    format_invariant_float,
    from_meters,
    parse_invariant_float,
    parse_unit,
    to_meters,
)

__all__ = [
    # Units module
    "UnitOfMeasure",
    "UNITS_PER_METER",
    "to_meters",
    "from_meters",
    "parse_unit",
    "parse_invariant_float",
    "format_invariant_float",
    # Errors
    "BoxRangeError",
    "BoxFormatError",
    # Text format
    "DIMENSION_SEPARATOR",
    "TEXT_TOKEN_COUNT",
    "BoxTextConfig",
    "ParsedDimensions",
    "format_dimensions",
    "parse_dimensions",
    # Box model
    "Box",
    "combine_boxes",
    "DEFAULT_EDGE_M",
    "MAX_EDGE_M",
    "EDGE_DECIMALS",
    "VOLUME_DECIMALS",
    "SURFACE_AREA_DECIMALS",
    "CONTRACT_SCHEMA_VERSION",
]
