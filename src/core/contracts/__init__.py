"""
Contract Validation Module

Модуль для валидации JSON контракта коробки.
"""

from .validators import (
    BoxContractValidator,
    SchemaLoader,
    get_schema_loader,
    validate_box_contract,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "BoxContractValidator",
    # Functions
    "get_schema_loader",
    "validate_box_contract",
]
