"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидатора коробки:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с моделью Box (to_contract / from_contract)
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    BoxContractValidator,
    SchemaLoader,
    get_schema_loader,
    validate_box_contract,
)
from src.core.domain import CONTRACT_SCHEMA_VERSION, Box


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_box_contract():
    """Валидный box контракт."""
    return {"schema_version": "1", "a_m": 1.0, "b_m": 0.25, "c_m": 10.0}


# =============================================================================
# SCHEMA LOADER TESTS
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_box_schema(self) -> None:
        """Схема box загружается и проходит meta-validation"""
        schema = get_schema_loader().load_schema("box")
        assert schema["title"] == "Box"
        assert set(schema["required"]) == {"schema_version", "a_m", "b_m", "c_m"}

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает кэшированный объект"""
        loader = SchemaLoader()
        assert loader.load_schema("box") is loader.load_schema("box")

    def test_missing_schema(self) -> None:
        """Отсутствующая схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Отсутствующий каталог схем → RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        """Схема, не прошедшая meta-validation → ValueError"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# BOX CONTRACT TESTS
# =============================================================================


class TestBoxContractValidator:
    """Тесты валидатора box контракта"""

    def test_valid(self, valid_box_contract) -> None:
        """Валидные данные проходят"""
        validate_box_contract(valid_box_contract)
        BoxContractValidator().validate(valid_box_contract)

    @pytest.mark.parametrize("field", ["schema_version", "a_m", "b_m", "c_m"])
    def test_missing_required(self, valid_box_contract, field: str) -> None:
        """Отсутствие required поля"""
        del valid_box_contract[field]
        with pytest.raises(ValidationError):
            validate_box_contract(valid_box_contract)

    @pytest.mark.parametrize("value", [0, -1.0, 10.5])
    def test_out_of_range(self, valid_box_contract, value: float) -> None:
        """Размер вне (0, 10]"""
        valid_box_contract["b_m"] = value
        with pytest.raises(ValidationError):
            validate_box_contract(valid_box_contract)

    def test_wrong_type(self, valid_box_contract) -> None:
        """Размер должен быть числом"""
        valid_box_contract["a_m"] = "1.0"
        with pytest.raises(ValidationError):
            validate_box_contract(valid_box_contract)

    def test_wrong_schema_version(self, valid_box_contract) -> None:
        """Неизвестная версия схемы"""
        valid_box_contract["schema_version"] = "2"
        with pytest.raises(ValidationError):
            validate_box_contract(valid_box_contract)

    def test_additional_properties_rejected(self, valid_box_contract) -> None:
        """Лишние поля запрещены"""
        valid_box_contract["unit"] = "m"
        with pytest.raises(ValidationError):
            validate_box_contract(valid_box_contract)

    def test_custom_loader(self, tmp_path: Path) -> None:
        """Валидатор использует переданный загрузчик схем"""
        schema = get_schema_loader().load_schema("box")
        (tmp_path / "box.json").write_text(json.dumps(schema), encoding="utf-8")
        validator = BoxContractValidator(SchemaLoader(tmp_path))
        with pytest.raises(ValidationError):
            validator.validate({"a_m": -1.0})


# =============================================================================
# BOX INTEGRATION TESTS
# =============================================================================


class TestBoxContractIntegration:
    """Интеграция контракта с моделью Box"""

    def test_to_contract(self) -> None:
        """Контракт содержит неокруглённые метры"""
        data = Box(1.23456, 2, 3).to_contract()
        assert data == {
            "schema_version": CONTRACT_SCHEMA_VERSION,
            "a_m": 1.23456,
            "b_m": 2.0,
            "c_m": 3.0,
        }
        validate_box_contract(data)

    def test_to_contract_json_serializable(self) -> None:
        """Контракт сериализуется в JSON"""
        text = json.dumps(Box(100, 200, 300, "mm").to_contract())
        assert json.loads(text)["a_m"] == 0.1

    def test_roundtrip(self) -> None:
        """to_contract → from_contract сохраняет коробку и порядок осей"""
        box = Box(3, 1.5, 0.2)
        restored = Box.from_contract(box.to_contract())
        assert restored == box
        assert restored.to_array() == box.to_array()

    def test_from_contract_invalid(self, valid_box_contract) -> None:
        """Невалидный контракт не создаёт коробку"""
        valid_box_contract["c_m"] = 0
        with pytest.raises(ValidationError):
            Box.from_contract(valid_box_contract)
