"""
Tests para el registro de lectores de filas.
"""

import pytest

from src.adapters.input.row_readers.csv_reader import CsvRowReader
from src.adapters.input.row_readers.tsv_reader import TsvRowReader
from src.infrastructure.registry import RowReaderRegistry, create_default_registry


class TestRowReaderRegistry:
    def test_registro_vacio(self):
        registry = RowReaderRegistry()
        assert len(registry) == 0
        assert registry.get("tsv") is None

    def test_register_y_get(self):
        registry = RowReaderRegistry()
        reader = TsvRowReader()
        registry.register(reader)
        assert registry.get("tsv") is reader

    def test_get_case_insensitive(self):
        registry = RowReaderRegistry()
        registry.register(CsvRowReader())
        assert isinstance(registry.get("CSV"), CsvRowReader)

    def test_duplicado_lanza_error(self):
        registry = RowReaderRegistry()
        registry.register(TsvRowReader())
        with pytest.raises(ValueError, match="Ya existe"):
            registry.register(TsvRowReader())


class TestCreateDefaultRegistry:
    def test_formatos_disponibles(self):
        registry = create_default_registry()
        assert registry.available_formats == ["csv", "tsv"]
        assert len(registry) == 2
