"""
Registro de lectores de filas disponibles.

Centraliza la relación nombre_formato → reader_instance.
Agregar un nuevo formato al sistema requiere solo 2 pasos:
1. Crear la clase XxxRowReader que implemente RowReader.
2. Registrarla aquí con register() o agregarla a create_default_registry().

¿Por qué un registro separado y no hardcodear en el orquestador?
Porque el orquestador no debe saber qué tokenizadores existen. Solo pide
"dame el lector para csv" y el registro se lo da.
"""

from src.domain.ports.row_reader import RowReader


class RowReaderRegistry:
    """Registro de lectores de filas por formato."""

    def __init__(self) -> None:
        self._readers: dict[str, RowReader] = {}

    def register(self, reader: RowReader) -> None:
        """Registra un lector. La clave es reader.format_name (minúsculas).

        Args:
            reader: Instancia de un RowReader concreto.

        Raises:
            ValueError: Si ya existe un lector para ese formato.
        """
        name = reader.format_name.lower()
        if name in self._readers:
            raise ValueError(
                f"Ya existe un lector registrado para '{name}': "
                f"{type(self._readers[name]).__name__}. "
                f"No se puede registrar {type(reader).__name__}."
            )
        self._readers[name] = reader

    def get(self, format_name: str) -> RowReader | None:
        """Obtiene el lector para un formato.

        Args:
            format_name: Nombre del formato (case-insensitive).

        Returns:
            RowReader si existe, None si no hay lector para ese formato.
        """
        return self._readers.get(format_name.lower())

    @property
    def available_formats(self) -> list[str]:
        """Lista de formatos con lector disponible."""
        return sorted(self._readers.keys())

    def __len__(self) -> int:
        return len(self._readers)


def create_default_registry() -> RowReaderRegistry:
    """Crea un registro con los lectores TSV y CSV.

    Returns:
        RowReaderRegistry con todos los lectores registrados.
    """
    from src.adapters.input.row_readers.csv_reader import CsvRowReader
    from src.adapters.input.row_readers.tsv_reader import TsvRowReader

    registry = RowReaderRegistry()
    registry.register(TsvRowReader())
    registry.register(CsvRowReader())
    return registry
