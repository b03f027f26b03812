"""
Puerto de entrada: Lector de filas (tokenizador).

Define el contrato para convertir un stream de texto en filas de campos.
Cada formato de archivo tiene su propio adaptador que implementa este puerto:

    RowReader (interfaz)
    ├── TsvRowReader     → Una fila por línea, campos separados por tab
    └── CsvRowReader     → CSV con comillas (RFC 4180), módulo csv

¿Por qué devuelve un Iterator y no una lista?
Porque el clasificador consume una fila a la vez y aborta en el primer
error. Con un iterador no se lee (ni se tokeniza) nada más allá de la
fila que provocó el error, y el archivo se cierra en cuanto termina el
`with` del orquestador.

¿Por qué es una Abstract Base Class (ABC)?
Porque queremos que Python lance un error si alguien crea un adaptador
que no implementa todos los métodos.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TextIO


class RowReader(ABC):
    """Interfaz para tokenizar un stream de texto en filas."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Nombre del formato que maneja este lector: 'tsv' o 'csv'.

        Se usa como clave en el registro de lectores (Registry).
        Debe estar en minúsculas.
        """
        ...

    @abstractmethod
    def iter_rows(self, stream: TextIO) -> Iterator[list[str]]:
        """Produce las filas del stream, en orden, de forma perezosa.

        Args:
            stream: Stream de texto abierto con newline="" (los terminadores
                    de línea llegan intactos).

        Yields:
            Lista de campos (strings) por cada fila. El primer campo es el
            código de tipo de fila (RH, FH, SB...).

        Raises:
            ReporteInvalidoError: Si el texto no se puede tokenizar (por ejemplo,
                            comillas CSV sin cerrar en modo estricto).
        """
        ...
