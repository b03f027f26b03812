"""
Adaptador de entrada: Lector de filas CSV.

PayPal también entrega el reporte como .CSV. A diferencia del TSV, aquí
los campos pueden venir entre comillas y contener comas o saltos de línea
(por ejemplo, en "Transaction Subject" o "Item Name"), así que se usa
el módulo csv en lugar de un split.
"""

import csv
from collections.abc import Iterator
from typing import TextIO

from src.domain.exceptions import ReporteInvalidoError
from src.domain.ports.row_reader import RowReader
from src.domain.shared.constants import FORMAT_CSV, STRING_SOURCE_NAME


class CsvRowReader(RowReader):
    """Tokeniza CSV con comillas (RFC 4180)."""

    def __init__(self, delimiter: str = ",", strict: bool = True) -> None:
        """
        Args:
            delimiter: Separador de campos. PayPal siempre usa coma.
            strict: Si True, comillas mal cerradas son un error en lugar
                   de aceptarse en silencio.
        """
        self._delimiter = delimiter
        self._strict = strict

    @property
    def format_name(self) -> str:
        return FORMAT_CSV

    def iter_rows(self, stream: TextIO) -> Iterator[list[str]]:
        """Produce las filas del CSV.

        Raises:
            ReporteInvalidoError: Si el CSV está mal formado (comillas sin
                                 cerrar, caracteres tras una comilla final).
        """
        reader = csv.reader(stream, delimiter=self._delimiter, strict=self._strict)
        try:
            yield from reader
        except csv.Error as e:
            archivo = getattr(stream, "name", STRING_SOURCE_NAME)
            raise ReporteInvalidoError(
                str(archivo), f"CSV inválido en la línea {reader.line_num}: {e}"
            ) from e
