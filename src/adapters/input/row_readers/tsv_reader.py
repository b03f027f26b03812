"""
Adaptador de entrada: Lector de filas separadas por tab.

Es el formato "nativo" del Transaction Detail Report (archivos .TXT que
se descargan del SFTP de PayPal). Una fila por línea, sin comillas:
PayPal no permite tabs ni saltos de línea dentro de los campos en este
formato, así que basta con separar por tab.
"""

from collections.abc import Iterator
from typing import TextIO

from src.domain.ports.row_reader import RowReader
from src.domain.shared.constants import FORMAT_TSV
from src.domain.shared.text_cleaner import chomp


class TsvRowReader(RowReader):
    """Tokeniza líneas separadas por tab."""

    @property
    def format_name(self) -> str:
        return FORMAT_TSV

    def iter_rows(self, stream: TextIO) -> Iterator[list[str]]:
        """Produce una fila por línea.

        Los campos vacíos al final de la línea se conservan: "SB\\tA\\t"
        produce ["SB", "A", ""]. Así la fila mantiene su correspondencia
        posicional con las columnas de CH.
        """
        for line in stream:
            yield chomp(line).split("\t")
