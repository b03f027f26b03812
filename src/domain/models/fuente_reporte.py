"""
Modelo de dominio: Una entrada del reporte (archivo en disco o texto en memoria).

Este modelo actúa como el "puente" entre lo que pasa el llamador
(rutas o strings) y los RowReader que tokenizan filas.

¿Por qué no pasar directamente rutas o strings? Porque:
1. El orquestador trata ambos casos igual: "abre la fuente y dame filas".
2. El nombre para mensajes de error ('reporte_1.csv' o 'string') viaja
   junto con la fuente, sin diccionarios paralelos.
3. Abrir archivos en UTF-8 con BOM eliminado queda en UN solo lugar.
"""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from src.domain.exceptions import ExtractionError
from src.domain.shared.constants import STRING_SOURCE_NAME
from src.domain.shared.text_cleaner import strip_bom


@dataclass(frozen=True)
class FuenteReporte:
    """Una entrada del reporte. Exactamente uno de `ruta` o `contenido`."""

    nombre: str
    """Identificador para mensajes de error: la ruta tal como se recibió,
    o 'string' para texto en memoria."""

    ruta: Path | None = None
    contenido: str | None = None

    @classmethod
    def desde_archivo(cls, ruta: str | Path) -> "FuenteReporte":
        return cls(nombre=str(ruta), ruta=Path(ruta))

    @classmethod
    def desde_string(cls, contenido: str) -> "FuenteReporte":
        return cls(nombre=STRING_SOURCE_NAME, contenido=contenido)

    @property
    def es_archivo(self) -> bool:
        return self.ruta is not None

    def verificar(self) -> None:
        """Verifica que la fuente se pueda leer, sin consumirla.

        Raises:
            ExtractionError: Si el archivo no existe o no es un archivo regular.
        """
        if not self.es_archivo:
            return
        if not self.ruta.exists():
            raise ExtractionError(self.nombre, "El archivo no existe")
        if not self.ruta.is_file():
            raise ExtractionError(self.nombre, "La ruta no es un archivo")

    def abrir(self) -> TextIO:
        """Abre la fuente como stream de texto.

        newline="" deja los terminadores de línea intactos: el lector CSV
        los necesita así para campos con saltos de línea embebidos, y el
        lector TSV los quita con chomp().

        Raises:
            ExtractionError: Si el archivo no se puede abrir.
        """
        if self.ruta is None:
            return io.StringIO(strip_bom(self.contenido or ""), newline="")
        try:
            return open(self.ruta, encoding="utf-8-sig", newline="")
        except OSError as e:
            raise ExtractionError(self.nombre, f"No se puede abrir el archivo: {e}") from e

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if (self.ruta is None) == (self.contenido is None):
            raise ValueError("Una FuenteReporte necesita exactamente uno de ruta o contenido")
