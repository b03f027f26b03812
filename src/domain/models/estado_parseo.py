"""
Modelo de dominio: Estado acumulado de un parseo.

Un EstadoParseo vive exactamente lo que dura una llamada a parse():
- Se crea vacío al inicio.
- El RowClassifier lo muta fila por fila, archivo por archivo.
- Al terminar con éxito, sus campos se copian a un ReportePayPal.
- Si hay error, se descarta completo (nunca se expone un resultado parcial).

¿Por qué NO es frozen como los demás modelos?
Porque es precisamente el acumulador. Todo lo demás (ReportePayPal,
FuenteReporte) es inmutable; este es el único objeto que cambia, y nunca
sale del servicio que lo creó.
"""

from dataclasses import dataclass, field
from typing import Any

Transaccion = dict[str, Any]
"""Una transacción: nombre de columna → valor (str, o int epoch para fechas)."""


@dataclass
class EstadoParseo:
    """Estado mutable de un parseo en curso."""

    # --- Metadatos del reporte (se escriben una sola vez, desde la primera RH) ---

    report_generation_date: int | None = None
    reporting_window: str | None = None
    account_id: str | None = None
    report_version: int | None = None

    # --- Archivo en curso (solo válidos mientras se lee un archivo) ---

    current_file_index: int = 0
    """Posición 1-indexed del archivo actual en la lista de entrada."""

    current_file_name: str = ""
    """Identificador del archivo actual. Solo se usa en mensajes de error."""

    # --- Banderas por archivo (se reinician al cerrar cada archivo) ---

    report_header_seen: bool = False
    file_header_seen: bool = False
    section_header_seen: bool = False

    # --- Acumulado del reporte completo ---

    transaction_columns: list[str] | None = None
    """Esquema de columnas de la primera fila CH. No se reinicia por archivo:
    una fila CH en el archivo 1 aplica a las SB de los archivos siguientes."""

    transactions: list[Transaccion] = field(default_factory=list)

    def establecer_si_vacio(self, campo: str, valor: Any) -> None:
        """Escribe `campo` solo si todavía vale None.

        Así se modela que los metadatos del reporte se toman de la PRIMERA
        fila RH: las RH de archivos posteriores no los sobrescriben.
        """
        if getattr(self, campo) is None:
            setattr(self, campo, valor)

    def iniciar_archivo(self, index: int, nombre: str) -> None:
        """Prepara el estado para leer el archivo `index` (1-indexed)."""
        self.current_file_index = index
        self.current_file_name = nombre

    def cerrar_archivo(self) -> None:
        """Limpia los campos transitorios y las banderas del archivo actual."""
        self.current_file_index = 0
        self.current_file_name = ""
        self.report_header_seen = False
        self.file_header_seen = False
        self.section_header_seen = False
