"""
Modelo de dominio: Resultado completo del parseo de un reporte PayPal.

Este es el objeto central que sale del servicio:
- Lo PRODUCE TxDetailReportParser al terminar sin errores.
- Lo CONSUMEN los OutputWriter (JSON, Excel).
- Lo REGISTRA el ProcessLogger (número de transacciones).

Solo existe si el parseo completo fue exitoso. No hay "reporte parcial".
"""

from dataclasses import dataclass, field
from typing import Any

from src.domain.models.estado_parseo import EstadoParseo, Transaccion
from src.domain.shared.constants import SUPPORTED_VERSION


@dataclass(frozen=True)
class ReportePayPal:
    """Reporte de detalle de transacciones PayPal ya validado."""

    account_id: str
    """ID de la cuenta PayPal (campo 4 de la primera RH)."""

    report_generation_date: int
    """Fecha de generación del reporte, en segundos epoch."""

    report_version: int
    """Versión del esquema. Siempre 11 (las demás se rechazan)."""

    reporting_window: str
    """Ventana de reporte (campo 3 de RH). Ejemplo: 'A', 'X'."""

    transactions: list[Transaccion] = field(default_factory=list)
    """Transacciones en el orden en que aparecieron (archivo, luego fila)."""

    archivos_origen: list[str] = field(default_factory=list)
    """Identificadores de las entradas parseadas, para trazabilidad."""

    @property
    def num_transacciones(self) -> int:
        return len(self.transactions)

    @property
    def columnas(self) -> list[str]:
        """Nombres de columna en el orden en que aparecen por primera vez.

        Útil para los writers: el esquema CH ya no está disponible (se limpia
        al cerrar el reporte), pero cada transacción conserva el orden de
        inserción de sus columnas.
        """
        vistas: dict[str, None] = {}
        for tx in self.transactions:
            for nombre in tx:
                vistas.setdefault(nombre, None)
        return list(vistas)

    def to_dict(self) -> dict[str, Any]:
        """Estructura de salida pública (la misma que se serializa a JSON)."""
        return {
            "account_id": self.account_id,
            "report_generation_date": self.report_generation_date,
            "report_version": self.report_version,
            "reporting_window": self.reporting_window,
            "transactions": [dict(tx) for tx in self.transactions],
        }

    @classmethod
    def from_estado(cls, estado: EstadoParseo, archivos: list[str]) -> "ReportePayPal":
        """Construye el reporte final a partir del estado acumulado."""
        return cls(
            account_id=estado.account_id or "",
            report_generation_date=estado.report_generation_date or 0,
            report_version=estado.report_version or SUPPORTED_VERSION,
            reporting_window=estado.reporting_window or "",
            transactions=list(estado.transactions),
            archivos_origen=list(archivos),
        )

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if self.report_version != SUPPORTED_VERSION:
            raise ValueError(
                f"Versión de reporte no soportada: {self.report_version}. "
                f"Solo se soporta {SUPPORTED_VERSION}."
            )
