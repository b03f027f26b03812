"""
Modelos de dominio del proyecto paypal-txdetail-parser.

Los modelos de resultado son dataclasses inmutables (frozen=True). La única
excepción es EstadoParseo, el acumulador interno de un parseo en curso.

Uso:
    from src.domain.models import EstadoParseo, FuenteReporte, ReportePayPal
"""

from src.domain.models.estado_parseo import EstadoParseo, Transaccion
from src.domain.models.fuente_reporte import FuenteReporte
from src.domain.models.reporte_paypal import ReportePayPal

__all__ = [
    "EstadoParseo",
    "FuenteReporte",
    "ReportePayPal",
    "Transaccion",
]
