"""
Conversión flexible de fechas del reporte a epoch (segundos Unix).

CONTEXTO DEL PROBLEMA:
PayPal no usa un único formato de fecha. En los reportes reales aparecen:

- RH (fecha de generación):   "2016/07/01 05:24:32 -0700"
- Columnas "*Date" de SB:     "2016/06/30 00:56:37 -0700"
- Reportes exportados a mano: "2024-01-01", "01 Jul 2016 05:24"

SOLUCIÓN:
Se delega el reconocimiento del formato a `dateutil.parser`, que acepta
prácticamente cualquier fecha legible. Este módulo solo:
1. Normaliza el resultado a un entero epoch.
2. Interpreta fechas sin zona horaria como UTC (así el resultado no
   depende de la zona horaria de la máquina que corre el parser).
3. Convierte todos los errores de dateutil en ValueError con el texto original.
"""

from datetime import datetime, timezone

from dateutil import parser as dateutil_parser


def parse_flexible_date(date_text: str) -> int:
    """Parsea una fecha en formato libre y devuelve segundos desde epoch.

    Args:
        date_text: Texto de la fecha tal como aparece en el reporte.

    Returns:
        Entero con los segundos Unix (UTC).

    Raises:
        ValueError: Si el texto está vacío o no contiene una fecha reconocible.

    Ejemplos:
        >>> parse_flexible_date("2024-01-01")
        1704067200
        >>> parse_flexible_date("2016/07/01 05:24:32 -0700")
        1467375872
    """
    text = date_text.strip()

    if not text:
        raise ValueError("El texto de fecha está vacío")

    try:
        parsed = dateutil_parser.parse(text)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Formato de fecha no reconocido: '{text}' — {e}") from e

    return to_epoch(parsed)


def to_epoch(value: datetime) -> int:
    """Convierte un datetime a epoch, asumiendo UTC si no tiene zona."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())
