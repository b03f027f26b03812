"""
Constantes del formato Transaction Detail Report de PayPal.

Centralizadas aquí para que el clasificador, el orquestador y los tests
hablen de los mismos valores sin repetir literales.
"""

SUPPORTED_VERSION: int = 11
"""Única versión del reporte soportada (campo 5 de la fila RH)."""

FORMAT_TSV: str = "tsv"
FORMAT_CSV: str = "csv"
SUPPORTED_FORMATS: tuple[str, ...] = (FORMAT_TSV, FORMAT_CSV)

STRING_SOURCE_NAME: str = "string"
"""Identificador usado en mensajes de error cuando la entrada es texto en memoria."""

DATE_COLUMN_SUFFIX: str = "Date"
"""Las columnas cuyo nombre termina así se convierten a epoch."""

UNSET_DATE_VALUES: frozenset[str] = frozenset({"", "0"})
"""Valores de una columna Date que significan "sin fecha": se conservan tal cual."""

# Códigos de tipo de fila (primer campo de cada fila)
ROW_REPORT_HEADER = "RH"
ROW_FILE_HEADER = "FH"
ROW_SECTION_HEADER = "SH"
ROW_COLUMN_HEADER = "CH"
ROW_SECTION_BODY = "SB"
ROW_SECTION_FOOTER = "SF"
ROW_FILE_FOOTER = "FF"
ROW_REPORT_FOOTER = "RF"
ROW_SECTION_COUNT = "SC"
ROW_REPORT_COUNT = "RC"
