"""
Servicio de dominio: Clasificador y validador de filas.

Cada fila del Transaction Detail Report empieza con un código de tipo:

    RH  Report header      → fecha de generación, ventana, cuenta, versión
    FH  File header        → número de secuencia del archivo
    SH  Section header     → abre la sección de transacciones
    CH  Column header      → nombres de columna de las transacciones
    SB  Section body       → una transacción
    SF/FF/RF               → pies de sección/archivo/reporte (se ignoran)
    SC  Section count      → conteo de la sección (no se verifica)
    RC  Report count       → conteo total de transacciones (se verifica)

Este módulo es la MÁQUINA DE ESTADOS del parser: recibe una fila y el
EstadoParseo compartido, decide qué tipo de fila es, la valida contra lo
acumulado y muta el estado. Ante cualquier violación lanza
ReporteInvalidoError y el parseo completo se aborta.

¿Por qué una clase y no funciones sueltas?
Porque la tabla de despacho (código → handler) y los parsers de fecha
inyectables viven juntos, y el orquestador recibe UNA dependencia. El
clasificador NO guarda estado propio: todo va en el EstadoParseo, así que
una misma instancia sirve para cualquier número de parseos.
"""

from collections.abc import Callable

from src.domain.exceptions import ReporteInvalidoError
from src.domain.models.estado_parseo import EstadoParseo, Transaccion
from src.domain.shared.constants import (
    DATE_COLUMN_SUFFIX,
    ROW_COLUMN_HEADER,
    ROW_FILE_FOOTER,
    ROW_FILE_HEADER,
    ROW_REPORT_COUNT,
    ROW_REPORT_FOOTER,
    ROW_REPORT_HEADER,
    ROW_SECTION_BODY,
    ROW_SECTION_COUNT,
    ROW_SECTION_FOOTER,
    ROW_SECTION_HEADER,
    SUPPORTED_VERSION,
    UNSET_DATE_VALUES,
)
from src.domain.shared.date_parser import parse_flexible_date
from src.domain.shared.text_cleaner import field_at, to_int


class RowClassifier:
    """Despacha cada fila según su código y valida la estructura del reporte."""

    # Filas reconocidas que por ahora no se procesan.
    # SC podría verificarse contra las SB de la sección; RC ya cubre el total.
    _IGNORED_CODES: frozenset[str] = frozenset(
        {ROW_SECTION_FOOTER, ROW_FILE_FOOTER, ROW_REPORT_FOOTER, ROW_SECTION_COUNT}
    )

    def __init__(self, date_parser: Callable[[str], int] = parse_flexible_date) -> None:
        """
        Args:
            date_parser: Función texto → epoch. Por defecto dateutil; los
                        tests pueden inyectar una determinista.
        """
        self._parse_date = date_parser
        self._handlers: dict[str, Callable[[EstadoParseo, list[str]], None]] = {
            ROW_REPORT_HEADER: self._report_header,
            ROW_FILE_HEADER: self._file_header,
            ROW_SECTION_HEADER: self._section_header,
            ROW_COLUMN_HEADER: self._column_header,
            ROW_SECTION_BODY: self._section_body,
            ROW_REPORT_COUNT: self._report_count,
        }

    def apply(self, estado: EstadoParseo, fila: list[str]) -> None:
        """Clasifica una fila y aplica su efecto sobre el estado.

        Args:
            estado: Estado del parseo en curso. Se muta in place.
            fila: Campos de la fila ya tokenizada. fila[0] es el código.

        Raises:
            ReporteInvalidoError: Si la fila viola la estructura del reporte.
        """
        codigo = field_at(fila, 0)

        if codigo in self._IGNORED_CODES:
            return

        handler = self._handlers.get(codigo)
        if handler is None:
            raise self._error(estado, f"Tipo de fila desconocido '{codigo}'")

        handler(estado, fila)

    def finalize_file(self, estado: EstadoParseo) -> None:
        """Verifica las invariantes de cierre de archivo y reinicia banderas.

        Cada archivo debe tener exactamente una RH, una FH y una SH. Los
        duplicados ya se rechazaron en apply(); aquí se detectan las ausentes.

        Raises:
            ReporteInvalidoError: Si falta alguna de RH, FH o SH.
        """
        faltantes = [
            (ROW_REPORT_HEADER, estado.report_header_seen),
            (ROW_FILE_HEADER, estado.file_header_seen),
            (ROW_SECTION_HEADER, estado.section_header_seen),
        ]
        nombre = estado.current_file_name
        estado.cerrar_archivo()

        for codigo, visto in faltantes:
            if not visto:
                raise ReporteInvalidoError(
                    nombre, f"No {codigo} row seen: el archivo '{nombre}' no tiene fila {codigo}"
                )

    def finalize_report(self, estado: EstadoParseo) -> None:
        """Cierra el reporte completo. El esquema de columnas deja de aplicar."""
        estado.transaction_columns = None

    # =================================================================
    # HANDLERS POR TIPO DE FILA
    # =================================================================

    def _report_header(self, estado: EstadoParseo, fila: list[str]) -> None:
        """RH: metadatos del reporte (solo la primera RH los escribe)."""
        self._mark_seen(estado, "report_header_seen", ROW_REPORT_HEADER)

        version_texto = field_at(fila, 4)
        version = to_int(version_texto)

        # La fecha solo se parsea si todavía no hay una: una RH posterior
        # con fecha ilegible no debe fallar si su valor se va a descartar.
        if estado.report_generation_date is None:
            estado.report_generation_date = self._date_field(
                estado, ROW_REPORT_HEADER, field_at(fila, 1)
            )
        estado.establecer_si_vacio("reporting_window", field_at(fila, 2))
        estado.establecer_si_vacio("account_id", field_at(fila, 3))
        estado.establecer_si_vacio("report_version", version)

        if version != SUPPORTED_VERSION:
            raise self._error(
                estado,
                f"Versión ({version_texto}) no soportada, "
                f"solo se soporta la versión {SUPPORTED_VERSION}",
            )

    def _file_header(self, estado: EstadoParseo, fila: list[str]) -> None:
        """FH: el número de secuencia debe ser la posición del archivo."""
        self._mark_seen(estado, "file_header_seen", ROW_FILE_HEADER)

        secuencia_texto = field_at(fila, 1)
        if to_int(secuencia_texto) != estado.current_file_index:
            raise self._error(
                estado,
                f"Secuencia de archivo inesperada ({secuencia_texto}): "
                f"se esperaba la secuencia {estado.current_file_index} "
                f"para el archivo '{estado.current_file_name}'",
            )

    def _section_header(self, estado: EstadoParseo, fila: list[str]) -> None:
        self._mark_seen(estado, "section_header_seen", ROW_SECTION_HEADER)

    def _column_header(self, estado: EstadoParseo, fila: list[str]) -> None:
        """CH: la primera del reporte define el esquema; las demás se ignoran."""
        estado.establecer_si_vacio("transaction_columns", list(fila[1:]))

    def _section_body(self, estado: EstadoParseo, fila: list[str]) -> None:
        """SB: una transacción, mapeada posicionalmente contra el esquema CH.

        La columna i corresponde al campo i+1 de la fila. Las columnas cuyo
        nombre termina en 'Date' se convierten a epoch, salvo "" y "0",
        que significan "sin fecha" y se conservan como texto.
        Campos sobrantes (sin columna) se descartan; si la fila es más corta
        que el esquema, la transacción solo tiene las columnas presentes.
        """
        columnas = estado.transaction_columns
        if columnas is None:
            raise self._error(
                estado, f"Fila {ROW_SECTION_BODY} antes de cualquier fila {ROW_COLUMN_HEADER}"
            )

        transaccion: Transaccion = {}
        for columna, valor in zip(columnas, fila[1:]):
            if columna.endswith(DATE_COLUMN_SUFFIX) and valor not in UNSET_DATE_VALUES:
                transaccion[columna] = self._date_field(estado, ROW_SECTION_BODY, valor)
            else:
                transaccion[columna] = valor

        estado.transactions.append(transaccion)

    def _report_count(self, estado: EstadoParseo, fila: list[str]) -> None:
        """RC: el conteo declarado debe coincidir con lo acumulado."""
        declarado = field_at(fila, 1)
        encontradas = len(estado.transactions)

        if to_int(declarado) != encontradas:
            raise self._error(
                estado,
                f"Número de transacciones no coincide "
                f"(found={encontradas}, from RC={declarado})",
            )

    # =================================================================
    # FUNCIONES INTERNAS
    # =================================================================

    def _mark_seen(self, estado: EstadoParseo, bandera: str, codigo: str) -> None:
        """Marca una fila única por archivo, rechazando la segunda aparición."""
        if getattr(estado, bandera):
            raise self._error(
                estado, f"Fila {codigo} repetida en el archivo '{estado.current_file_name}'"
            )
        setattr(estado, bandera, True)

    def _date_field(self, estado: EstadoParseo, codigo: str, texto: str) -> int:
        try:
            return self._parse_date(texto)
        except ValueError as e:
            raise self._error(estado, f"Fecha inválida en fila {codigo}: '{texto}' — {e}") from e

    @staticmethod
    def _error(estado: EstadoParseo, causa: str) -> ReporteInvalidoError:
        return ReporteInvalidoError(estado.current_file_name, causa)
