"""
Servicio de dominio: Parser del Transaction Detail Report.

Orquesta el parseo completo de un reporte, que puede venir partido en
varios archivos (PayPal divide los reportes grandes):
1. Recibe rutas de archivo o strings (exactamente uno de los dos).
2. Determina el formato: explícito, o deducido de la primera entrada.
3. Verifica que todos los archivos se puedan leer ANTES de parsear.
4. Para cada entrada, en orden: abre, tokeniza con el RowReader del
   formato, y pasa cada fila al RowClassifier.
5. Al cerrar cada entrada valida las invariantes de archivo; al final,
   cierra el reporte.
6. Devuelve un ReportePayPal, o propaga el primer error.

¿Por qué no poner esta lógica en el CLI?
Porque esta orquestación es LÓGICA DE NEGOCIO: el orden de los archivos
define la secuencia esperada en FH, y los metadatos se toman de la
primera RH. El CLI solo decide QUÉ archivos pasar y DÓNDE guardar.
"""

from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO

from src.domain.exceptions import (
    ExtractionError,
    FormatoInvalidoError,
    ParserBaseError,
)
from src.domain.models.estado_parseo import EstadoParseo
from src.domain.models.fuente_reporte import FuenteReporte
from src.domain.models.reporte_paypal import ReportePayPal
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.row_reader import RowReader
from src.domain.services.row_classifier import RowClassifier
from src.domain.shared.constants import FORMAT_CSV, FORMAT_TSV, SUPPORTED_FORMATS
from src.infrastructure.registry import RowReaderRegistry


class TxDetailReportParser:
    """Parsea un Transaction Detail Report (una o varias entradas).

    Recibe sus dependencias por constructor (Dependency Injection).
    No guarda estado entre llamadas: cada parse() crea su propio
    EstadoParseo, así que la misma instancia se puede reutilizar.
    """

    def __init__(
        self,
        reader_registry: RowReaderRegistry,
        logger: ProcessLogger,
        classifier: RowClassifier | None = None,
    ) -> None:
        """
        Args:
            reader_registry: Registro de lectores por formato ('tsv', 'csv').
            logger: Logger para la bitácora de procesamiento.
            classifier: Clasificador de filas. Si es None se usa uno con
                       el parser de fechas por defecto (dateutil).
        """
        self._registry = reader_registry
        self._logger = logger
        self._classifier = classifier or RowClassifier()

    def parse(
        self,
        files: Sequence[str | Path] | None = None,
        strings: Sequence[str] | None = None,
        format: str | None = None,
    ) -> ReportePayPal:
        """Parsea el reporte completo y devuelve el resultado.

        Args:
            files: Rutas de los archivos del reporte, en orden de secuencia.
            strings: Alternativa a `files`: el contenido de cada archivo.
            format: 'tsv' o 'csv'. Si es None se deduce de la primera entrada.

        Returns:
            ReportePayPal con los metadatos y todas las transacciones.

        Raises:
            FormatoInvalidoError: Argumentos inválidos (400).
            ReporteInvalidoError: El reporte viola la estructura (400).
            ExtractionError: Un archivo no se pudo abrir o leer (500).
        """
        fuentes = self._build_sources(files, strings)
        formato = self._resolve_format(format, fuentes[0])
        reader = self._get_reader(formato)

        # Todos los archivos se verifican antes de leer la primera fila:
        # un archivo faltante al final no debe reportarse como error de
        # estructura de un archivo anterior.
        for fuente in fuentes:
            try:
                fuente.verificar()
            except ExtractionError as e:
                self._logger.log_error(fuente.nombre, e)
                raise

        estado = EstadoParseo()
        for index, fuente in enumerate(fuentes, start=1):
            self._parse_source(estado, fuente, index, formato, reader)

        self._classifier.finalize_report(estado)
        reporte = ReportePayPal.from_estado(estado, [f.nombre for f in fuentes])

        self._logger.log_report_complete(len(fuentes), reporte.num_transacciones)
        return reporte

    def _parse_source(
        self,
        estado: EstadoParseo,
        fuente: FuenteReporte,
        index: int,
        formato: str,
        reader: RowReader,
    ) -> None:
        """Lee una entrada fila por fila y valida su cierre."""
        estado.iniciar_archivo(index, fuente.nombre)
        self._logger.log_file_received(fuente.nombre, index, formato)

        header_logged = estado.report_generation_date is not None
        num_rows = 0

        try:
            with fuente.abrir() as stream:
                for fila in self._read_rows(fuente, reader, stream):
                    num_rows += 1
                    self._classifier.apply(estado, fila)

                    if not header_logged and estado.report_header_seen:
                        self._logger.log_report_header(
                            fuente.nombre, estado.account_id or "", estado.report_version
                        )
                        header_logged = True

            self._classifier.finalize_file(estado)
        except ParserBaseError as e:
            self._logger.log_error(fuente.nombre, e)
            raise

        self._logger.log_file_complete(fuente.nombre, num_rows, len(estado.transactions))

    @staticmethod
    def _read_rows(
        fuente: FuenteReporte, reader: RowReader, stream: TextIO
    ) -> Iterator[list[str]]:
        """Itera las filas del reader convirtiendo fallas de lectura en ExtractionError."""
        try:
            yield from reader.iter_rows(stream)
        except UnicodeDecodeError as e:
            raise ExtractionError(fuente.nombre, f"El archivo no es UTF-8 válido: {e}") from e
        except OSError as e:
            raise ExtractionError(fuente.nombre, f"Error de lectura: {e}") from e

    # =================================================================
    # FUNCIONES INTERNAS: validación de argumentos
    # =================================================================

    @staticmethod
    def _build_sources(
        files: Sequence[str | Path] | None,
        strings: Sequence[str] | None,
    ) -> list[FuenteReporte]:
        """Convierte los argumentos en FuenteReporte, exigiendo exactamente uno."""
        if files and strings:
            raise FormatoInvalidoError(
                "files o strings", "Se recibieron ambos; especifique solo uno"
            )
        if files:
            return [FuenteReporte.desde_archivo(f) for f in files]
        if strings:
            return [FuenteReporte.desde_string(s) for s in strings]
        raise FormatoInvalidoError("files o strings", "Especifique archivos (o strings)")

    @staticmethod
    def _resolve_format(format: str | None, primera: FuenteReporte) -> str:
        """Determina el formato: explícito, o deducido de la primera entrada.

        - Archivos: extensión .csv → csv; cualquier otra (.txt, .tsv) → tsv.
        - Strings: si el primer string tiene un tab → tsv; si no → csv.
        """
        if format:
            formato = format.strip().lower()
            if formato not in SUPPORTED_FORMATS:
                raise FormatoInvalidoError(
                    " o ".join(SUPPORTED_FORMATS), f"Formato no soportado: '{format}'"
                )
            return formato

        if primera.es_archivo:
            return FORMAT_CSV if primera.ruta.suffix.lower() == ".csv" else FORMAT_TSV
        return FORMAT_TSV if "\t" in (primera.contenido or "") else FORMAT_CSV

    def _get_reader(self, formato: str) -> RowReader:
        reader = self._registry.get(formato)
        if reader is None:
            raise ExtractionError(
                formato,
                f"No hay lector registrado para '{formato}'. "
                f"Formatos disponibles: {self._registry.available_formats}",
            )
        return reader
