"""
Punto de entrada CLI: paypal-txdetail.

Uso:
    # Parsear un reporte de un solo archivo e imprimir JSON
    paypal-txdetail STL-20160701.01.011.TXT

    # Reporte partido en varios archivos (en orden de secuencia)
    paypal-txdetail STL-20160701.01.011.CSV STL-20160701.02.011.CSV

    # Forzar el formato y guardar a Excel
    paypal-txdetail reporte.dat --format tsv -o /ruta/reporte.xlsx

Este módulo es el ÚNICO lugar donde se ensamblan los componentes del CLI:
- Crea las instancias concretas (ConsoleLogger, registro de lectores, writers).
- Las inyecta en el TxDetailReportParser.
- Ejecuta el parseo y escribe la salida.

No contiene lógica de negocio — solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path

from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.writers.excel_writer import ExcelWriter
from src.adapters.output.writers.json_writer import JsonWriter
from src.domain.exceptions import ParserBaseError
from src.domain.ports.output_writer import OutputWriter
from src.domain.services.report_parser import TxDetailReportParser
from src.domain.shared.constants import SUPPORTED_FORMATS
from src.infrastructure.registry import create_default_registry


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    # --- Ensamblar componentes ---
    # Los mensajes de progreso van a stderr: stdout queda para el JSON.
    logger = ConsoleLogger(stream=sys.stderr)

    parser = TxDetailReportParser(
        reader_registry=create_default_registry(),
        logger=logger,
    )

    # --- Procesar ---
    try:
        reporte = parser.parse(files=args.files, format=args.format)
    except ParserBaseError as e:
        print(f"❌ [{e.codigo}] {e}", file=sys.stderr)
        sys.exit(1)

    # --- Escribir salida ---
    if args.output is None:
        JsonWriter().dump(reporte, sys.stdout)
    else:
        writer = _select_writer(Path(args.output))
        try:
            output_file = writer.write(reporte, Path(args.output))
        except ParserBaseError as e:
            print(f"❌ [{e.codigo}] {e}", file=sys.stderr)
            sys.exit(1)
        print(f"\n📁 Salida generada: {output_file}", file=sys.stderr)

    if not args.quiet:
        logger.print_summary()


def _select_writer(output_path: Path) -> OutputWriter:
    """Elige el writer por extensión: .xlsx → Excel; cualquier otra → JSON."""
    if output_path.suffix.lower() == ".xlsx":
        return ExcelWriter()
    return JsonWriter()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="paypal-txdetail",
        description="Parser de reportes de detalle de transacciones (TRR) de PayPal",
        epilog="Ejemplo: paypal-txdetail STL-20160701.01.011.CSV -o reporte.xlsx",
    )

    parser.add_argument(
        "files",
        nargs="+",
        help="Archivos del reporte, en orden de secuencia (todos TSV o todos CSV)",
    )

    parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        default=None,
        help="Formato de los archivos. Si no se especifica, se deduce de la "
        "extensión del primer archivo (.csv → csv; otra → tsv).",
    )

    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        help="Archivo de salida (.json o .xlsx). "
        "Si no se especifica, se imprime JSON en stdout.",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="No imprimir el resumen final en stderr.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
