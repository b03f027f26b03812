"""
Ensamblado por defecto del parser, para usarlo como librería.

El CLI arma sus componentes a mano (para poder elegir el logger); quien
solo quiere "parsear estos archivos" usa parse_paypal_txdetail_report().

Uso:
    from src.infrastructure.bootstrap import parse_paypal_txdetail_report

    reporte = parse_paypal_txdetail_report(files=["STL-20160701.01.011.CSV"])
    print(reporte.account_id, reporte.num_transacciones)
"""

from collections.abc import Sequence
from pathlib import Path

from src.adapters.output.loggers.null_logger import NullLogger
from src.domain.models.reporte_paypal import ReportePayPal
from src.domain.ports.process_logger import ProcessLogger
from src.domain.services.report_parser import TxDetailReportParser
from src.infrastructure.registry import create_default_registry


def create_default_parser(logger: ProcessLogger | None = None) -> TxDetailReportParser:
    """Crea un TxDetailReportParser con los lectores TSV/CSV registrados.

    Args:
        logger: Bitácora a usar. Si es None, no se registra nada.
    """
    return TxDetailReportParser(
        reader_registry=create_default_registry(),
        logger=logger or NullLogger(),
    )


def parse_paypal_txdetail_report(
    files: Sequence[str | Path] | None = None,
    strings: Sequence[str] | None = None,
    format: str | None = None,
) -> ReportePayPal:
    """Parsea un Transaction Detail Report de PayPal.

    Los archivos pueden estar todos en TSV o todos en CSV, sin mezclar.
    Si hay varios, deben pasarse en orden de secuencia. En lugar de
    `files` se puede pasar el contenido de cada archivo en `strings`.

    Raises:
        ParserBaseError: Cualquier error; `codigo` es 400 o 500.
    """
    return create_default_parser().parse(files=files, strings=strings, format=format)
