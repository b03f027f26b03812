"""
Adaptador de salida: Logger silencioso.

Se usa cuando el parser se llama como librería: el llamador recibe el
resultado o la excepción, y no quiere nada impreso. Aun así lleva la
cuenta mínima para que get_summary() sea útil.
"""

from src.domain.ports.process_logger import ProcessLogger


class NullLogger(ProcessLogger):
    """Logger que no imprime nada."""

    def __init__(self) -> None:
        self._archivos_recibidos = 0
        self._archivos_procesados = 0
        self._filas_leidas = 0
        self._total_transacciones = 0
        self._errores: list[dict] = []

    def log_file_received(self, file_name: str, index: int, file_format: str) -> None:
        self._archivos_recibidos += 1

    def log_report_header(
        self, file_name: str, account_id: str, report_version: int | None
    ) -> None:
        pass

    def log_file_complete(self, file_name: str, num_rows: int, num_transacciones: int) -> None:
        self._archivos_procesados += 1
        self._filas_leidas += num_rows

    def log_error(self, file_name: str, error: Exception) -> None:
        self._errores.append({"archivo": file_name, "error": str(error)})

    def log_report_complete(self, num_files: int, num_transacciones: int) -> None:
        self._total_transacciones = num_transacciones

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "filas_leidas": self._filas_leidas,
            "total_transacciones": self._total_transacciones,
            "errores": self._errores,
        }
