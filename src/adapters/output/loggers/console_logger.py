"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a un stream
(stdout por defecto; el CLI usa stderr para no mezclarse con el JSON de
salida) y acumula contadores para un resumen final.

Útil para:
- Ejecución manual desde terminal.
- Ver en qué archivo y por qué se abortó un parseo de varios archivos.
"""

from typing import TextIO

from src.domain.exceptions import ParserBaseError
from src.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Args:
            stream: Destino de los mensajes. None = sys.stdout al momento
                   de imprimir (así funciona con capsys en tests).
        """
        self._stream = stream
        self._archivos_recibidos: int = 0
        self._archivos_procesados: int = 0
        self._filas_leidas: int = 0
        self._total_transacciones: int = 0
        self._errores: list[dict] = []

    # --- Por archivo ---

    def log_file_received(self, file_name: str, index: int, file_format: str) -> None:
        self._archivos_recibidos += 1
        self._print(f"  📄 Leyendo [{index}]: {file_name} ({file_format})")

    def log_report_header(
        self, file_name: str, account_id: str, report_version: int | None
    ) -> None:
        self._print(f"  🏦 Cuenta: {account_id} — versión {report_version}")

    def log_file_complete(self, file_name: str, num_rows: int, num_transacciones: int) -> None:
        self._archivos_procesados += 1
        self._filas_leidas += num_rows
        self._print(
            f"  ✅ Completado: {file_name} — "
            f"{num_rows} filas, {num_transacciones} transacciones acumuladas"
        )

    def log_error(self, file_name: str, error: Exception) -> None:
        codigo = error.codigo if isinstance(error, ParserBaseError) else 500
        self._errores.append({"archivo": file_name, "codigo": codigo, "error": str(error)})
        self._print(f"  ❌ Error [{codigo}]: {file_name} — {error}")

    # --- Reporte completo ---

    def log_report_complete(self, num_files: int, num_transacciones: int) -> None:
        self._total_transacciones = num_transacciones
        self._print(
            f"\n📊 Reporte completo: {num_files} archivos, {num_transacciones} transacciones"
        )

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "filas_leidas": self._filas_leidas,
            "total_transacciones": self._total_transacciones,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        self._print("\n" + "=" * 60)
        self._print("RESUMEN DE PROCESAMIENTO")
        self._print("=" * 60)
        self._print(f"  Archivos recibidos:   {self._archivos_recibidos}")
        self._print(f"  Archivos procesados:  {self._archivos_procesados}")
        self._print(f"  Filas leídas:         {self._filas_leidas}")
        self._print(f"  Total transacciones:  {self._total_transacciones}")

        if self._errores:
            self._print("\n  ERRORES:")
            for err in self._errores:
                self._print(f"    - {err['archivo']} [{err['codigo']}]: {err['error']}")

        self._print("=" * 60)

    def _print(self, mensaje: str) -> None:
        print(mensaje, file=self._stream)
