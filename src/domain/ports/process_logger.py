"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante el parseo de un reporte.

¿Por qué no usar simplemente el módulo `logging` de Python?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS de negocio (WHAT):
- "Se empezó a leer el archivo 2 de 3" (no "INFO: opening file")
- "El reporte es de la cuenta X, versión 11" (no "DEBUG: RH row")

La implementación puede usar `logging` internamente, pero el dominio
solo conoce los eventos de negocio. Esto permite:
- En el CLI: imprimir a stderr con un resumen final.
- Como librería: no imprimir nada (NullLogger).
- En tests: acumular en memoria y hacer asserts.

IMPORTANTE: la bitácora NUNCA controla el flujo. Un error se registra
y luego se propaga tal cual al llamador.
"""

from abc import ABC, abstractmethod


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Por archivo ---

    @abstractmethod
    def log_file_received(self, file_name: str, index: int, file_format: str) -> None:
        """Registra que se empezó a leer una entrada.

        Args:
            file_name: Identificador de la entrada (ruta o 'string').
            index: Posición 1-indexed en la lista de entradas.
            file_format: 'tsv' o 'csv'.
        """
        ...

    @abstractmethod
    def log_report_header(
        self, file_name: str, account_id: str, report_version: int | None
    ) -> None:
        """Registra los metadatos tomados de la primera fila RH."""
        ...

    @abstractmethod
    def log_file_complete(self, file_name: str, num_rows: int, num_transacciones: int) -> None:
        """Registra el cierre exitoso de una entrada.

        Args:
            file_name: Identificador de la entrada.
            num_rows: Filas leídas de esta entrada.
            num_transacciones: Transacciones acumuladas hasta ahora (todas
                              las entradas, no solo esta).
        """
        ...

    @abstractmethod
    def log_error(self, file_name: str, error: Exception) -> None:
        """Registra el error terminal que abortó el parseo."""
        ...

    # --- Reporte completo ---

    @abstractmethod
    def log_report_complete(self, num_files: int, num_transacciones: int) -> None:
        """Registra el fin exitoso del parseo del reporte completo."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'filas_leidas': int,
                'total_transacciones': int,
                'errores': List[dict],  # [{archivo, codigo, error}]
            }
        """
        ...
