"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir un reporte ya parseado en algún formato
persistente (JSON, Excel, etc.).

¿Por qué es un puerto de SALIDA?
Porque el dominio (clasificador, orquestador) no decide NI conoce el formato
de salida. Solo produce un ReportePayPal y lo pasa a quien implemente
este puerto.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.reporte_paypal import ReportePayPal


class OutputWriter(ABC):
    """Interfaz para escribir reportes parseados."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """Extensión (con punto) que genera este writer. Ejemplo: '.json'."""
        ...

    @abstractmethod
    def write(self, reporte: ReportePayPal, output_path: Path) -> Path:
        """Escribe el reporte en la ruta indicada.

        Args:
            reporte: Reporte ya validado.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...
