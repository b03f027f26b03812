"""
Adaptador de salida: Escritor de JSON.

Escribe exactamente la estructura pública del reporte (to_dict): cuenta,
fecha de generación (epoch), versión, ventana y transacciones. Es la
salida por defecto del CLI, pensada para encadenarse con jq u otros
procesos.
"""

import json
from pathlib import Path
from typing import TextIO

from src.domain.exceptions import OutputError
from src.domain.models.reporte_paypal import ReportePayPal
from src.domain.ports.output_writer import OutputWriter


class JsonWriter(OutputWriter):
    """Serializa el reporte a JSON indentado."""

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    @property
    def extension(self) -> str:
        return ".json"

    def write(self, reporte: ReportePayPal, output_path: Path) -> Path:
        if output_path.suffix.lower() != self.extension:
            output_path = output_path.with_suffix(self.extension)

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                self.dump(reporte, f)
        except OSError as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    def dump(self, reporte: ReportePayPal, stream: TextIO) -> None:
        """Escribe el JSON en un stream abierto (por ejemplo, sys.stdout)."""
        json.dump(reporte.to_dict(), stream, indent=self._indent, ensure_ascii=False)
        stream.write("\n")
