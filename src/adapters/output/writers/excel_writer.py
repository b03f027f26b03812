"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con el layout estándar de 2 hojas:
- Hoja 1 (Reporte): metadatos del reporte (cuenta, ventana, versión,
  fecha de generación, archivos de origen).
- Hoja 2 (Transacciones): una fila por transacción, con las columnas en
  el orden del esquema CH.

Las columnas "*Date" vienen como epoch (int) en el ReportePayPal; aquí se
convierten a fecha para que Excel las muestre como tal. Es la única
transformación: los demás campos se escriben como texto, tal cual.
"""

from pathlib import Path

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.reporte_paypal import ReportePayPal
from src.domain.ports.output_writer import OutputWriter
from src.domain.shared.constants import DATE_COLUMN_SUFFIX


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    @property
    def extension(self) -> str:
        return ".xlsx"

    def write(self, reporte: ReportePayPal, output_path: Path) -> Path:
        """Escribe el reporte a Excel.

        Args:
            reporte: Reporte ya parseado.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if output_path.suffix.lower() != self.extension:
            output_path = output_path.with_suffix(self.extension)

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(reporte, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    # =================================================================
    # FUNCIONES INTERNAS: construcción de DataFrames
    # =================================================================

    @staticmethod
    def build_reporte_frame(reporte: ReportePayPal) -> pd.DataFrame:
        """Hoja Reporte: una sola fila con los metadatos."""
        return pd.DataFrame(
            [
                {
                    "Cuenta": reporte.account_id,
                    "Ventana": reporte.reporting_window,
                    "Versión": reporte.report_version,
                    "Generado": pd.to_datetime(reporte.report_generation_date, unit="s"),
                    "Transacciones": reporte.num_transacciones,
                    "Archivos": ", ".join(reporte.archivos_origen),
                }
            ]
        )

    @staticmethod
    def build_transacciones_frame(reporte: ReportePayPal) -> pd.DataFrame:
        """Hoja Transacciones: columnas en orden de esquema, fechas convertidas.

        Solo los epoch enteros se convierten; las celdas "sin fecha" ("" o "0")
        quedan como NaT (celda vacía en Excel).
        """
        columnas = reporte.columnas
        df = pd.DataFrame(reporte.transactions, columns=columnas)

        for columna in columnas:
            if columna.endswith(DATE_COLUMN_SUFFIX):
                es_epoch = df[columna].map(lambda v: isinstance(v, int))
                epoch = pd.to_numeric(df[columna].where(es_epoch), errors="coerce")
                df[columna] = pd.to_datetime(epoch, unit="s")

        return df

    def _escribir_excel(self, reporte: ReportePayPal, output_path: Path) -> None:
        df_reporte = self.build_reporte_frame(reporte)
        df_transacciones = self.build_transacciones_frame(reporte)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_reporte.to_excel(writer, index=False, sheet_name="Reporte")
            df_transacciones.to_excel(writer, index=False, sheet_name="Transacciones")

            # --- Aplicar formato ---
            workbook = writer.book
            ws_reporte = writer.sheets["Reporte"]
            ws_transacciones = writer.sheets["Transacciones"]

            # Formato para texto (mantener ceros iniciales en IDs)
            text_format = workbook.add_format({"num_format": "@"})
            date_format = workbook.add_format({"num_format": "yyyy-mm-dd hh:mm:ss"})

            ws_reporte.set_column("A:A", 18, text_format)  # Cuenta
            ws_reporte.set_column("B:C", 10)  # Ventana, Versión
            ws_reporte.set_column("D:D", 20, date_format)  # Generado
            ws_reporte.set_column("E:E", 14)  # Transacciones
            ws_reporte.set_column("F:F", 40)  # Archivos

            for index, columna in enumerate(df_transacciones.columns):
                if columna.endswith(DATE_COLUMN_SUFFIX):
                    ws_transacciones.set_column(index, index, 20, date_format)
                else:
                    ws_transacciones.set_column(index, index, max(12, len(columna) + 2))
