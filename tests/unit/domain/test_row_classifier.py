"""
Tests para el RowClassifier (máquina de estados del reporte).

Cada clase cubre un tipo de fila. Se usa un EstadoParseo real y el
parser de fechas real (dateutil), salvo donde se indica.
"""

import pytest

from src.domain.exceptions import ReporteInvalidoError
from src.domain.models.estado_parseo import EstadoParseo
from src.domain.services.row_classifier import RowClassifier

RH = ["RH", "2016/07/01 05:24:32 -0700", "A", "ACC123", "11"]


@pytest.fixture
def classifier() -> RowClassifier:
    return RowClassifier()


@pytest.fixture
def estado() -> EstadoParseo:
    estado = EstadoParseo()
    estado.iniciar_archivo(1, "reporte.txt")
    return estado


class TestReportHeader:
    """Fila RH: metadatos del reporte."""

    def test_guarda_metadatos(self, classifier, estado):
        classifier.apply(estado, RH)

        assert estado.report_generation_date == 1467375872
        assert estado.reporting_window == "A"
        assert estado.account_id == "ACC123"
        assert estado.report_version == 11
        assert estado.report_header_seen

    def test_rh_duplicada_en_el_mismo_archivo(self, classifier, estado):
        classifier.apply(estado, RH)
        with pytest.raises(ReporteInvalidoError, match="RH repetida") as exc:
            classifier.apply(estado, RH)
        assert exc.value.codigo == 400
        assert exc.value.archivo == "reporte.txt"

    def test_version_no_soportada(self, classifier, estado):
        fila = RH[:4] + ["10"]
        with pytest.raises(ReporteInvalidoError) as exc:
            classifier.apply(estado, fila)

        mensaje = str(exc.value)
        assert "(10)" in mensaje
        assert "11" in mensaje
        assert exc.value.codigo == 400

    def test_version_no_soportada_conserva_los_demas_campos(self, classifier, estado):
        """Los campos se guardan antes de validar la versión."""
        with pytest.raises(ReporteInvalidoError):
            classifier.apply(estado, RH[:4] + ["10"])
        assert estado.account_id == "ACC123"
        assert estado.report_version == 10

    def test_version_no_numerica(self, classifier, estado):
        with pytest.raises(ReporteInvalidoError, match="abc"):
            classifier.apply(estado, RH[:4] + ["abc"])

    def test_version_faltante(self, classifier, estado):
        with pytest.raises(ReporteInvalidoError, match="no soportada"):
            classifier.apply(estado, RH[:4])

    def test_rh_de_otro_archivo_no_sobrescribe(self, classifier, estado):
        classifier.apply(estado, RH)
        estado.cerrar_archivo()
        estado.iniciar_archivo(2, "parte2.txt")

        classifier.apply(estado, ["RH", "2024-01-01", "X", "OTRA", "11"])

        assert estado.account_id == "ACC123"
        assert estado.reporting_window == "A"
        assert estado.report_generation_date == 1467375872

    def test_fecha_invalida(self, classifier, estado):
        with pytest.raises(ReporteInvalidoError, match="Fecha inválida en fila RH"):
            classifier.apply(estado, ["RH", "no es fecha", "A", "ACC123", "11"])

    def test_fecha_ya_establecida_no_se_vuelve_a_parsear(self, classifier, estado):
        classifier.apply(estado, RH)
        estado.cerrar_archivo()
        estado.iniciar_archivo(2, "parte2.txt")

        classifier.apply(estado, ["RH", "basura", "A", "ACC123", "11"])

        assert estado.report_generation_date == 1467375872

    def test_parser_de_fechas_inyectable(self, estado):
        classifier = RowClassifier(date_parser=lambda texto: 42)
        classifier.apply(estado, RH)
        assert estado.report_generation_date == 42


class TestFileHeader:
    """Fila FH: secuencia del archivo."""

    def test_secuencia_correcta(self, classifier, estado):
        classifier.apply(estado, ["FH", "1"])
        assert estado.file_header_seen

    def test_secuencia_incorrecta(self, classifier, estado):
        estado.iniciar_archivo(2, "parte2.txt")
        with pytest.raises(ReporteInvalidoError) as exc:
            classifier.apply(estado, ["FH", "3"])

        mensaje = str(exc.value)
        assert "secuencia 2" in mensaje
        assert "parte2.txt" in mensaje

    def test_secuencia_con_ceros_a_la_izquierda(self, classifier, estado):
        """PayPal numera los archivos como 01, 02..."""
        classifier.apply(estado, ["FH", "01"])
        assert estado.file_header_seen

    def test_secuencia_no_numerica(self, classifier, estado):
        with pytest.raises(ReporteInvalidoError, match="inesperada"):
            classifier.apply(estado, ["FH", "uno"])

    def test_fh_duplicada(self, classifier, estado):
        classifier.apply(estado, ["FH", "1"])
        with pytest.raises(ReporteInvalidoError, match="FH repetida"):
            classifier.apply(estado, ["FH", "1"])


class TestSectionHeader:
    def test_marca_seccion(self, classifier, estado):
        classifier.apply(estado, ["SH"])
        assert estado.section_header_seen

    def test_sh_duplicada(self, classifier, estado):
        classifier.apply(estado, ["SH"])
        with pytest.raises(ReporteInvalidoError, match="SH repetida"):
            classifier.apply(estado, ["SH"])


class TestColumnHeader:
    def test_captura_columnas(self, classifier, estado):
        classifier.apply(estado, ["CH", "Transaction ID", "Transaction Initiation Date"])
        assert estado.transaction_columns == ["Transaction ID", "Transaction Initiation Date"]

    def test_solo_la_primera_ch_cuenta(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name", "Date"])
        classifier.apply(estado, ["CH", "Otra", "Cosa"])
        assert estado.transaction_columns == ["Name", "Date"]


class TestSectionBody:
    """Fila SB: una transacción."""

    def test_mapeo_posicional(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name", "Amount"])
        classifier.apply(estado, ["SB", "Alice", "100"])
        assert estado.transactions == [{"Name": "Alice", "Amount": "100"}]

    def test_columna_date_se_convierte_a_epoch(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name", "Date"])
        classifier.apply(estado, ["SB", "Alice", "2024-01-01"])
        assert estado.transactions[0]["Date"] == 1704067200

    def test_columna_date_vacia_queda_vacia(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name", "Auction Closing Date"])
        classifier.apply(estado, ["SB", "Alice", ""])
        assert estado.transactions[0]["Auction Closing Date"] == ""

    def test_columna_date_en_cero_queda_como_texto(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name", "Auction Closing Date"])
        classifier.apply(estado, ["SB", "Alice", "0"])
        assert estado.transactions[0]["Auction Closing Date"] == "0"

    def test_solo_sufijo_date_exacto(self, classifier, estado):
        """'Dated' o 'date' en minúscula no son columnas de fecha."""
        classifier.apply(estado, ["CH", "Dated", "update"])
        classifier.apply(estado, ["SB", "2024-01-01", "2024-01-01"])
        assert estado.transactions[0] == {"Dated": "2024-01-01", "update": "2024-01-01"}

    def test_fecha_invalida_en_columna_date(self, classifier, estado):
        classifier.apply(estado, ["CH", "Date"])
        with pytest.raises(ReporteInvalidoError, match="Fecha inválida en fila SB"):
            classifier.apply(estado, ["SB", "no es fecha"])

    def test_campos_sobrantes_se_descartan(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name"])
        classifier.apply(estado, ["SB", "Alice", "extra"])
        assert estado.transactions == [{"Name": "Alice"}]

    def test_fila_corta_solo_tiene_columnas_presentes(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name", "Amount"])
        classifier.apply(estado, ["SB", "Alice"])
        assert estado.transactions == [{"Name": "Alice"}]

    def test_sb_antes_de_ch(self, classifier, estado):
        with pytest.raises(ReporteInvalidoError, match="antes de cualquier fila CH"):
            classifier.apply(estado, ["SB", "Alice"])

    def test_columnas_de_un_archivo_anterior(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name"])
        estado.cerrar_archivo()
        estado.iniciar_archivo(2, "parte2.txt")

        classifier.apply(estado, ["SB", "Bob"])

        assert estado.transactions == [{"Name": "Bob"}]


class TestReportCount:
    """Fila RC: conteo total de transacciones."""

    def test_conteo_correcto(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name"])
        classifier.apply(estado, ["SB", "Alice"])
        classifier.apply(estado, ["RC", "1"])

    def test_conteo_cero(self, classifier, estado):
        classifier.apply(estado, ["RC", "0"])

    def test_conteo_no_coincide(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name"])
        classifier.apply(estado, ["SB", "Alice"])
        with pytest.raises(ReporteInvalidoError, match="found=1, from RC=2") as exc:
            classifier.apply(estado, ["RC", "2"])
        assert exc.value.codigo == 400

    def test_conteo_no_numerico(self, classifier, estado):
        with pytest.raises(ReporteInvalidoError, match="from RC=muchas"):
            classifier.apply(estado, ["RC", "muchas"])


class TestFilasIgnoradas:
    @pytest.mark.parametrize("codigo", ["SF", "FF", "RF", "SC"])
    def test_no_modifican_el_estado(self, classifier, estado, codigo):
        classifier.apply(estado, [codigo, "999"])
        assert estado == EstadoParseo(current_file_index=1, current_file_name="reporte.txt")


class TestTipoDesconocido:
    def test_codigo_desconocido(self, classifier, estado):
        with pytest.raises(ReporteInvalidoError, match="desconocido 'ZZ'"):
            classifier.apply(estado, ["ZZ", "x"])

    def test_codigo_en_minusculas_es_desconocido(self, classifier, estado):
        with pytest.raises(ReporteInvalidoError, match="'rh'"):
            classifier.apply(estado, ["rh"])

    @pytest.mark.parametrize("fila", [[], [""], ["", "", ""]])
    def test_fila_vacia_es_desconocida(self, classifier, estado, fila):
        with pytest.raises(ReporteInvalidoError, match="desconocido ''"):
            classifier.apply(estado, fila)


class TestFinalizeFile:
    """Cierre de archivo: RH, FH y SH son obligatorias."""

    def _abrir_completo(self, classifier, estado):
        classifier.apply(estado, RH)
        classifier.apply(estado, ["FH", "1"])
        classifier.apply(estado, ["SH"])

    def test_archivo_completo(self, classifier, estado):
        self._abrir_completo(classifier, estado)
        classifier.finalize_file(estado)

        assert not estado.report_header_seen
        assert not estado.file_header_seen
        assert not estado.section_header_seen
        assert estado.current_file_index == 0
        assert estado.current_file_name == ""

    def test_sin_rh(self, classifier, estado):
        classifier.apply(estado, ["FH", "1"])
        classifier.apply(estado, ["SH"])
        with pytest.raises(ReporteInvalidoError, match="No RH row seen") as exc:
            classifier.finalize_file(estado)
        assert exc.value.archivo == "reporte.txt"

    def test_sin_fh(self, classifier, estado):
        classifier.apply(estado, RH)
        classifier.apply(estado, ["SH"])
        with pytest.raises(ReporteInvalidoError, match="No FH row seen"):
            classifier.finalize_file(estado)

    def test_sin_sh(self, classifier, estado):
        classifier.apply(estado, RH)
        classifier.apply(estado, ["FH", "1"])
        with pytest.raises(ReporteInvalidoError, match="No SH row seen"):
            classifier.finalize_file(estado)

    def test_archivo_vacio_reporta_rh_primero(self, classifier, estado):
        with pytest.raises(ReporteInvalidoError, match="No RH row seen"):
            classifier.finalize_file(estado)


class TestFinalizeReport:
    def test_limpia_columnas(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name"])
        classifier.finalize_report(estado)
        assert estado.transaction_columns is None

    def test_conserva_transacciones(self, classifier, estado):
        classifier.apply(estado, ["CH", "Name"])
        classifier.apply(estado, ["SB", "Alice"])
        classifier.finalize_report(estado)
        assert estado.transactions == [{"Name": "Alice"}]
