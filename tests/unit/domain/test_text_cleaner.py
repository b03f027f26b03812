"""
Tests para src.domain.shared.text_cleaner
"""

from src.domain.shared.text_cleaner import chomp, field_at, strip_bom, to_int


class TestChomp:
    def test_quita_lf(self):
        assert chomp("RH\t2016\n") == "RH\t2016"

    def test_quita_crlf(self):
        assert chomp("RH\t2016\r\n") == "RH\t2016"

    def test_conserva_tab_final(self):
        """Un tab final es un campo vacío, no espacio sobrante."""
        assert chomp("SB\tAlice\t\n") == "SB\tAlice\t"

    def test_sin_terminador(self):
        assert chomp("RF") == "RF"


class TestStripBom:
    def test_quita_bom_inicial(self):
        assert strip_bom("\ufeffRH\t2016") == "RH\t2016"

    def test_sin_bom_no_cambia(self):
        assert strip_bom("RH\t2016") == "RH\t2016"

    def test_bom_en_medio_se_conserva(self):
        assert strip_bom("RH\ufeff") == "RH\ufeff"


class TestFieldAt:
    def test_campo_existente(self):
        assert field_at(["RC", "5"], 1) == "5"

    def test_fila_corta_devuelve_vacio(self):
        assert field_at(["RC"], 1) == ""

    def test_fila_vacia(self):
        assert field_at([], 0) == ""


class TestToInt:
    def test_entero(self):
        assert to_int("11") == 11

    def test_con_espacios(self):
        assert to_int(" 2 ") == 2

    def test_decimal_entero(self):
        assert to_int("11.0") == 11

    def test_decimal_no_entero(self):
        assert to_int("11.5") is None

    def test_texto(self):
        assert to_int("once") is None

    def test_vacio(self):
        assert to_int("") is None
