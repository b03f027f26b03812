"""
Utilidades compartidas del dominio.

Estas funciones son usadas por el clasificador de filas, el orquestador y
los adaptadores. Solo operan sobre tipos nativos de Python; la única
dependencia externa es dateutil, para reconocer fechas en formato libre.

Uso:
    from src.domain.shared.constants import SUPPORTED_VERSION, FORMAT_TSV
    from src.domain.shared.date_parser import parse_flexible_date
    from src.domain.shared.text_cleaner import chomp, strip_bom, to_int
"""
