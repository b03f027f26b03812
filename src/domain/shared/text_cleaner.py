"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar líneas y campos crudos antes de
que el clasificador de filas los procese.

Estas funciones NO tienen lógica de negocio (no saben de filas RH/SB ni
de transacciones). Solo operan sobre strings puros.
"""

BOM = "\ufeff"


def strip_bom(text: str) -> str:
    """Elimina el byte-order-mark inicial si existe.

    Los archivos en disco se abren con 'utf-8-sig', que ya lo quita. Esta
    función cubre el caso de texto en memoria copiado de un archivo con BOM.

    Ejemplos:
        >>> strip_bom("\\ufeffRH\\t2016")
        'RH\\t2016'
    """
    return text[1:] if text.startswith(BOM) else text


def chomp(line: str) -> str:
    """Quita el terminador de línea final (\\n, \\r\\n o \\r), nada más.

    A diferencia de str.strip(), NO toca tabs ni espacios: un campo vacío
    al final de la fila sigue siendo un campo.

    Ejemplos:
        >>> chomp("SB\\tAlice\\t\\r\\n")
        'SB\\tAlice\\t'
    """
    return line.rstrip("\r\n")


def field_at(fila: list[str], index: int) -> str:
    """Devuelve el campo en la posición dada, o "" si la fila es más corta."""
    return fila[index] if index < len(fila) else ""


def to_int(value: str) -> int | None:
    """Convierte un campo numérico a int, tolerando espacios y "11.0".

    Returns:
        El entero, o None si el texto no representa un número entero.

    Ejemplos:
        >>> to_int(" 11 ")
        11
        >>> to_int("11.0")
        11
        >>> to_int("once") is None
        True
    """
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if not number.is_integer():
        return None
    return int(number)
