"""
Excepciones de dominio del proyecto paypal-txdetail-parser.

¿Por qué excepciones propias en lugar de usar ValueError/RuntimeError?
Porque el llamador necesita distinguir entre "el reporte está mal formado"
(culpa del archivo, no tiene caso reintentar) y "no se pudo leer el archivo"
(problema del entorno). Cada excepción lleva un `codigo` numérico al estilo
HTTP para que el CLI o un servicio puedan reportarlo sin inspeccionar tipos.

Jerarquía:
    ParserBaseError
    ├── ReporteInvalidoError    (400) → El reporte viola la estructura RH/FH/SH/...
    ├── FormatoInvalidoError    (400) → Argumentos o formato de entrada inválidos
    ├── ExtractionError         (500) → Error al abrir/leer/tokenizar un archivo
    └── OutputError             (500) → Error al generar el archivo de salida
"""


class ParserBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar CUALQUIER error del proyecto con un solo
    `except ParserBaseError` en el CLI, mientras que los llamadores
    específicos pueden capturar subclases individuales.
    """

    codigo: int = 500
    """Clase numérica del error: 400 = entrada mal formada,
    500 = falla de entorno (I/O, librerías)."""

    def __init__(self, mensaje: str):
        self.mensaje = mensaje
        super().__init__(mensaje)


class ReporteInvalidoError(ParserBaseError):
    """Se lanza cuando el reporte no cumple la estructura esperada.

    Ejemplos:
    - Fila RH/FH/SH repetida dentro de un mismo archivo.
    - Versión de reporte distinta de 11.
    - Número de secuencia en FH que no coincide con la posición del archivo.
    - Conteo de RC distinto al número de transacciones acumuladas.
    - Tipo de fila desconocido (incluida una línea en blanco, código '').
    - CSV mal formado (comillas sin cerrar).

    Todos son terminales: el parseo completo se aborta.
    """

    codigo = 400

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(causa)


class FormatoInvalidoError(ParserBaseError):
    """Se lanza cuando la invocación no tiene el formato esperado.

    Ejemplos:
    - Se pidió format='xls' (solo existen 'tsv' y 'csv').
    - No se pasaron ni archivos ni strings, o se pasaron ambos.
    """

    codigo = 400

    def __init__(self, formato_esperado: str, detalle: str = ""):
        self.formato_esperado = formato_esperado
        mensaje = f"Entrada inválida. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class ExtractionError(ParserBaseError):
    """Se lanza cuando falla la lectura de filas de un archivo.

    Esto puede pasar porque:
    - El archivo no existe o no hay permisos de lectura.
    - El archivo no es UTF-8 válido.
    - No hay lector registrado para el formato pedido.
    """

    codigo = 500

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo '{archivo}': {causa}")


class OutputError(ParserBaseError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - Falta el motor de Excel (xlsxwriter).
    """

    codigo = 500

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
