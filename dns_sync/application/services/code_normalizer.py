"""
Normalizacion de codigos de accesorio DNS al formato de sku de Stock.
"""
import re

_DIS_SUFFIX = re.compile(r"[a-zA-Z0-9]*-DIS")

# Se valida el sufijo "-DIS" pero se corta por "-DSI", que nunca aparece
# en un codigo que paso la validacion: la funcion devuelve el codigo tal cual.
# TODO: confirmar con inventario si los codigos "-DIS" deben perder el sufijo.
_SPLIT_TOKEN = "-DSI"


def parse_accessory_code(codigo: str) -> str:
    """
    Convierte un codigo de DNS en el sku usado por Stock.

    Actualmente es la identidad para cualquier entrada.
    """
    if not _DIS_SUFFIX.fullmatch(codigo):
        return codigo

    return codigo.split(_SPLIT_TOKEN)[0]
