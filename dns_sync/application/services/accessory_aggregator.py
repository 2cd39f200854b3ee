"""
Agregacion de filas de accesorios de DNS.

La vista de DNS devuelve una fila por (codigo, bodega). Stock maneja un
solo sku por codigo, por lo que las existencias se suman por codigo.
"""
from typing import Any, Iterable, List, Mapping

from dns_sync.application.dto.dns_row_dto import AccessoryRowDTO, decode_row
from dns_sync.application.services.code_normalizer import parse_accessory_code
from dns_sync.domain.entities.accessory import AccessoryDNS

ACCESSORIES_SOURCE = "v_accesorios_stock"


def aggregate_accessories(rows: Iterable[Mapping[str, Any]]) -> List[AccessoryDNS]:
    """
    Agrupa las filas por `codigo` crudo.

    - `stock` se suma entre todas las filas del mismo codigo (NULL suma 0)
    - el resto de campos se toma de la primera fila vista
    - `codigo_stock` se calcula con parse_accessory_code

    El orden del resultado es el de la primera aparicion de cada codigo.

    Raises:
        SchemaMismatchException: si alguna fila no cumple el esquema
    """
    by_code: dict[str, AccessoryDNS] = {}

    for raw in rows:
        row = decode_row(AccessoryRowDTO, raw, source=ACCESSORIES_SOURCE)

        existing = by_code.get(row.codigo)
        if existing is not None:
            existing.stock += row.stock or 0
            continue

        by_code[row.codigo] = AccessoryDNS(
            bodega=row.bodega,
            des_bodega=row.des_bodega,
            codigo=row.codigo,
            codigo_stock=parse_accessory_code(row.codigo),
            descripcion=row.descripcion,
            valor_unitario_sin_iva=row.valor_unitario_sin_iva,
            valor_con_iva=row.valorconiva,
            stock=row.stock or 0,
        )

    return list(by_code.values())
