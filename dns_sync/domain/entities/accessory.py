"""
Entidades de accesorios (repuestos) en origen y destino.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class AccessoryDNS:
    """
    Accesorio canonico despues de agregar las filas de DNS.

    Hay un registro por `codigo` distinto; `stock` es la suma de todas
    las bodegas. El resto de campos proviene de la primera fila vista.
    """

    bodega: Optional[str]
    des_bodega: Optional[str]
    codigo: str                 # Codigo en DNS (se repite por bodega)
    codigo_stock: str           # Codigo normalizado, coincide con sku en Stock
    descripcion: Optional[str]
    valor_unitario_sin_iva: Optional[Decimal]
    valor_con_iva: Optional[Decimal]
    stock: int


@dataclass(frozen=True)
class AccessoryStock:
    """Proyeccion de lectura de un producto en la base Stock."""

    product_id: int
    sku: str
    stock_quantity: Optional[int]
