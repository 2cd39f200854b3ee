"""
Entidad de plan de mantenimiento.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class MaintenanceDNS:
    """
    Plan de mantenimiento canonico (uno por fila de DNS).

    `id` es el identificador de DNS y se guarda como `id_dns` en Store;
    `notas` se guarda en la columna `operacion`.
    """

    id: int
    modelo: Optional[str]
    ano: Optional[int]
    descripcion: Optional[str]
    kilometraje: Optional[int]
    notas: Optional[str]
    precio: Optional[Decimal]
