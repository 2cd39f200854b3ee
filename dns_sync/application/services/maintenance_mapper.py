"""
Mapeo de filas de planes de mantenimiento de DNS a MaintenanceDNS.
"""
from typing import Any, Iterable, List, Mapping

from dns_sync.application.dto.dns_row_dto import MaintenanceRowDTO, decode_row
from dns_sync.domain.entities.maintenance import MaintenanceDNS

MAINTENANCES_SOURCE = "v_tall_crmv_planes_mantenimiento"


def map_maintenance(raw: Mapping[str, Any]) -> MaintenanceDNS:
    """Proyecta una fila cruda (columnas de DNS) a MaintenanceDNS."""
    row = decode_row(MaintenanceRowDTO, raw, source=MAINTENANCES_SOURCE)
    return MaintenanceDNS(
        id=row.id,
        modelo=row.modelo,
        ano=row.ano,
        descripcion=row.descripcion,
        kilometraje=row.kilometraje,
        notas=row.notas,
        precio=row.precio,
    )


def map_maintenances(rows: Iterable[Mapping[str, Any]]) -> List[MaintenanceDNS]:
    """Mapeo 1:1, sin deduplicar ni agregar; respeta el orden de origen."""
    return [map_maintenance(raw) for raw in rows]
