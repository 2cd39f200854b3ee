"""
Servicios de aplicacion.

Transformaciones puras (sin I/O) de las filas de DNS a registros canonicos.
"""
from dns_sync.application.services.code_normalizer import parse_accessory_code
from dns_sync.application.services.accessory_aggregator import aggregate_accessories
from dns_sync.application.services.maintenance_mapper import (
    map_maintenance,
    map_maintenances,
)

__all__ = [
    "parse_accessory_code",
    "aggregate_accessories",
    "map_maintenance",
    "map_maintenances",
]
