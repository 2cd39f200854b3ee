"""
Entidades del dominio.
"""
from dns_sync.domain.entities.accessory import AccessoryDNS, AccessoryStock
from dns_sync.domain.entities.maintenance import MaintenanceDNS

__all__ = [
    "AccessoryDNS",
    "AccessoryStock",
    "MaintenanceDNS",
]
