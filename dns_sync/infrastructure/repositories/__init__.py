"""
Repositorios SQL (origen DNS y destinos Stock / Store).
"""
from dns_sync.infrastructure.repositories.dns_repository import DNSRepository
from dns_sync.infrastructure.repositories.stock_repository import StockRepository
from dns_sync.infrastructure.repositories.maintenance_repository import MaintenanceRepository

__all__ = ["DNSRepository", "StockRepository", "MaintenanceRepository"]
