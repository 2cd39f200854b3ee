"""
Casos de uso de la aplicacion.
"""
from .accessory_sync_use_cases import AccessorySyncUseCases
from .maintenance_sync_use_cases import MaintenanceSyncUseCases
from .sync_run_use_cases import SyncRunUseCases

__all__ = ["AccessorySyncUseCases", "MaintenanceSyncUseCases", "SyncRunUseCases"]
