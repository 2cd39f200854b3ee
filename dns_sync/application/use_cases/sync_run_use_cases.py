"""
Orquestador de la corrida completa DNS -> Stock / Store.

Secuencia lineal:
    conectar DNS -> leer y agregar accesorios -> reconciliar accesorios
    -> leer y mapear mantenimientos -> reconciliar mantenimientos

Cualquier error no controlado en la secuencia aborta la corrida. Los
errores por registro los manejan los reconciliadores.
"""
from typing import Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from dns_sync.application.dto.sync_result_dto import RunStatus, SyncRunResultDTO
from dns_sync.application.services.accessory_aggregator import aggregate_accessories
from dns_sync.application.services.maintenance_mapper import map_maintenances
from dns_sync.application.use_cases.accessory_sync_use_cases import AccessorySyncUseCases
from dns_sync.application.use_cases.maintenance_sync_use_cases import MaintenanceSyncUseCases
from dns_sync.core.config import Settings
from dns_sync.infrastructure.database.session import create_engine_from_config, dispose_engines
from dns_sync.infrastructure.repositories.dns_repository import DNSRepository
from dns_sync.shared.exceptions.sync import SourceConnectionException


class SyncRunUseCases:
    """
    Ejecuta ambos pipelines, uno a la vez, contra una conexion DNS compartida
    y dos conexiones destino independientes.
    """

    def __init__(
        self,
        *,
        dns_engine: AsyncEngine,
        stock_engine: AsyncEngine,
        store_engine: AsyncEngine,
        accessories_view: str,
        maintenances_view: str,
        stock_table: str,
        store_table: str,
    ):
        self.dns_engine = dns_engine
        self.stock_engine = stock_engine
        self.store_engine = store_engine
        self.accessories_view = accessories_view
        self.maintenances_view = maintenances_view
        self.accessory_sync = AccessorySyncUseCases(stock_engine, table=stock_table)
        self.maintenance_sync = MaintenanceSyncUseCases(store_engine, table=store_table)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SyncRunUseCases":
        """Construye el orquestador con un engine por base configurada."""
        return cls(
            dns_engine=create_engine_from_config(settings.dns_config()),
            stock_engine=create_engine_from_config(settings.stock_config()),
            store_engine=create_engine_from_config(settings.store_config()),
            accessories_view=settings.DNS_ACCESSORIES_VIEW,
            maintenances_view=settings.DNS_MAINTENANCES_VIEW,
            stock_table=settings.STOCK_PRODUCTS_TABLE,
            store_table=settings.STORE_MAINTENANCES_TABLE,
        )

    async def run(self) -> SyncRunResultDTO:
        """
        Ejecuta la corrida completa.

        Nunca propaga excepciones: un aborto queda reflejado en el status
        del resultado y en el log.
        """
        result = SyncRunResultDTO()
        source_conn: Optional[AsyncConnection] = None

        try:
            source_conn = await self._connect_source()
            dns = DNSRepository(
                source_conn,
                accessories_view=self.accessories_view,
                maintenances_view=self.maintenances_view,
            )

            accessories = aggregate_accessories(await dns.fetch_accessory_rows())
            result.accessories = await self.accessory_sync.synchronize(accessories)

            maintenances = map_maintenances(await dns.fetch_maintenance_rows())
            result.maintenances = await self.maintenance_sync.synchronize(maintenances)

        except Exception as e:
            logger.exception(f"El proceso no pudo completarse: {e}")
            result.status = RunStatus.ABORTED
            result.error = str(e)
            return result

        finally:
            await self._release(source_conn)

        if any(p is not None and p.has_errors for p in (result.accessories, result.maintenances)):
            result.status = RunStatus.COMPLETED_WITH_ERRORS
            logger.warning("Sincronizacion completada con errores en algunos registros")
        else:
            logger.success("Sincronizacion completada correctamente")
        return result

    async def _release(self, source_conn: Optional[AsyncConnection]) -> None:
        """Cierra la conexion DNS y los engines; un fallo aqui solo se registra."""
        if source_conn is not None:
            try:
                await source_conn.close()
            except Exception as e:
                logger.warning(f"No se pudo cerrar la conexion a DNS: {e}")
        try:
            await dispose_engines(self.dns_engine, self.stock_engine, self.store_engine)
        except Exception as e:
            logger.warning(f"No se pudieron liberar los engines: {e}")

    async def _connect_source(self) -> AsyncConnection:
        try:
            return await self.dns_engine.connect()
        except Exception as e:
            raise SourceConnectionException(e) from e
