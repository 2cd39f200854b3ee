"""
Caso de uso: sincronizar planes de mantenimiento DNS -> Store (upsert).
"""
from typing import List

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncEngine

from dns_sync.application.dto.sync_result_dto import PipelineResultDTO
from dns_sync.domain.entities.maintenance import MaintenanceDNS
from dns_sync.infrastructure.database.session import rollback_quietly
from dns_sync.infrastructure.repositories.maintenance_repository import MaintenanceRepository

PIPELINE_NAME = "maintenances"


class MaintenanceSyncUseCases:
    """
    Reconciliador de mantenimientos.

    Por cada plan busca `id_dns = id`: si existe actualiza todos los campos,
    si no existe lo inserta.
    """

    def __init__(self, engine: AsyncEngine, *, table: str):
        self.engine = engine
        self.table = table

    async def synchronize(self, maintenances: List[MaintenanceDNS]) -> PipelineResultDTO:
        """
        Ejecuta el upsert de cada plan en el orden recibido.

        Un fallo en un registro se registra y no detiene la iteracion.
        """
        logger.info(f"Sincronizando mantenimientos, cantidad: {len(maintenances)}")
        result = PipelineResultDTO(pipeline=PIPELINE_NAME, total=len(maintenances))

        async with self.engine.connect() as conn:
            repository = MaintenanceRepository(conn, table=self.table)
            for maintenance in maintenances:
                try:
                    inserted = await self._synchronize_one(repository, maintenance)
                    if inserted:
                        result.inserted += 1
                    else:
                        result.updated += 1
                except Exception as e:
                    failure = result.record_failure(maintenance.id, maintenance.descripcion, e)
                    logger.error(
                        f"El mantenimiento {maintenance.descripcion} - {maintenance.id} "
                        f"no puede ser actualizado: [{failure.error_code}] {failure.message}"
                    )
                    await rollback_quietly(conn)

        logger.info(
            f"Mantenimientos sincronizados: actualizados={result.updated}, "
            f"insertados={result.inserted}, fallidos={result.failed}"
        )
        return result

    async def _synchronize_one(self, repository: MaintenanceRepository, maintenance: MaintenanceDNS) -> bool:
        """Retorna True si el plan se inserto, False si se actualizo."""
        logger.debug(f"Procesando el mantenimiento: {maintenance.descripcion} - {maintenance.id}")

        existing = await repository.get_by_id_dns(maintenance.id)
        if existing:
            await repository.update(maintenance)
            return False

        await repository.insert(maintenance)
        return True
