"""
Caso de uso: sincronizar existencias de accesorios DNS -> Stock.

Solo actualiza productos existentes; un sku ausente en Stock se reporta
como no encontrado y nunca se inserta.
"""
from typing import List

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncEngine

from dns_sync.application.dto.sync_result_dto import PipelineResultDTO
from dns_sync.domain.entities.accessory import AccessoryDNS
from dns_sync.infrastructure.database.session import rollback_quietly
from dns_sync.infrastructure.repositories.stock_repository import STORE_NAME, StockRepository
from dns_sync.shared.exceptions.sync import ItemNotFoundException

PIPELINE_NAME = "accessories"


class AccessorySyncUseCases:
    """
    Reconciliador de accesorios.

    Abre su propia conexion a Stock para toda la pasada y la libera al
    terminar, aunque fallen registros individuales.
    """

    def __init__(self, engine: AsyncEngine, *, table: str):
        self.engine = engine
        self.table = table

    async def synchronize(self, accessories: List[AccessoryDNS]) -> PipelineResultDTO:
        """
        Actualiza stock_quantity de cada accesorio, en el orden recibido.

        Un fallo en un registro se registra y no detiene la iteracion.
        """
        logger.info(f"Sincronizando accesorios, cantidad: {len(accessories)}")
        result = PipelineResultDTO(pipeline=PIPELINE_NAME, total=len(accessories))

        async with self.engine.connect() as conn:
            repository = StockRepository(conn, table=self.table)
            for accessory in accessories:
                try:
                    await self._synchronize_one(repository, accessory)
                    result.updated += 1
                except Exception as e:
                    failure = result.record_failure(accessory.codigo_stock, accessory.descripcion, e)
                    log = logger.warning if isinstance(e, ItemNotFoundException) else logger.error
                    log(
                        f"El accesorio {accessory.descripcion} - {accessory.codigo_stock} "
                        f"no puede ser actualizado: [{failure.error_code}] {failure.message}"
                    )
                    await rollback_quietly(conn)

        logger.info(
            f"Accesorios sincronizados: actualizados={result.updated}, "
            f"no_encontrados={result.not_found}, fallidos={result.failed}"
        )
        return result

    async def _synchronize_one(self, repository: StockRepository, accessory: AccessoryDNS) -> None:
        logger.debug(f"Procesando el accesorio: {accessory.descripcion} - {accessory.codigo_stock}")

        item = await repository.get_by_sku(accessory.codigo_stock)
        if item is None:
            raise ItemNotFoundException(STORE_NAME, accessory.codigo_stock)

        logger.info(
            f"{accessory.codigo_stock}: stock actual {item.stock_quantity} -> nuevo stock {accessory.stock}"
        )
        affected = await repository.update_stock_quantity(accessory.codigo_stock, accessory.stock)
        if affected == 0:
            logger.warning(f"{accessory.codigo_stock}: el UPDATE no afecto ninguna fila en Stock")
