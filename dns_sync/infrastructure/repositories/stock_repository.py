"""
Repositorio de productos en la base Stock (tabla de lookup de WooCommerce).
"""
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from dns_sync.domain.entities.accessory import AccessoryStock
from dns_sync.shared.exceptions.sync import QueryException, WriteException

STORE_NAME = "stock"


class StockRepository:
    """Lectura y actualizacion de existencias por sku."""

    def __init__(self, conn: AsyncConnection, *, table: str):
        self.conn = conn
        self.table = table

    async def get_by_sku(self, sku: str) -> Optional[AccessoryStock]:
        """
        Obtiene el producto con el sku indicado.

        Raises:
            QueryException: si la consulta falla
        """
        try:
            result = await self.conn.execute(
                text(f"SELECT product_id, sku, stock_quantity FROM {self.table} WHERE sku = :sku"),
                {"sku": sku},
            )
            row = result.mappings().first()
        except SQLAlchemyError as e:
            raise QueryException(STORE_NAME, sku, e) from e

        if row is None:
            return None
        return AccessoryStock(
            product_id=row["product_id"],
            sku=row["sku"],
            stock_quantity=row["stock_quantity"],
        )

    async def update_stock_quantity(self, sku: str, stock_quantity: int) -> int:
        """
        Sobrescribe stock_quantity del sku y confirma la sentencia.

        Returns:
            int: filas afectadas reportadas por el driver

        Raises:
            WriteException: si el UPDATE falla
        """
        try:
            result = await self.conn.execute(
                text(f"UPDATE {self.table} SET stock_quantity = :stock_quantity WHERE sku = :sku"),
                {"stock_quantity": stock_quantity, "sku": sku},
            )
            await self.conn.commit()
        except SQLAlchemyError as e:
            raise WriteException(STORE_NAME, "UPDATE", sku, e) from e
        return result.rowcount or 0
