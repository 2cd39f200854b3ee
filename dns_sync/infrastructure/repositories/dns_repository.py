"""
Repositorio de lectura de la base origen DNS (SQL Server).
Solo ejecuta consultas de lectura sobre las vistas de accesorios y mantenimientos.
"""
from typing import Any, Dict, List

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection


class DNSRepository:
    """Lector de las vistas de DNS. Comparte una conexion para ambas lecturas."""

    def __init__(
        self,
        conn: AsyncConnection,
        *,
        accessories_view: str,
        maintenances_view: str,
    ):
        self.conn = conn
        self.accessories_view = accessories_view
        self.maintenances_view = maintenances_view

    async def fetch_accessory_rows(self) -> List[Dict[str, Any]]:
        """
        Obtiene todas las filas de stock de accesorios (una por codigo y bodega).
        """
        return await self._fetch_all(f"SELECT * FROM {self.accessories_view}")

    async def fetch_maintenance_rows(self) -> List[Dict[str, Any]]:
        """
        Obtiene todos los planes de mantenimiento.
        """
        return await self._fetch_all(f"SELECT * FROM {self.maintenances_view}")

    async def _fetch_all(self, sql: str) -> List[Dict[str, Any]]:
        result = await self.conn.execute(text(sql))
        return [dict(row) for row in result.mappings().all()]
