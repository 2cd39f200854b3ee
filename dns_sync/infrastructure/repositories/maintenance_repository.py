"""
Repositorio de planes de mantenimiento en la base Store.
"""
from typing import Any, Dict, Optional

from sqlalchemy import Numeric, bindparam, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from dns_sync.domain.entities.maintenance import MaintenanceDNS
from dns_sync.shared.exceptions.sync import QueryException, WriteException

STORE_NAME = "store"


def _params(maintenance: MaintenanceDNS) -> Dict[str, Any]:
    # `notas` de DNS se guarda como `operacion` en Store
    return {
        "modelo": maintenance.modelo,
        "ano": maintenance.ano,
        "descripcion": maintenance.descripcion,
        "kilometraje": maintenance.kilometraje,
        "operacion": maintenance.notas,
        "precio": maintenance.precio,
        "id_dns": maintenance.id,
    }


class MaintenanceRepository:
    """Busqueda, actualizacion e insercion de mantenimientos por id_dns."""

    def __init__(self, conn: AsyncConnection, *, table: str):
        self.conn = conn
        self.table = table

    async def get_by_id_dns(self, id_dns: int) -> Optional[Dict[str, Any]]:
        """
        Obtiene el mantenimiento cuyo id_dns coincide.

        Raises:
            QueryException: si la consulta falla
        """
        try:
            result = await self.conn.execute(
                text(f"SELECT id_dns, id, descripcion FROM {self.table} WHERE id_dns = :id_dns"),
                {"id_dns": id_dns},
            )
            row = result.mappings().first()
        except SQLAlchemyError as e:
            raise QueryException(STORE_NAME, id_dns, e) from e
        return dict(row) if row is not None else None

    async def update(self, maintenance: MaintenanceDNS) -> None:
        """Actualiza todos los campos del mantenimiento existente."""
        await self._write(
            "UPDATE",
            maintenance,
            f"UPDATE {self.table} SET modelo = :modelo, ano = :ano, descripcion = :descripcion, "
            f"kilometraje = :kilometraje, operacion = :operacion, precio = :precio "
            f"WHERE id_dns = :id_dns",
        )

    async def insert(self, maintenance: MaintenanceDNS) -> None:
        """Inserta un mantenimiento nuevo con id_dns = id de DNS."""
        await self._write(
            "INSERT",
            maintenance,
            f"INSERT INTO {self.table} (modelo, ano, descripcion, kilometraje, operacion, precio, id_dns) "
            f"VALUES (:modelo, :ano, :descripcion, :kilometraje, :operacion, :precio, :id_dns)",
        )

    async def _write(self, operation: str, maintenance: MaintenanceDNS, sql: str) -> None:
        try:
            statement = text(sql).bindparams(bindparam("precio", type_=Numeric()))
            await self.conn.execute(statement, _params(maintenance))
            await self.conn.commit()
        except SQLAlchemyError as e:
            raise WriteException(STORE_NAME, operation, maintenance.id, e) from e
