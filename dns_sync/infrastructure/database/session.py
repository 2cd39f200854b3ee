"""
Gestión de engines de base de datos.

Cada base (DNS, Stock, Store) tiene su propio engine asincrono construido
a partir de un DatabaseConfig explicito; no hay engines globales.
"""
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from dns_sync.core.config import DatabaseConfig


def _create_engine_args(config: DatabaseConfig) -> dict:
    """
    Construye los argumentos del engine segun el tipo de base de datos.
    SQL Server y MySQL usan pool de conexiones, SQLite no lo soporta.
    """
    args = {
        "echo": config.echo,
    }

    # Configuracion de pool solo para bases servidor
    if not config.url.startswith("sqlite"):
        args.update({
            "pool_size": 1,
            "max_overflow": 0,
            "pool_pre_ping": True,  # Verifica conexion antes de usar
            "pool_recycle": 3600,
        })

    return args


def create_engine_from_config(config: DatabaseConfig) -> AsyncEngine:
    """
    Crea el engine asincrono para la base indicada.

    Args:
        config: Configuracion de conexion

    Returns:
        AsyncEngine: Engine listo para abrir conexiones
    """
    return create_async_engine(config.url, **_create_engine_args(config))


async def rollback_quietly(conn: AsyncConnection) -> None:
    """Descarta la transaccion pendiente; un fallo aqui solo se registra."""
    try:
        await conn.rollback()
    except Exception as e:
        logger.warning(f"No se pudo hacer rollback de la conexion: {e}")


async def dispose_engines(*engines: AsyncEngine) -> None:
    """Cierra las conexiones de todos los engines indicados."""
    for engine in engines:
        await engine.dispose()
