"""
Configuración de fixtures para pytest.

Las tres bases (DNS, Stock y Store) se simulan con archivos SQLite
temporales usando el mismo camino de código (SQLAlchemy async).
"""
from pathlib import Path
from typing import Any, AsyncGenerator, Dict, List

import pytest
import pytest_asyncio
from loguru import logger
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from dns_sync.core.config import DatabaseConfig
from dns_sync.infrastructure.database.session import create_engine_from_config


STOCK_TABLE = "wp_wc_product_meta_lookup"
STORE_TABLE = "mantenimiento"
ACCESSORIES_VIEW = "v_accesorios_stock"
MAINTENANCES_VIEW = "v_tall_crmv_planes_mantenimiento"

STOCK_DDL = f"""
CREATE TABLE {STOCK_TABLE} (
    product_id     INTEGER PRIMARY KEY,
    sku            TEXT NOT NULL,
    stock_quantity INTEGER
)
"""

STORE_DDL = f"""
CREATE TABLE {STORE_TABLE} (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    id_dns      INTEGER,
    modelo      TEXT,
    ano         INTEGER,
    descripcion TEXT,
    kilometraje INTEGER,
    operacion   TEXT,
    precio      NUMERIC
)
"""

DNS_DDL = [
    f"""
    CREATE TABLE {ACCESSORIES_VIEW} (
        codigo                 TEXT,
        bodega                 TEXT,
        des_bodega             TEXT,
        descripcion            TEXT,
        valor_unitario_sin_iva REAL,
        valorconiva            REAL,
        stock                  INTEGER
    )
    """,
    f"""
    CREATE TABLE {MAINTENANCES_VIEW} (
        id_plan_mantenimiento_enca INTEGER,
        modelo                     TEXT,
        ano                        INTEGER,
        DESCRIPCION                TEXT,
        kilometraje                INTEGER,
        notas                      TEXT,
        precio                     REAL
    )
    """,
]


def _sqlite_config(name: str, path: Path) -> DatabaseConfig:
    return DatabaseConfig(name=name, url=f"sqlite+aiosqlite:///{path}")


async def _create_engine(name: str, path: Path, ddl: List[str]) -> AsyncEngine:
    engine = create_engine_from_config(_sqlite_config(name, path))
    async with engine.begin() as conn:
        for statement in ddl:
            await conn.execute(text(statement))
    return engine


@pytest_asyncio.fixture
async def stock_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    engine = await _create_engine("stock", tmp_path / "stock.db", [STOCK_DDL])
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def store_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    engine = await _create_engine("store", tmp_path / "store.db", [STORE_DDL])
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def dns_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    engine = await _create_engine("dns", tmp_path / "dns.db", DNS_DDL)
    yield engine
    await engine.dispose()


async def insert_rows(engine: AsyncEngine, table: str, rows: List[Dict[str, Any]]) -> None:
    """Inserta filas de prueba (todas con las mismas columnas)."""
    if not rows:
        return
    columns = list(rows[0].keys())
    sql = (
        f"INSERT INTO {table} ({', '.join(columns)}) "
        f"VALUES ({', '.join(':' + c for c in columns)})"
    )
    async with engine.begin() as conn:
        await conn.execute(text(sql), rows)


async def fetch_rows(engine: AsyncEngine, sql: str) -> List[Dict[str, Any]]:
    async with engine.connect() as conn:
        result = await conn.execute(text(sql))
        return [dict(row) for row in result.mappings().all()]


async def add_failing_trigger(engine: AsyncEngine, table: str, event: str, condition: str) -> None:
    """Crea un trigger que aborta la escritura cuando se cumple la condicion."""
    async with engine.begin() as conn:
        await conn.execute(text(
            f"CREATE TRIGGER fail_{event.lower()}_{table} BEFORE {event} ON {table} "
            f"WHEN {condition} "
            f"BEGIN SELECT RAISE(ABORT, 'simulated write failure'); END"
        ))


@pytest.fixture
def log_messages():
    """Captura los mensajes de loguru emitidos durante el test."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    yield messages
    logger.remove(handler_id)
