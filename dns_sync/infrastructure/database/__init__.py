"""
Engines y utilidades de conexion a base de datos.
"""
from dns_sync.infrastructure.database.session import (
    create_engine_from_config,
    dispose_engines,
    rollback_quietly,
)
