"""
Excepciones relacionadas con la sincronizacion DNS -> Stock / Store.

Nivel registro (se registran y la iteracion continua):
- ItemNotFoundException
- QueryException
- WriteException

Nivel corrida (abortan el resto del proceso):
- SourceConnectionException
- SchemaMismatchException
"""
from typing import Any, Optional

from dns_sync.shared.exceptions.base import AppException


class SyncException(AppException):
    """Excepción base para errores de sincronizacion."""

    def __init__(self, message: str, error_code: str = "SYNC_ERROR", details=None):
        super().__init__(
            message=message,
            error_code=error_code,
            details=details
        )


class ItemNotFoundException(SyncException):
    """El registro no existe en la base destino (no se inserta)."""

    def __init__(self, store: str, key: Any):
        super().__init__(
            message=f"Item not found in {store} database (key={key})",
            error_code="NOT_FOUND",
            details={"store": store, "key": str(key)}
        )


class QueryException(SyncException):
    """Fallo una consulta de lectura contra la base destino."""

    def __init__(self, store: str, key: Any, cause: Exception):
        super().__init__(
            message=f"Lookup on {store} failed for key={key}: {cause}",
            error_code="QUERY_ERROR",
            details={"store": store, "key": str(key)}
        )


class WriteException(SyncException):
    """Fallo un UPDATE o INSERT contra la base destino."""

    def __init__(self, store: str, operation: str, key: Any, cause: Exception):
        super().__init__(
            message=f"{operation} on {store} failed for key={key}: {cause}",
            error_code="WRITE_ERROR",
            details={"store": store, "operation": operation, "key": str(key)}
        )


class SourceConnectionException(SyncException):
    """No fue posible conectar a la base origen DNS."""

    def __init__(self, cause: Exception):
        super().__init__(
            message=f"Cannot connect to DNS source database: {cause}",
            error_code="SOURCE_CONNECTION_ERROR"
        )


class SchemaMismatchException(SyncException):
    """Una fila de origen no cumple el esquema esperado (columna faltante o tipo invalido)."""

    def __init__(self, source: str, errors: list[str], row: Optional[dict] = None):
        super().__init__(
            message=f"Row from {source} does not match expected schema: {'; '.join(errors)}",
            error_code="SCHEMA_MISMATCH",
            details={"source": source, "errors": errors, "row": row or {}}
        )
