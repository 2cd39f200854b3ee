"""
DTOs con el resultado de cada pipeline y de la corrida completa.
"""
from enum import IntEnum
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from dns_sync.shared.exceptions.sync import ItemNotFoundException


class ExitCode(IntEnum):
    """Codigos de salida del proceso."""
    COMPLETED = 0
    COMPLETED_WITH_ERRORS = 1
    ABORTED = 2


class RunStatus:
    COMPLETED = "completed"
    COMPLETED_WITH_ERRORS = "completed_with_errors"
    ABORTED = "aborted"


class RecordErrorDTO(BaseModel):
    """Fallo de un registro individual."""

    key: str = Field(..., description="Clave del registro (codigo_stock o id)")
    descripcion: Optional[str] = Field(None, description="Descripcion del registro")
    error_code: str = Field(..., description="NOT_FOUND, QUERY_ERROR, WRITE_ERROR, ...")
    message: str = Field(..., description="Mensaje del error")


class PipelineResultDTO(BaseModel):
    """Contadores de una pasada de reconciliacion."""

    pipeline: str
    total: int = 0
    updated: int = 0
    inserted: int = 0
    not_found: int = 0
    failed: int = 0
    errors: List[RecordErrorDTO] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """
        True si algun registro fallo por consulta/escritura.
        Los no encontrados son un resultado esperado y no cuentan.
        """
        return self.failed > 0

    def record_failure(self, key: Any, descripcion: Optional[str], error: Exception) -> RecordErrorDTO:
        """Contabiliza el fallo de un registro (no encontrado o error)."""
        if isinstance(error, ItemNotFoundException):
            self.not_found += 1
        else:
            self.failed += 1

        record_error = RecordErrorDTO(
            key=str(key),
            descripcion=descripcion,
            error_code=getattr(error, "error_code", "UNEXPECTED_ERROR"),
            message=getattr(error, "message", str(error)),
        )
        self.errors.append(record_error)
        return record_error


class SyncRunResultDTO(BaseModel):
    """Resultado de la corrida completa."""

    status: str = RunStatus.COMPLETED
    accessories: Optional[PipelineResultDTO] = None
    maintenances: Optional[PipelineResultDTO] = None
    error: Optional[str] = None

    @property
    def exit_code(self) -> ExitCode:
        if self.status == RunStatus.ABORTED:
            return ExitCode.ABORTED
        if self.status == RunStatus.COMPLETED_WITH_ERRORS:
            return ExitCode.COMPLETED_WITH_ERRORS
        return ExitCode.COMPLETED
