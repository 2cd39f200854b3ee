"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .dns_row_dto import AccessoryRowDTO, MaintenanceRowDTO, decode_row
from .sync_result_dto import (
    ExitCode,
    RunStatus,
    RecordErrorDTO,
    PipelineResultDTO,
    SyncRunResultDTO
)

__all__ = [
    "AccessoryRowDTO",
    "MaintenanceRowDTO",
    "decode_row",
    "ExitCode",
    "RunStatus",
    "RecordErrorDTO",
    "PipelineResultDTO",
    "SyncRunResultDTO",
]
