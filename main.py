"""
Punto de entrada del job de sincronizacion DNS -> Stock / Store.

Uso recomendado:
  - Ejecutar como job programado (cron / scheduler / funcion por evento).
  - `handler(event, context)` ignora ambos argumentos.

Variables de entorno (ver dns_sync/core/config.py):
  - DB_DNS_SERVER, DB_DNS_USER, DB_DNS_PASSWORD
  - DB_STOCK_SERVER, DB_STOCK_USER, DB_STOCK_PASSWORD, DB_STOCK_NAME
  - DB_STORE_SERVER, DB_STORE_USER, DB_STORE_PASSWORD, DB_STORE_NAME

Codigos de salida:
  0 completado, 1 completado con errores por registro, 2 abortado.
  Con SYNC_ALWAYS_EXIT_ZERO=true el codigo es siempre 0.

Ejecución:
  python main.py
"""
import asyncio
import os
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from loguru import logger

# Cargar variables desde .env si existe (junto a este archivo).
load_dotenv(Path(__file__).resolve().parent / ".env", override=False)

from dns_sync.application.dto.sync_result_dto import ExitCode, RunStatus, SyncRunResultDTO
from dns_sync.application.use_cases.sync_run_use_cases import SyncRunUseCases
from dns_sync.core.config import get_settings
from dns_sync.core.logging_config import setup_logging


def _always_exit_zero_from_env() -> bool:
    # Sin Settings valido se lee la variable directamente del entorno.
    value = os.environ.get("SYNC_ALWAYS_EXIT_ZERO", "")
    return value.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def handler(event: Any = None, context: Any = None) -> int:
    """
    Ejecuta una corrida completa y retorna el codigo de salida.
    """
    try:
        settings = get_settings()
    except Exception as e:
        logger.exception(f"Configuracion invalida, el proceso no puede iniciar: {e}")
        if _always_exit_zero_from_env():
            return int(ExitCode.COMPLETED)
        return int(ExitCode.ABORTED)

    setup_logging(settings)
    logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")

    try:
        use_case = SyncRunUseCases.from_settings(settings)
        result = asyncio.run(use_case.run())
    except Exception as e:
        logger.exception(f"El proceso no pudo completarse: {e}")
        result = SyncRunResultDTO(status=RunStatus.ABORTED, error=str(e))

    logger.info(f"Resultado de la corrida: {result.model_dump_json()}")

    if settings.SYNC_ALWAYS_EXIT_ZERO:
        return int(ExitCode.COMPLETED)
    return int(result.exit_code)


def run() -> None:
    sys.exit(handler(None, None))


if __name__ == "__main__":
    run()
