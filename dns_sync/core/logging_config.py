"""
Configuracion de logging (loguru) para el job.
"""
import sys

from loguru import logger

from dns_sync.core.config import Settings


def setup_logging(settings: Settings) -> None:
    """
    Configura los sinks de loguru.

    - stderr con el nivel configurado
    - archivo rotativo si LOG_FILE esta definido
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message}",
    )

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            rotation="10 MB",
            retention="10 days",
            level=settings.LOG_LEVEL,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{function}:{line} | {message}",
        )

    logger.debug(f"Logging configurado (nivel={settings.LOG_LEVEL}, archivo={settings.LOG_FILE or '-'})")
